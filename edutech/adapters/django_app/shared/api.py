"""
Infraestrutura comum das API Views JSON.

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}

Autenticação:
- Bearer token JWT (JWTAuthenticationMiddleware popula request.user)
"""

from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional
import json
import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.dateparse import parse_date, parse_time
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from edutech.core.shared.exceptions import DomainException, ValidationError
from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO
from edutech.config.container import get_container

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def paginated_response(result: PaginatedResultDTO) -> JsonResponse:
    """Resposta com os itens em data e os totais em meta."""
    payload = result.to_dict()
    items = payload.pop('items')
    return json_response(success=True, data=items, meta=payload)


def no_content() -> HttpResponse:
    return HttpResponse(status=204)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("JSON inválido: objeto esperado")

    return data


def get_pagination(request: HttpRequest) -> PaginationParams:
    try:
        return PaginationParams(
            page=int(request.GET.get('page', 1)),
            per_page=int(request.GET.get('per_page', 20)),
        )
    except (TypeError, ValueError):
        raise ValidationError("Parâmetros de paginação inválidos")


def to_date(value: Optional[str], field: str) -> Optional[date]:
    """Converte 'AAAA-MM-DD' em date (None se ausente)."""
    if value in (None, ''):
        return None
    parsed = parse_date(str(value)) if not isinstance(value, date) else value
    if parsed is None:
        raise ValidationError(f"Data inválida: {value}", field=field)
    return parsed


def to_time(value: Optional[str], field: str) -> Optional[time]:
    """Converte 'HH:MM' em time (None se ausente)."""
    if value in (None, ''):
        return None
    parsed = parse_time(str(value))
    if parsed is None:
        raise ValidationError(f"Horário inválido: {value}", field=field)
    return parsed


def to_int(value: Any, field: str) -> Optional[int]:
    if value in (None, ''):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Valor numérico inválido: {value}", field=field)


def to_decimal(value: Any, field: str) -> Optional[Decimal]:
    if value in (None, ''):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Valor numérico inválido: {value}", field=field)


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Exigência de autenticação (401)
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    requires_auth = True

    def dispatch(self, request: HttpRequest, *args, **kwargs):
        user = getattr(request, 'user', None)
        if self.requires_auth and not (user and user.is_authenticated):
            return json_response(
                success=False,
                error="Autenticação necessária",
                status=401
            )
        return super().dispatch(request, *args, **kwargs)

    def http_method_not_allowed(self, request: HttpRequest, *args, **kwargs):
        response = json_response(
            success=False,
            error=f"Método {request.method} não permitido",
            status=405
        )
        response['Allow'] = ', '.join(self._allowed_methods())
        return response

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container (provider Factory)."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        ValidationError e JSON malformado → 400; demais → 500.
        """
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=str(e),
                status=400,
                meta={'field': e.field} if e.field else None
            )

        if isinstance(e, DomainException):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        if isinstance(e, ValueError):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )
