"""
API de autenticação.

POST /api/auth/login/
    Body: {"login": "username ou e-mail", "senha": "string"}
    200: {"success": true, "data": {"token": "...", "tipo": "Bearer"}}
    401: credenciais inválidas
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.http import HttpRequest

from edutech.core.shared.exceptions import ValidationError

from ..shared.api import BaseAPIView, json_response
from .tokens import TokenService

logger = logging.getLogger(__name__)


class LoginAPIView(BaseAPIView):
    """POST /api/auth/login/ - Troca credenciais por um token JWT"""

    requires_auth = False

    def post(self, request: HttpRequest):
        try:
            data = self.parse_body(request)

            login = (data.get('login') or '').strip()
            senha = data.get('senha') or ''

            if not login:
                raise ValidationError("Login é obrigatório", field="login")
            if not senha:
                raise ValidationError("Senha é obrigatória", field="senha")

            usuario = authenticate(request, username=self._resolver_username(login), password=senha)

            if usuario is None:
                logger.info(f"API: Falha de login para {login}")
                return json_response(success=False, error="Credenciais inválidas", status=401)

            token = TokenService().gerar_token(usuario.get_username())

            logger.info(f"API: Login realizado: {usuario.get_username()}")
            return json_response(success=True, data={'token': token, 'tipo': 'Bearer'})

        except Exception as e:
            return self.handle_exception(e)

    def _resolver_username(self, login: str) -> str:
        """Aceita e-mail no lugar do username."""
        if '@' not in login:
            return login

        User = get_user_model()
        usuario = User.objects.filter(email__iexact=login).first()
        return usuario.get_username() if usuario else login
