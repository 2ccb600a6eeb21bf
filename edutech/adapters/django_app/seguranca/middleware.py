"""
Middleware de autenticação por Bearer token.

Deve vir depois de AuthenticationMiddleware: substitui request.user
quando o header Authorization traz um token válido.
"""

import logging

import jwt
from django.contrib.auth import get_user_model
from django.http import JsonResponse

from .tokens import TokenService

logger = logging.getLogger(__name__)


PREFIXO = "Bearer "


class JWTAuthenticationMiddleware:
    """
    Autentica requests com `Authorization: Bearer <token>`.

    - Token válido: request.user = usuário do subject
    - Token expirado: 401 imediato
    - Token inválido ou usuário inexistente: segue sem autenticação
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.token_service = TokenService()

    def __call__(self, request):
        header = request.META.get('HTTP_AUTHORIZATION', '')

        if header.startswith(PREFIXO):
            token = header[len(PREFIXO):].strip()
            try:
                sujeito = self.token_service.obter_sujeito(token)
            except jwt.ExpiredSignatureError:
                return JsonResponse(
                    {
                        'success': False,
                        'error': "Token de autenticação expirado. Faça login novamente.",
                    },
                    status=401,
                )
            except jwt.InvalidTokenError as e:
                logger.debug(f"Token inválido ignorado: {e}")
            else:
                usuario = self._carregar_usuario(sujeito)
                if usuario is not None:
                    request.user = usuario

        return self.get_response(request)

    def _carregar_usuario(self, username: str):
        User = get_user_model()
        usuario = User.objects.filter(username=username, is_active=True).first()
        if usuario is None:
            logger.debug(f"Token com usuário inexistente: {username}")
        return usuario
