"""
Emissão e verificação de tokens JWT (HS256).

Claims:
- iss: edutech_api
- sub: username do usuário Django
- iat / exp: emissão e expiração (JWT_EXPIRATION_SECONDS)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt
from django.conf import settings

logger = logging.getLogger(__name__)


ISSUER = "edutech_api"
ALGORITHM = "HS256"
EXPIRACAO_PADRAO_SEGUNDOS = 7200


class TokenService:
    """
    Gera e valida tokens de acesso.

    Segredo e expiração vêm dos settings (JWT_SECRET,
    JWT_EXPIRATION_SECONDS) quando não informados.

    Example:
        service = TokenService()
        token = service.gerar_token("secretaria")
        service.obter_sujeito(token)  # "secretaria"
    """

    def __init__(self, segredo: Optional[str] = None, expiracao_segundos: Optional[int] = None):
        self.segredo = segredo or getattr(settings, 'JWT_SECRET', None) or settings.SECRET_KEY
        self.expiracao_segundos = int(
            expiracao_segundos
            if expiracao_segundos is not None
            else getattr(settings, 'JWT_EXPIRATION_SECONDS', EXPIRACAO_PADRAO_SEGUNDOS)
        )

    def gerar_token(self, sujeito: str) -> str:
        agora = datetime.now(timezone.utc)
        payload = {
            "iss": ISSUER,
            "sub": sujeito,
            "iat": agora,
            "exp": agora + timedelta(seconds=self.expiracao_segundos),
        }

        token = jwt.encode(payload, self.segredo, algorithm=ALGORITHM)
        logger.debug(f"Token emitido para {sujeito}")
        return token

    def obter_sujeito(self, token: str) -> str:
        """
        Valida assinatura, emissor e expiração e retorna o subject.

        Raises:
            jwt.ExpiredSignatureError: Token expirado
            jwt.InvalidTokenError: Qualquer outra falha de validação
        """
        payload = jwt.decode(
            token,
            self.segredo,
            algorithms=[ALGORITHM],
            issuer=ISSUER,
            options={"require": ["exp", "iss", "sub"]},
        )
        return payload["sub"]

    def token_valido(self, token: str) -> bool:
        try:
            self.obter_sujeito(token)
        except jwt.InvalidTokenError:
            return False
        return True
