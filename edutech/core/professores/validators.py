"""
Validadores de unicidade para cadastro e atualização de professores.
"""

from dataclasses import dataclass
from typing import Optional

from edutech.core.shared.exceptions import ValidationError

from .entities import ProfessorEntity


@dataclass(frozen=True)
class ContextoValidacaoProfessor:
    """Professores já cadastrados com o mesmo CPF/e-mail do pedido."""

    professor_id: Optional[str] = None
    com_mesmo_email: Optional[ProfessorEntity] = None
    com_mesmo_cpf: Optional[ProfessorEntity] = None


def validar_cpf_unico(contexto: ContextoValidacaoProfessor) -> None:
    existente = contexto.com_mesmo_cpf
    if existente is not None and existente.id != contexto.professor_id:
        raise ValidationError("CPF já cadastrado", field="cpf")


def validar_email_unico(contexto: ContextoValidacaoProfessor) -> None:
    existente = contexto.com_mesmo_email
    if existente is not None and existente.id != contexto.professor_id:
        raise ValidationError("E-mail já cadastrado", field="email")


VALIDADORES_CADASTRO = (
    validar_cpf_unico,
    validar_email_unico,
)

VALIDADORES_ATUALIZACAO = (
    validar_email_unico,
)
