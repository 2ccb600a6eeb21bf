"""
Validadores de unicidade para cadastro e atualização de alunos.

O use case monta o contexto com os alunos já encontrados pelo mesmo
e-mail/CPF; os validadores apenas comparam identidades.
"""

from dataclasses import dataclass
from typing import Optional

from edutech.core.shared.exceptions import ValidationError

from .entities import AlunoEntity


@dataclass(frozen=True)
class ContextoValidacaoAluno:
    """
    Contexto de validação de aluno.

    Attributes:
        aluno_id: ID do aluno em edição (None no cadastro)
        com_mesmo_email: Aluno já cadastrado com o e-mail informado
        com_mesmo_cpf: Aluno já cadastrado com o CPF informado
    """

    aluno_id: Optional[str] = None
    com_mesmo_email: Optional[AlunoEntity] = None
    com_mesmo_cpf: Optional[AlunoEntity] = None


def validar_email_unico(contexto: ContextoValidacaoAluno) -> None:
    existente = contexto.com_mesmo_email
    if existente is not None and existente.id != contexto.aluno_id:
        raise ValidationError("E-mail já cadastrado", field="email")


def validar_cpf_unico(contexto: ContextoValidacaoAluno) -> None:
    existente = contexto.com_mesmo_cpf
    if existente is not None and existente.id != contexto.aluno_id:
        raise ValidationError("CPF já cadastrado", field="cpf")


VALIDADORES_CADASTRO = (
    validar_email_unico,
    validar_cpf_unico,
)

VALIDADORES_ATUALIZACAO = (
    validar_email_unico,
)
