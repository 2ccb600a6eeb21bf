"""
Validadores cruzados do Domínio de Cursos.

Tuplas registradas:
- VALIDADORES_CADASTRO / VALIDADORES_ATUALIZACAO: nome único
- VALIDADORES_VINCULO_PROFESSOR: curso ativo, professor ativo
- VALIDADORES_DESVINCULO_PROFESSOR: professor vinculado ao curso
"""

from dataclasses import dataclass
from typing import Optional

from edutech.core.shared.exceptions import ValidationError
from edutech.core.professores.entities import ProfessorEntity

from .entities import CursoEntity


@dataclass(frozen=True)
class ContextoValidacaoCurso:
    """
    Contexto de cadastro/atualização de curso.

    Attributes:
        nome: Nome pretendido
        curso_id: Curso em edição (None no cadastro)
        com_mesmo_nome: Curso já existente com o nome pretendido
    """

    nome: Optional[str]
    curso_id: Optional[str] = None
    com_mesmo_nome: Optional[CursoEntity] = None


@dataclass(frozen=True)
class ContextoVinculoProfessor:
    """Curso e professor já carregados pelo use case."""

    curso: CursoEntity
    professor: ProfessorEntity


def validar_nome_unico(contexto: ContextoValidacaoCurso) -> None:
    existente = contexto.com_mesmo_nome
    if existente is not None and existente.id != contexto.curso_id:
        raise ValidationError(
            f"Já existe um curso com o nome {contexto.nome}",
            field="nome"
        )


def validar_curso_ativo(contexto: ContextoVinculoProfessor) -> None:
    if not contexto.curso.esta_ativo:
        raise ValidationError("Não é possível vincular professor a um curso inativo.")


def validar_professor_ativo(contexto: ContextoVinculoProfessor) -> None:
    if not contexto.professor.esta_ativo:
        raise ValidationError(
            "Não é possível vincular um professor com status diferente de ATIVO ao curso."
        )


def validar_professor_vinculado(contexto: ContextoVinculoProfessor) -> None:
    if not contexto.curso.possui_professor(contexto.professor.id):
        raise ValidationError("Este professor não esta vinculado ao curso")


VALIDADORES_CADASTRO = (
    validar_nome_unico,
)

VALIDADORES_ATUALIZACAO = (
    validar_nome_unico,
)

VALIDADORES_VINCULO_PROFESSOR = (
    validar_curso_ativo,
    validar_professor_ativo,
)

VALIDADORES_DESVINCULO_PROFESSOR = (
    validar_professor_vinculado,
)
