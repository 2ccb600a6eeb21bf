"""
Validadores cruzados do Domínio de Turmas.
"""

from dataclasses import dataclass
from typing import Optional

from edutech.core.shared.exceptions import ValidationError
from edutech.core.cursos.entities import CursoEntity
from edutech.core.professores.entities import ProfessorEntity

from .entities import TurmaEntity


@dataclass(frozen=True)
class ContextoValidacaoTurma:
    """
    Contexto de cadastro/atualização de turma.

    Attributes:
        codigo: Código pretendido
        turma_id: Turma em edição (None no cadastro)
        com_mesmo_codigo: Turma já existente com o código pretendido
    """

    codigo: Optional[str]
    turma_id: Optional[str] = None
    com_mesmo_codigo: Optional[TurmaEntity] = None


@dataclass(frozen=True)
class ContextoVinculoTurma:
    """
    Contexto de vínculo: turma e o professor ou curso envolvido.

    Também usado para iniciar a turma (apenas `turma` preenchida).
    """

    turma: TurmaEntity
    professor: Optional[ProfessorEntity] = None
    curso: Optional[CursoEntity] = None


def validar_codigo_unico(contexto: ContextoValidacaoTurma) -> None:
    existente = contexto.com_mesmo_codigo
    if existente is not None and existente.id != contexto.turma_id:
        raise ValidationError(
            f"Já existe uma turma com o código {contexto.codigo}",
            field="codigo"
        )


def validar_professor_ativo(contexto: ContextoVinculoTurma) -> None:
    if not contexto.professor.esta_ativo:
        raise ValidationError(
            "Não é possível vincular um professor com status diferente de ATIVO à turma."
        )


def validar_professor_vinculado(contexto: ContextoVinculoTurma) -> None:
    professor = contexto.turma.professor
    if professor is None or professor.id != contexto.professor.id:
        raise ValidationError("Este professor não está vinculado à turma")


def validar_curso_ativo(contexto: ContextoVinculoTurma) -> None:
    if not contexto.curso.esta_ativo:
        raise ValidationError("Não é possível vincular um curso inativo à turma.")


def validar_curso_vinculado(contexto: ContextoVinculoTurma) -> None:
    if not contexto.turma.pertence_ao_curso(contexto.curso.id):
        raise ValidationError("Este curso não está vinculado à turma")


def validar_turma_com_curso(contexto: ContextoVinculoTurma) -> None:
    if contexto.turma.curso is None:
        raise ValidationError("A turma precisa ter um curso vinculado para ser iniciada")


def validar_turma_com_professor(contexto: ContextoVinculoTurma) -> None:
    if contexto.turma.professor is None:
        raise ValidationError("A turma precisa ter um professor vinculado para ser iniciada")


VALIDADORES_CADASTRO = (
    validar_codigo_unico,
)

VALIDADORES_ATUALIZACAO = (
    validar_codigo_unico,
)

VALIDADORES_VINCULO_PROFESSOR = (
    validar_professor_ativo,
)

VALIDADORES_DESVINCULO_PROFESSOR = (
    validar_professor_vinculado,
)

VALIDADORES_VINCULO_CURSO = (
    validar_curso_ativo,
)

VALIDADORES_DESVINCULO_CURSO = (
    validar_curso_vinculado,
)

VALIDADORES_INICIO = (
    validar_turma_com_curso,
    validar_turma_com_professor,
)
