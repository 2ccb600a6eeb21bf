"""
Validadores de cadastro de matrícula.

Executados em ordem por CadastrarMatriculaService:
1. aluno ativo
2. curso ativo
3. turma pertence ao curso
4. turma aceita matrículas
5. turma com vagas
6. aluno sem matrícula vigente no curso
"""

from dataclasses import dataclass, field
from typing import List, Optional

from edutech.core.shared.exceptions import ValidationError
from edutech.core.alunos.entities import AlunoEntity
from edutech.core.cursos.entities import CursoEntity
from edutech.core.turmas.entities import TurmaEntity

from .entities import MatriculaEntity


@dataclass(frozen=True)
class ContextoCadastroMatricula:
    """
    Contexto de cadastro de matrícula.

    Attributes:
        aluno: Aluno carregado
        curso: Curso informado ou derivado da turma
        turma: Turma carregada (opcional)
        matriculas_do_aluno: Matrículas já existentes do aluno
    """

    aluno: AlunoEntity
    curso: CursoEntity
    turma: Optional[TurmaEntity] = None
    matriculas_do_aluno: List[MatriculaEntity] = field(default_factory=list)


def validar_aluno_ativo(contexto: ContextoCadastroMatricula) -> None:
    if not contexto.aluno.esta_ativo:
        raise ValidationError("Aluno inativo não pode ser matriculado", field="aluno_id")


def validar_curso_ativo(contexto: ContextoCadastroMatricula) -> None:
    if not contexto.curso.esta_ativo:
        raise ValidationError("Curso inativo para novas matriculas", field="curso_id")


def validar_turma_pertence_ao_curso(contexto: ContextoCadastroMatricula) -> None:
    turma = contexto.turma
    if turma is None:
        return

    if not turma.pertence_ao_curso(contexto.curso.id):
        raise ValidationError(
            f"A turma {turma.codigo} não pertence ao curso {contexto.curso.id}",
            field="turma_id"
        )


def validar_turma_aceita_matriculas(contexto: ContextoCadastroMatricula) -> None:
    turma = contexto.turma
    if turma is not None and not turma.aceita_matriculas:
        raise ValidationError(
            f"A turma {turma.codigo} não está aceitando matrículas",
            field="turma_id"
        )


def validar_turma_com_vagas(contexto: ContextoCadastroMatricula) -> None:
    turma = contexto.turma
    if turma is not None and turma.vagas_disponiveis <= 0:
        raise ValidationError(f"A turma {turma.codigo} não possui vagas disponíveis", field="turma_id")


def validar_aluno_sem_matricula_vigente(contexto: ContextoCadastroMatricula) -> None:
    for matricula in contexto.matriculas_do_aluno:
        if matricula.curso.id == contexto.curso.id and matricula.esta_vigente:
            raise ValidationError("Aluno já possui matrícula ativa neste curso")


VALIDADORES_CADASTRO = (
    validar_aluno_ativo,
    validar_curso_ativo,
    validar_turma_pertence_ao_curso,
    validar_turma_aceita_matriculas,
    validar_turma_com_vagas,
    validar_aluno_sem_matricula_vigente,
)
