"""
Data Transfer Objects (DTOs) do Domínio de Matrículas.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from .entities import MatriculaEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CadastrarMatriculaInputDTO:
    """
    DTO de entrada para matricular aluno.

    Attributes:
        aluno_id: Aluno a matricular
        data_matricula: Data de efetivação
        turma_id: Turma (o curso é derivado dela quando curso_id ausente)
        curso_id: Curso (obrigatório se não houver turma)
    """

    aluno_id: str
    data_matricula: date
    turma_id: Optional[str] = None
    curso_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "aluno_id": self.aluno_id,
            "data_matricula": self.data_matricula.isoformat() if self.data_matricula else None,
            "turma_id": self.turma_id,
            "curso_id": self.curso_id,
        }


@dataclass(frozen=True)
class ConcluirMatriculaInputDTO:
    matricula_id: str
    nota_final: Optional[Decimal] = None


@dataclass(frozen=True)
class CancelarMatriculaInputDTO:
    """DTO para cancelamento. motivo: nome de MotivoCancelamento."""

    matricula_id: str
    motivo: Optional[str] = None


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class MatriculaResumoDTO:
    """DTO resumido: matrícula com nomes de aluno, curso e turma."""

    id: str
    data_matricula: date
    aluno_id: str
    nome_aluno: str
    curso_id: str
    nome_curso: str
    turma_id: Optional[str]
    codigo_turma: Optional[str]
    status: str

    @classmethod
    def from_entity(cls, entity: MatriculaEntity) -> "MatriculaResumoDTO":
        return cls(
            id=entity.id,
            data_matricula=entity.data_matricula,
            aluno_id=entity.aluno.id,
            nome_aluno=entity.aluno.nome,
            curso_id=entity.curso.id,
            nome_curso=entity.curso.nome,
            turma_id=entity.turma.id if entity.turma else None,
            codigo_turma=entity.turma.codigo if entity.turma else None,
            status=entity.status.name,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "data_matricula": self.data_matricula.isoformat(),
            "aluno_id": self.aluno_id,
            "nome_aluno": self.nome_aluno,
            "curso_id": self.curso_id,
            "nome_curso": self.nome_curso,
            "turma_id": self.turma_id,
            "codigo_turma": self.codigo_turma,
            "status": self.status,
        }


@dataclass
class MatriculaDetalhesDTO:
    """DTO de saída completo de uma matrícula."""

    id: str
    data_matricula: date
    data_conclusao: Optional[date]
    nota_final: Optional[Decimal]
    status: str
    motivo_cancelamento: Optional[str]
    aluno_id: str
    nome_aluno: str
    curso_id: str
    nome_curso: str
    turma_id: Optional[str]
    codigo_turma: Optional[str]
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: MatriculaEntity) -> "MatriculaDetalhesDTO":
        return cls(
            id=entity.id,
            data_matricula=entity.data_matricula,
            data_conclusao=entity.data_conclusao,
            nota_final=entity.nota_final,
            status=entity.status.name,
            motivo_cancelamento=(
                entity.motivo_cancelamento.name if entity.motivo_cancelamento else None
            ),
            aluno_id=entity.aluno.id,
            nome_aluno=entity.aluno.nome,
            curso_id=entity.curso.id,
            nome_curso=entity.curso.nome,
            turma_id=entity.turma.id if entity.turma else None,
            codigo_turma=entity.turma.codigo if entity.turma else None,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "data_matricula": self.data_matricula.isoformat(),
            "data_conclusao": self.data_conclusao.isoformat() if self.data_conclusao else None,
            "nota_final": str(self.nota_final) if self.nota_final is not None else None,
            "status": self.status,
            "motivo_cancelamento": self.motivo_cancelamento,
            "aluno_id": self.aluno_id,
            "nome_aluno": self.nome_aluno,
            "curso_id": self.curso_id,
            "nome_curso": self.nome_curso,
            "turma_id": self.turma_id,
            "codigo_turma": self.codigo_turma,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }
