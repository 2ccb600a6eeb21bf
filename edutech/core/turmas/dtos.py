"""
Data Transfer Objects (DTOs) do Domínio de Turmas.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from edutech.core.cursos.dtos import CursoResumoDTO
from edutech.core.professores.dtos import ProfessorResumoDTO

from .entities import TurmaEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CadastrarTurmaInputDTO:
    """
    DTO de entrada para cadastrar turma.

    Attributes:
        codigo: Código da turma (único)
        data_inicio / data_fim: Período
        horario_inicio / horario_fim: Horário das aulas
        vagas_totais: Capacidade
        modalidade: Nome da modalidade (EAD, PRESENCIAL, HIBRIDO)
    """

    codigo: str
    data_inicio: date
    data_fim: date
    horario_inicio: time
    horario_fim: time
    vagas_totais: int
    modalidade: str

    def to_dict(self) -> dict:
        return {
            "codigo": self.codigo,
            "data_inicio": self.data_inicio.isoformat() if self.data_inicio else None,
            "data_fim": self.data_fim.isoformat() if self.data_fim else None,
            "horario_inicio": self.horario_inicio.isoformat() if self.horario_inicio else None,
            "horario_fim": self.horario_fim.isoformat() if self.horario_fim else None,
            "vagas_totais": self.vagas_totais,
            "modalidade": self.modalidade,
        }


@dataclass(frozen=True)
class AtualizarTurmaInputDTO:
    """DTO de entrada para atualização parcial de turma."""

    turma_id: str
    codigo: Optional[str] = None
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    horario_inicio: Optional[time] = None
    horario_fim: Optional[time] = None
    vagas_totais: Optional[int] = None
    modalidade: Optional[str] = None


@dataclass(frozen=True)
class VincularProfessorTurmaInputDTO:
    """DTO para vincular/desvincular professor de uma turma."""

    turma_id: str
    professor_id: str


@dataclass(frozen=True)
class VincularCursoTurmaInputDTO:
    """DTO para vincular/desvincular curso de uma turma."""

    turma_id: str
    curso_id: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class TurmaResumoDTO:
    """DTO resumido para listagens de turmas."""

    id: str
    codigo: str
    data_inicio: date
    data_fim: date
    status: str

    @classmethod
    def from_entity(cls, entity: TurmaEntity) -> "TurmaResumoDTO":
        return cls(
            id=entity.id,
            codigo=entity.codigo,
            data_inicio=entity.data_inicio,
            data_fim=entity.data_fim,
            status=entity.status.name,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "codigo": self.codigo,
            "data_inicio": self.data_inicio.isoformat(),
            "data_fim": self.data_fim.isoformat(),
            "status": self.status,
        }


@dataclass
class TurmaDetalhesDTO:
    """
    DTO de saída completo de uma turma.

    Inclui vagas disponíveis e os resumos de curso e professor vinculados.
    """

    id: str
    codigo: str
    data_inicio: date
    data_fim: date
    horario_inicio: time
    horario_fim: time
    modalidade: str
    vagas_totais: int
    vagas_disponiveis: int
    status: str
    criado_em: datetime
    atualizado_em: datetime
    curso: Optional[CursoResumoDTO] = None
    professor: Optional[ProfessorResumoDTO] = None

    @classmethod
    def from_entity(cls, entity: TurmaEntity) -> "TurmaDetalhesDTO":
        return cls(
            id=entity.id,
            codigo=entity.codigo,
            data_inicio=entity.data_inicio,
            data_fim=entity.data_fim,
            horario_inicio=entity.horario_inicio,
            horario_fim=entity.horario_fim,
            modalidade=entity.modalidade.name,
            vagas_totais=entity.vagas_totais,
            vagas_disponiveis=entity.vagas_disponiveis,
            status=entity.status.name,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
            curso=CursoResumoDTO.from_entity(entity.curso) if entity.curso else None,
            professor=(
                ProfessorResumoDTO.from_entity(entity.professor)
                if entity.professor else None
            ),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "codigo": self.codigo,
            "data_inicio": self.data_inicio.isoformat(),
            "data_fim": self.data_fim.isoformat(),
            "horario_inicio": self.horario_inicio.strftime("%H:%M"),
            "horario_fim": self.horario_fim.strftime("%H:%M"),
            "modalidade": self.modalidade,
            "vagas_totais": self.vagas_totais,
            "vagas_disponiveis": self.vagas_disponiveis,
            "status": self.status,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
            "curso": self.curso.to_dict() if self.curso else None,
            "professor": self.professor.to_dict() if self.professor else None,
        }
