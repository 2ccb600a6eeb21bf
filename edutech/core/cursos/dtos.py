"""
Data Transfer Objects (DTOs) do Domínio de Cursos.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from edutech.core.professores.dtos import ProfessorResumoDTO

from .entities import CursoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CadastrarCursoInputDTO:
    """
    DTO de entrada para cadastrar curso.

    Attributes:
        nome: Nome do curso (único)
        descricao: Descrição
        carga_horaria_total: Carga horária em horas
        duracao_meses: Duração em meses
        nivel: Nome do nível (BASICO, INTERMEDIARIO, AVANCADO)
        categoria: Nome da categoria (PROGRAMACAO, BANCO_DADOS, ...)
    """

    nome: str
    descricao: str
    carga_horaria_total: int
    duracao_meses: int
    nivel: Optional[str]
    categoria: str = "OUTROS"

    def to_dict(self) -> dict:
        return {
            "nome": self.nome,
            "descricao": self.descricao,
            "carga_horaria_total": self.carga_horaria_total,
            "duracao_meses": self.duracao_meses,
            "nivel": self.nivel,
            "categoria": self.categoria,
        }


@dataclass(frozen=True)
class AtualizarCursoInputDTO:
    """DTO de entrada para atualização parcial de curso."""

    curso_id: str
    nome: Optional[str] = None
    descricao: Optional[str] = None
    carga_horaria_total: Optional[int] = None
    duracao_meses: Optional[int] = None
    nivel: Optional[str] = None
    categoria: Optional[str] = None


@dataclass(frozen=True)
class VincularProfessorCursoInputDTO:
    """DTO de entrada para vincular/desvincular professor de um curso."""

    curso_id: str
    professor_id: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CursoResumoDTO:
    """DTO resumido para listagens de cursos."""

    id: str
    nome: str
    carga_horaria_total: int
    nivel: str
    categoria: str
    status: str

    @classmethod
    def from_entity(cls, entity: CursoEntity) -> "CursoResumoDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            carga_horaria_total=entity.carga_horaria_total,
            nivel=entity.nivel.name,
            categoria=entity.categoria.name,
            status=entity.status.name,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "carga_horaria_total": self.carga_horaria_total,
            "nivel": self.nivel,
            "categoria": self.categoria,
            "status": self.status,
        }


@dataclass
class CursoDetalhesDTO:
    """DTO de saída completo, incluindo professores vinculados."""

    id: str
    nome: str
    descricao: str
    carga_horaria_total: int
    duracao_meses: int
    nivel: str
    categoria: str
    status: str
    criado_em: datetime
    atualizado_em: datetime
    professores: List[ProfessorResumoDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: CursoEntity) -> "CursoDetalhesDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            descricao=entity.descricao,
            carga_horaria_total=entity.carga_horaria_total,
            duracao_meses=entity.duracao_meses,
            nivel=entity.nivel.name,
            categoria=entity.categoria.name,
            status=entity.status.name,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
            professores=[ProfessorResumoDTO.from_entity(p) for p in entity.professores],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "descricao": self.descricao,
            "carga_horaria_total": self.carga_horaria_total,
            "duracao_meses": self.duracao_meses,
            "nivel": self.nivel,
            "categoria": self.categoria,
            "status": self.status,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
            "professores": [p.to_dict() for p in self.professores],
        }
