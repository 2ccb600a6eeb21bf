"""
Domain Events do EduTech.

Transições de ciclo de vida (curso ativado/inativado, turma iniciada,
matrícula concluída, trancada ou cancelada...) registram um evento no
Unit of Work. O evento só é publicado depois do commit; em rollback é
descartado.

Os campos declarados pela subclasse formam o payload (`data`) usado
no log estruturado do publisher.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict
import uuid


_CAMPOS_BASE = ("event_id", "aggregate_id", "occurred_at", "version")


@dataclass
class DomainEvent(ABC):
    """
    Base dos eventos de domínio.

    Nome no passado (TurmaIniciada, não IniciarTurma), sempre
    associado ao agregado que o originou.

    Attributes:
        event_id: UUID gerado na criação
        aggregate_id: ID do agregado de origem (obrigatório)
        occurred_at: Momento da transição
        version: Versão do payload

    Example:
        @dataclass
        class CursoInativadoEvent(DomainEvent):
            nome: str = ""

            @property
            def aggregate_type(self) -> str:
                return "Curso"
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    aggregate_id: str = ""
    occurred_at: datetime = field(default_factory=datetime.now)
    version: int = 1

    def __post_init__(self):
        if not self.aggregate_id:
            raise ValueError("aggregate_id é obrigatório")

    @property
    @abstractmethod
    def aggregate_type(self) -> str:
        """Agregado de origem: "Curso", "Turma" ou "Matricula"."""
        ...

    @property
    def event_type(self) -> str:
        return type(self).__name__

    @property
    def data(self) -> Dict[str, Any]:
        """Campos próprios da subclasse, na ordem de declaração."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _CAMPOS_BASE
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_type": self.aggregate_type,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self.data,
        }

    def __str__(self) -> str:
        return f"{self.event_type}[{self.aggregate_type} {self.aggregate_id}]"
