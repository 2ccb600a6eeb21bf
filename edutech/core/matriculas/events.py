"""
Domain Events do Domínio de Matrículas.

Eventos:
- MatriculaCriadaEvent: Aluno matriculado
- MatriculaConcluidaEvent: Aluno aprovado
- MatriculaTrancadaEvent / MatriculaReativadaEvent
- MatriculaCanceladaEvent: Matrícula encerrada sem conclusão
"""

from dataclasses import dataclass
from typing import Optional

from edutech.core.shared.events import DomainEvent


@dataclass
class MatriculaCriadaEvent(DomainEvent):
    """
    Evento: Nova matrícula criada.

    Handlers típicos:
    - Enviar boas-vindas ao aluno
    - Atualizar ocupação da turma
    """

    aluno_id: str = ""
    curso_id: str = ""
    turma_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Matricula"


@dataclass
class MatriculaConcluidaEvent(DomainEvent):
    """Evento: Matrícula concluída com nota final."""

    aluno_id: str = ""
    nota_final: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Matricula"


@dataclass
class MatriculaTrancadaEvent(DomainEvent):
    aluno_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Matricula"


@dataclass
class MatriculaReativadaEvent(DomainEvent):
    aluno_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Matricula"


@dataclass
class MatriculaCanceladaEvent(DomainEvent):
    """Evento: Matrícula cancelada (motivo informado)."""

    aluno_id: str = ""
    motivo: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Matricula"
