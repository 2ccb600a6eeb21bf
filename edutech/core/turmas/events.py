"""
Domain Events do Domínio de Turmas.

Eventos:
- TurmaIniciadaEvent: Aulas começaram
- TurmaConcluidaEvent: Turma encerrada após a data de término
- TurmaCanceladaEvent: Turma cancelada antes da conclusão
"""

from dataclasses import dataclass

from edutech.core.shared.events import DomainEvent


@dataclass
class TurmaIniciadaEvent(DomainEvent):
    """Evento: Turma passou para EM_ANDAMENTO."""

    codigo: str = ""
    curso_id: str = ""
    professor_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Turma"


@dataclass
class TurmaConcluidaEvent(DomainEvent):
    """Evento: Turma foi concluída."""

    codigo: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Turma"


@dataclass
class TurmaCanceladaEvent(DomainEvent):
    """
    Evento: Turma foi cancelada.

    Handlers típicos:
    - Notificar alunos matriculados
    """

    codigo: str = ""
    status_anterior: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Turma"
