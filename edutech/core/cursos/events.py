"""
Domain Events do Domínio de Cursos.

Eventos:
- CursoAtivadoEvent: Curso voltou a aceitar matrículas
- CursoInativadoEvent: Curso deixou de aceitar matrículas
- ProfessorVinculadoAoCursoEvent / ProfessorDesvinculadoDoCursoEvent
"""

from dataclasses import dataclass

from edutech.core.shared.events import DomainEvent


@dataclass
class CursoAtivadoEvent(DomainEvent):
    """Evento: Curso foi ativado."""

    nome: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Curso"


@dataclass
class CursoInativadoEvent(DomainEvent):
    """
    Evento: Curso foi inativado.

    Handlers típicos:
    - Avisar coordenação sobre turmas abertas do curso
    """

    nome: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Curso"


@dataclass
class ProfessorVinculadoAoCursoEvent(DomainEvent):
    """Evento: Professor passou a lecionar o curso."""

    professor_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Curso"


@dataclass
class ProfessorDesvinculadoDoCursoEvent(DomainEvent):
    """Evento: Professor deixou de lecionar o curso."""

    professor_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Curso"
