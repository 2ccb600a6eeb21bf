"""
Domínio de Turmas.

- Entidades (TurmaEntity, StatusTurma)
- Ciclo de vida: ABERTA → EM_ANDAMENTO → CONCLUIDA / CANCELADA
- Vínculo com curso e professor
"""

from .entities import TurmaEntity, StatusTurma
from .events import TurmaIniciadaEvent, TurmaConcluidaEvent, TurmaCanceladaEvent
from .dtos import (
    CadastrarTurmaInputDTO,
    AtualizarTurmaInputDTO,
    VincularProfessorTurmaInputDTO,
    VincularCursoTurmaInputDTO,
    TurmaResumoDTO,
    TurmaDetalhesDTO,
)
from .ports import TurmaRepository, InMemoryTurmaRepository

__all__ = [
    "TurmaEntity",
    "StatusTurma",
    "TurmaIniciadaEvent",
    "TurmaConcluidaEvent",
    "TurmaCanceladaEvent",
    "CadastrarTurmaInputDTO",
    "AtualizarTurmaInputDTO",
    "VincularProfessorTurmaInputDTO",
    "VincularCursoTurmaInputDTO",
    "TurmaResumoDTO",
    "TurmaDetalhesDTO",
    "TurmaRepository",
    "InMemoryTurmaRepository",
]
