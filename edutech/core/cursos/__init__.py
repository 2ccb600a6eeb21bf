"""
Domínio de Cursos.

- Entidades (CursoEntity, NivelCurso, CategoriaCurso, StatusCurso)
- Ciclo de ativação/inativação e vínculo com professores
- Domain Events de ativação e vínculo
"""

from .entities import CursoEntity, NivelCurso, CategoriaCurso, StatusCurso
from .events import CursoAtivadoEvent, CursoInativadoEvent
from .dtos import (
    CadastrarCursoInputDTO,
    AtualizarCursoInputDTO,
    VincularProfessorCursoInputDTO,
    CursoResumoDTO,
    CursoDetalhesDTO,
)
from .ports import CursoRepository, InMemoryCursoRepository

__all__ = [
    "CursoEntity",
    "NivelCurso",
    "CategoriaCurso",
    "StatusCurso",
    "CursoAtivadoEvent",
    "CursoInativadoEvent",
    "CadastrarCursoInputDTO",
    "AtualizarCursoInputDTO",
    "VincularProfessorCursoInputDTO",
    "CursoResumoDTO",
    "CursoDetalhesDTO",
    "CursoRepository",
    "InMemoryCursoRepository",
]
