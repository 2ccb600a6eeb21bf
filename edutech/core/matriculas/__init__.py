"""
Domínio de Matrículas.

- Entidades (MatriculaEntity, StatusMatricula, MotivoCancelamento)
- Máquina de estados ATIVA / TRANCADA / CONCLUIDA / CANCELADA
- Validadores de cadastro
- Domain Events do ciclo de vida
"""

from .entities import MatriculaEntity, StatusMatricula, MotivoCancelamento
from .events import (
    MatriculaCriadaEvent,
    MatriculaConcluidaEvent,
    MatriculaTrancadaEvent,
    MatriculaReativadaEvent,
    MatriculaCanceladaEvent,
)
from .dtos import (
    CadastrarMatriculaInputDTO,
    ConcluirMatriculaInputDTO,
    CancelarMatriculaInputDTO,
    MatriculaResumoDTO,
    MatriculaDetalhesDTO,
)
from .ports import MatriculaRepository, InMemoryMatriculaRepository

__all__ = [
    "MatriculaEntity",
    "StatusMatricula",
    "MotivoCancelamento",
    "MatriculaCriadaEvent",
    "MatriculaConcluidaEvent",
    "MatriculaTrancadaEvent",
    "MatriculaReativadaEvent",
    "MatriculaCanceladaEvent",
    "CadastrarMatriculaInputDTO",
    "ConcluirMatriculaInputDTO",
    "CancelarMatriculaInputDTO",
    "MatriculaResumoDTO",
    "MatriculaDetalhesDTO",
    "MatriculaRepository",
    "InMemoryMatriculaRepository",
]
