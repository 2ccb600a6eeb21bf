"""
Domínio de Professores.

- Entidades (ProfessorEntity, StatusProfessor)
- Validadores de unicidade (CPF, e-mail)
- Use Cases de cadastro, consulta e exclusão lógica
"""

from .entities import ProfessorEntity, StatusProfessor
from .dtos import (
    CadastrarProfessorInputDTO,
    AtualizarProfessorInputDTO,
    ProfessorResumoDTO,
    ProfessorDetalhesDTO,
)
from .ports import ProfessorRepository, InMemoryProfessorRepository

__all__ = [
    "ProfessorEntity",
    "StatusProfessor",
    "CadastrarProfessorInputDTO",
    "AtualizarProfessorInputDTO",
    "ProfessorResumoDTO",
    "ProfessorDetalhesDTO",
    "ProfessorRepository",
    "InMemoryProfessorRepository",
]
