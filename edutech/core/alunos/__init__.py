"""
Domínio de Alunos.

- Entidades (AlunoEntity, StatusAluno)
- Validadores de unicidade (e-mail, CPF)
- Use Cases de cadastro, consulta e exclusão lógica
"""

from .entities import AlunoEntity, StatusAluno
from .dtos import (
    CadastrarAlunoInputDTO,
    AtualizarAlunoInputDTO,
    AlunoResumoDTO,
    AlunoDetalhesDTO,
)
from .ports import AlunoRepository, InMemoryAlunoRepository

__all__ = [
    "AlunoEntity",
    "StatusAluno",
    "CadastrarAlunoInputDTO",
    "AtualizarAlunoInputDTO",
    "AlunoResumoDTO",
    "AlunoDetalhesDTO",
    "AlunoRepository",
    "InMemoryAlunoRepository",
]
