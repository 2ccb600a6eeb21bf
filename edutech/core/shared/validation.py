"""
Execução de validadores cruzados.

Cada validador é uma função que recebe um contexto (DTO de entrada +
entidades já carregadas pelo use case) e lança ValidationError quando
a regra não é atendida. Os validadores de uma operação ficam em uma
tupla ordenada; o primeiro que falhar aborta a operação antes de
qualquer escrita.

Example:
    VALIDADORES_CADASTRO = (
        validar_curso_ativo,
        validar_turma_pertence_ao_curso,
    )

    executar_validadores(VALIDADORES_CADASTRO, contexto)
"""

from typing import Callable, Iterable, Optional, TypeVar

from .exceptions import ValidationError


C = TypeVar("C")
T = TypeVar("T")

Validador = Callable[[C], None]


def executar_validadores(validadores: Iterable[Validador], contexto: C) -> None:
    """
    Executa validadores em ordem.

    Args:
        validadores: Sequência ordenada de funções de validação
        contexto: Objeto repassado a cada validador

    Raises:
        ValidationError: Na primeira regra violada
    """
    for validador in validadores:
        validador(contexto)


def carregar_ou_falhar(repo, entity_id: Optional[str], mensagem: str) -> T:
    """
    Busca entidade por ID ou lança ValidationError.

    Args:
        repo: Repositório com get_by_id
        entity_id: ID buscado
        mensagem: Mensagem do erro quando não encontrada

    Returns:
        Entidade encontrada
    """
    entidade = repo.get_by_id(entity_id) if entity_id else None
    if entidade is None:
        raise ValidationError(mensagem)
    return entidade
