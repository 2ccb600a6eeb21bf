"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceção de domínio (ValidationError)
- Interfaces (Ports)
- Base classes para Domain Events
- Value Objects (Endereco, Modalidade)
- Execução de validadores e paginação
"""

from .exceptions import DomainException, ValidationError
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher
from .value_objects import DomainEnum, Endereco, Modalidade
from .validation import executar_validadores, carregar_ou_falhar
from .pagination import PaginationParams, PaginatedResultDTO, paginar

__all__ = [
    "DomainException",
    "ValidationError",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
    "DomainEnum",
    "Endereco",
    "Modalidade",
    "executar_validadores",
    "carregar_ou_falhar",
    "PaginationParams",
    "PaginatedResultDTO",
    "paginar",
]
