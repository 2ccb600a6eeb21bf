"""
Paginação compartilhada entre Ports e Use Cases.

PaginationParams entra nas consultas; PaginatedResultDTO sai com os
itens da página e os totais.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Sequence, TypeVar


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PaginationParams:
    """Parâmetros de paginação."""

    page: int = 1
    per_page: int = 20

    MAX_PER_PAGE = 100

    def __post_init__(self):
        object.__setattr__(self, "page", max(1, int(self.page)))
        object.__setattr__(
            self, "per_page", min(max(1, int(self.per_page)), self.MAX_PER_PAGE)
        )

    @property
    def offset(self) -> int:
        """Calcula offset para query."""
        return (self.page - 1) * self.per_page


@dataclass
class PaginatedResultDTO(Generic[T]):
    """Resultado paginado."""

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    per_page: int = 20

    @property
    def total_pages(self) -> int:
        return (self.total + self.per_page - 1) // self.per_page

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def map(self, func: Callable[[T], U]) -> "PaginatedResultDTO[U]":
        """Converte os itens mantendo os totais."""
        return PaginatedResultDTO(
            items=[func(item) for item in self.items],
            total=self.total,
            page=self.page,
            per_page=self.per_page,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.items
            ],
            "total": self.total,
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }


def paginar(items: Sequence[T], pagination: PaginationParams) -> PaginatedResultDTO[T]:
    """Pagina uma sequência já carregada em memória."""
    inicio = pagination.offset
    fim = inicio + pagination.per_page
    return PaginatedResultDTO(
        items=list(items[inicio:fim]),
        total=len(items),
        page=pagination.page,
        per_page=pagination.per_page,
    )
