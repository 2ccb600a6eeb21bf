"""
Ports (Interfaces) do Domínio de Turmas.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO, paginar

from .entities import TurmaEntity


@runtime_checkable
class TurmaRepository(Protocol):
    """
    Interface para persistência de Turmas.

    get_by_id() devolve a turma com curso, professor e matrículas
    carregados; save() persiste apenas os dados da turma e os vínculos
    (matrículas são persistidas pelo MatriculaRepository).
    """

    def save(self, turma: TurmaEntity) -> None:
        ...

    def get_by_id(self, turma_id: str) -> Optional[TurmaEntity]:
        ...

    def get_by_codigo(self, codigo: str) -> Optional[TurmaEntity]:
        ...

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[TurmaEntity]:
        ...


class InMemoryTurmaRepository:
    """Implementação em memória do TurmaRepository (testes)."""

    def __init__(self):
        self._turmas: Dict[str, TurmaEntity] = {}

    def save(self, turma: TurmaEntity) -> None:
        self._turmas[turma.id] = turma

    def get_by_id(self, turma_id: str) -> Optional[TurmaEntity]:
        return self._turmas.get(turma_id)

    def get_by_codigo(self, codigo: str) -> Optional[TurmaEntity]:
        codigo = (codigo or "").strip().upper()
        return next((t for t in self._turmas.values() if t.codigo.upper() == codigo), None)

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[TurmaEntity]:
        return paginar(self.list_all(), pagination)

    def list_all(self) -> List[TurmaEntity]:
        return sorted(self._turmas.values(), key=lambda t: (t.data_inicio, t.codigo))
