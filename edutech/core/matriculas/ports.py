"""
Ports (Interfaces) do Domínio de Matrículas.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO, paginar

from .entities import MatriculaEntity


@runtime_checkable
class MatriculaRepository(Protocol):
    """Interface para persistência de Matrículas."""

    def save(self, matricula: MatriculaEntity) -> None:
        ...

    def get_by_id(self, matricula_id: str) -> Optional[MatriculaEntity]:
        ...

    def list_by_aluno_nome(self, nome: str) -> List[MatriculaEntity]:
        """Matrículas cujo aluno contém o nome informado (case-insensitive)."""
        ...

    def list_by_aluno(self, aluno_id: str) -> List[MatriculaEntity]:
        ...

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[MatriculaEntity]:
        ...


class InMemoryMatriculaRepository:
    """Implementação em memória do MatriculaRepository (testes)."""

    def __init__(self):
        self._matriculas: Dict[str, MatriculaEntity] = {}

    def save(self, matricula: MatriculaEntity) -> None:
        self._matriculas[matricula.id] = matricula

    def get_by_id(self, matricula_id: str) -> Optional[MatriculaEntity]:
        return self._matriculas.get(matricula_id)

    def list_by_aluno_nome(self, nome: str) -> List[MatriculaEntity]:
        termo = (nome or "").strip().lower()
        return [m for m in self.list_all() if termo in m.aluno.nome.lower()]

    def list_by_aluno(self, aluno_id: str) -> List[MatriculaEntity]:
        return [m for m in self.list_all() if m.aluno.id == aluno_id]

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[MatriculaEntity]:
        return paginar(self.list_all(), pagination)

    def list_all(self) -> List[MatriculaEntity]:
        return sorted(self._matriculas.values(), key=lambda m: (m.data_matricula, m.criado_em))
