"""
Ports (Interfaces) do Domínio de Cursos.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO, paginar

from .entities import CursoEntity, NivelCurso


@runtime_checkable
class CursoRepository(Protocol):
    """
    Interface para persistência de Cursos.

    save() também persiste a coleção de professores vinculados.
    """

    def save(self, curso: CursoEntity) -> None:
        ...

    def get_by_id(self, curso_id: str) -> Optional[CursoEntity]:
        ...

    def get_by_nome(self, nome: str) -> Optional[CursoEntity]:
        """Busca curso pelo nome exato (case-insensitive)."""
        ...

    def list_by_nivel(self, nivel: NivelCurso) -> List[CursoEntity]:
        ...

    def list_by_carga_horaria(self, minimo: int, maximo: int) -> List[CursoEntity]:
        """Lista cursos com carga horária no intervalo fechado [minimo, maximo]."""
        ...

    def list_by_professor(self, professor_id: str) -> List[CursoEntity]:
        """Lista cursos aos quais o professor está vinculado."""
        ...

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[CursoEntity]:
        ...


class InMemoryCursoRepository:
    """Implementação em memória do CursoRepository (testes)."""

    def __init__(self):
        self._cursos: Dict[str, CursoEntity] = {}

    def save(self, curso: CursoEntity) -> None:
        self._cursos[curso.id] = curso

    def get_by_id(self, curso_id: str) -> Optional[CursoEntity]:
        return self._cursos.get(curso_id)

    def get_by_nome(self, nome: str) -> Optional[CursoEntity]:
        nome = (nome or "").strip().lower()
        return next((c for c in self._cursos.values() if c.nome.lower() == nome), None)

    def list_by_nivel(self, nivel: NivelCurso) -> List[CursoEntity]:
        return [c for c in self._ordenados() if c.nivel == nivel]

    def list_by_carga_horaria(self, minimo: int, maximo: int) -> List[CursoEntity]:
        return [
            c for c in self._ordenados()
            if minimo <= c.carga_horaria_total <= maximo
        ]

    def list_by_professor(self, professor_id: str) -> List[CursoEntity]:
        return [c for c in self._ordenados() if c.possui_professor(professor_id)]

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[CursoEntity]:
        return paginar(self._ordenados(), pagination)

    def list_all(self) -> List[CursoEntity]:
        return self._ordenados()

    def _ordenados(self) -> List[CursoEntity]:
        return sorted(self._cursos.values(), key=lambda c: c.nome)
