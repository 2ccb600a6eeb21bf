"""
Ports (Interfaces) do Domínio de Professores.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO, paginar
from edutech.core.shared.value_objects import Modalidade

from .entities import ProfessorEntity


@runtime_checkable
class ProfessorRepository(Protocol):
    """
    Interface para persistência de Professores.

    Implementações:
    - DjangoProfessorRepository (ORM)
    - InMemoryProfessorRepository (testes)
    """

    def save(self, professor: ProfessorEntity) -> None:
        ...

    def get_by_id(self, professor_id: str) -> Optional[ProfessorEntity]:
        ...

    def get_by_email(self, email: str) -> Optional[ProfessorEntity]:
        ...

    def get_by_cpf(self, cpf: str) -> Optional[ProfessorEntity]:
        ...

    def list_by_nome(self, nome: str) -> List[ProfessorEntity]:
        """Lista professores cujo nome contém o texto informado."""
        ...

    def list_by_modalidade(self, modalidade: Modalidade) -> List[ProfessorEntity]:
        ...

    def list_paginated(
        self, pagination: PaginationParams
    ) -> PaginatedResultDTO[ProfessorEntity]:
        ...


class InMemoryProfessorRepository:
    """Implementação em memória do ProfessorRepository (testes)."""

    def __init__(self):
        self._professores: Dict[str, ProfessorEntity] = {}

    def save(self, professor: ProfessorEntity) -> None:
        self._professores[professor.id] = professor

    def get_by_id(self, professor_id: str) -> Optional[ProfessorEntity]:
        return self._professores.get(professor_id)

    def get_by_email(self, email: str) -> Optional[ProfessorEntity]:
        email = (email or "").strip().lower()
        return next(
            (p for p in self._professores.values() if p.email.lower() == email),
            None,
        )

    def get_by_cpf(self, cpf: str) -> Optional[ProfessorEntity]:
        return next((p for p in self._professores.values() if p.cpf == cpf), None)

    def list_by_nome(self, nome: str) -> List[ProfessorEntity]:
        termo = nome.lower()
        return [p for p in self._ordenados() if termo in p.nome.lower()]

    def list_by_modalidade(self, modalidade: Modalidade) -> List[ProfessorEntity]:
        return [p for p in self._ordenados() if p.modalidade == modalidade]

    def list_paginated(
        self, pagination: PaginationParams
    ) -> PaginatedResultDTO[ProfessorEntity]:
        return paginar(self._ordenados(), pagination)

    def list_all(self) -> List[ProfessorEntity]:
        return self._ordenados()

    def _ordenados(self) -> List[ProfessorEntity]:
        return sorted(self._professores.values(), key=lambda p: p.nome)
