"""
Ports (Interfaces) do Domínio de Alunos.

- AlunoRepository: contrato de persistência e consulta
- InMemoryAlunoRepository: implementação em memória (testes)
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO, paginar

from .entities import AlunoEntity, StatusAluno


@runtime_checkable
class AlunoRepository(Protocol):
    """
    Interface para persistência de Alunos.

    Implementações:
    - DjangoAlunoRepository (ORM)
    - InMemoryAlunoRepository (testes)
    """

    def save(self, aluno: AlunoEntity) -> None:
        """Persiste aluno (create ou update)."""
        ...

    def get_by_id(self, aluno_id: str) -> Optional[AlunoEntity]:
        """Busca aluno por ID."""
        ...

    def get_by_email(self, email: str) -> Optional[AlunoEntity]:
        """Busca aluno pelo e-mail (case-insensitive)."""
        ...

    def get_by_cpf(self, cpf: str) -> Optional[AlunoEntity]:
        """Busca aluno pelo CPF."""
        ...

    def list_by_nome(self, nome: str) -> List[AlunoEntity]:
        """Lista alunos cujo nome contém o texto informado."""
        ...

    def list_by_status(
        self,
        status: StatusAluno,
        pagination: PaginationParams,
    ) -> PaginatedResultDTO[AlunoEntity]:
        """Lista alunos de um status, paginado."""
        ...

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[AlunoEntity]:
        """Lista todos os alunos, paginado."""
        ...


class InMemoryAlunoRepository:
    """
    Implementação em memória do AlunoRepository.

    Útil para testes unitários e prototipagem. Não usar em produção.
    """

    def __init__(self):
        self._alunos: Dict[str, AlunoEntity] = {}

    def save(self, aluno: AlunoEntity) -> None:
        self._alunos[aluno.id] = aluno

    def get_by_id(self, aluno_id: str) -> Optional[AlunoEntity]:
        return self._alunos.get(aluno_id)

    def get_by_email(self, email: str) -> Optional[AlunoEntity]:
        email = (email or "").strip().lower()
        return next(
            (a for a in self._alunos.values() if a.email.lower() == email),
            None,
        )

    def get_by_cpf(self, cpf: str) -> Optional[AlunoEntity]:
        return next((a for a in self._alunos.values() if a.cpf == cpf), None)

    def list_by_nome(self, nome: str) -> List[AlunoEntity]:
        termo = nome.lower()
        return sorted(
            (a for a in self._alunos.values() if termo in a.nome.lower()),
            key=lambda a: a.nome,
        )

    def list_by_status(
        self,
        status: StatusAluno,
        pagination: PaginationParams,
    ) -> PaginatedResultDTO[AlunoEntity]:
        alunos = [a for a in self._ordenados() if a.status == status]
        return paginar(alunos, pagination)

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[AlunoEntity]:
        return paginar(self._ordenados(), pagination)

    def list_all(self) -> List[AlunoEntity]:
        return self._ordenados()

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._alunos.clear()

    def _ordenados(self) -> List[AlunoEntity]:
        return sorted(self._alunos.values(), key=lambda a: a.nome)
