"""
Fixtures dos testes de core.

Estratégia:
- Repositórios em memória (InMemory*Repository) para isolamento
- FakeUnitOfWork para verificar commit/rollback e eventos publicados
"""

from typing import List

import pytest

from edutech.core.shared.events import DomainEvent
from edutech.core.alunos.ports import InMemoryAlunoRepository
from edutech.core.professores.ports import InMemoryProfessorRepository
from edutech.core.cursos.ports import InMemoryCursoRepository
from edutech.core.turmas.ports import InMemoryTurmaRepository
from edutech.core.matriculas.ports import InMemoryMatriculaRepository


class FakeUnitOfWork:
    """
    Fake Unit of Work para testes.

    Eventos ficam em `published` apenas após commit; rollback descarta.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self.published: List[DomainEvent] = []
        self.committed = False
        self.rolled_back = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    def commit(self):
        self.committed = True
        self.published.extend(self._events)
        self._events.clear()

    def rollback(self):
        self.rolled_back = True
        self._events.clear()

    def publish_event(self, event: DomainEvent):
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        return list(self._events)


@pytest.fixture
def uow():
    return FakeUnitOfWork()


@pytest.fixture
def aluno_repo():
    return InMemoryAlunoRepository()


@pytest.fixture
def professor_repo():
    return InMemoryProfessorRepository()


@pytest.fixture
def curso_repo():
    return InMemoryCursoRepository()


@pytest.fixture
def turma_repo():
    return InMemoryTurmaRepository()


@pytest.fixture
def matricula_repo():
    return InMemoryMatriculaRepository()
