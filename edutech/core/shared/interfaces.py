"""
Ports transversais do core.

Os repositórios de cada agregado são declarados no `ports.py` do
próprio domínio; aqui ficam apenas os contratos compartilhados por
todos os use cases de escrita: UnitOfWork e EventPublisher.
"""

from abc import ABC, abstractmethod
from typing import List

from .events import DomainEvent


class UnitOfWork(ABC):
    """
    Fronteira transacional de um use case.

    Sair do bloco `with` sem exceção confirma as escritas e publica
    os eventos registrados; qualquer exceção desfaz as escritas e
    descarta os eventos. A exceção sempre se propaga ao chamador.

    Example:
        with self.uow:
            matricula.concluir(nota_final)
            self.matricula_repo.save(matricula)
            self.uow.publish_event(MatriculaConcluidaEvent(...))
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Confirma as escritas; só então publica os eventos pendentes."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Desfaz as escritas e descarta os eventos pendentes."""
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """Registra evento para publicação após o commit."""
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        return list(self._events)

    def clear_events(self) -> None:
        self._events.clear()


class EventPublisher(ABC):
    """Destino dos eventos confirmados (log, memória)."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        raise NotImplementedError

    @abstractmethod
    def publish_batch(self, events: List[DomainEvent]) -> None:
        raise NotImplementedError
