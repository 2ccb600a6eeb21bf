"""
Unit of Work sobre transações do Django.

- DjangoUnitOfWork: um bloco transaction.atomic() por `with`
- InMemoryUnitOfWork: sem banco, para o container de testes
"""

from typing import List, Optional
import logging

from django.db import transaction

from edutech.core.shared.interfaces import UnitOfWork, EventPublisher
from edutech.core.shared.events import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Abre transaction.atomic() ao entrar e fecha ao sair.

    Dentro de outro bloco atômico (request com ATOMIC_REQUESTS,
    testes django_db) o Django usa um savepoint, então o rollback
    desfaz apenas o que o use case escreveu.

    Eventos vão para o publisher depois do commit. Erro no publisher
    é logado e não desfaz nada: os dados já estão confirmados.

    Example:
        uow = DjangoUnitOfWork(LoggingEventPublisher())
        with uow:
            turma_repo.save(turma)
            uow.publish_event(TurmaIniciadaEvent(aggregate_id=turma.id, ...))
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic()
        self._atomic.__enter__()

    @property
    def _finalizada(self) -> bool:
        return self._committed or self._rolled_back

    def commit(self) -> None:
        if self._finalizada:
            logger.warning("Commit ignorado: transação já finalizada")
            return

        atomic, self._atomic = self._atomic, None
        if atomic is not None:
            try:
                atomic.__exit__(None, None, None)
            except Exception:
                logger.exception("Falha no commit; eventos descartados")
                self._rolled_back = True
                self.clear_events()
                raise

        self._committed = True
        logger.debug(f"Commit concluído ({len(self._events)} evento(s) pendente(s))")
        self._publicar_eventos()

    def rollback(self) -> None:
        if self._finalizada:
            return

        atomic, self._atomic = self._atomic, None
        try:
            if atomic is not None:
                atomic.__exit__(RuntimeError, RuntimeError("rollback"), None)
        finally:
            self._rolled_back = True
            descartados = len(self._events)
            self.clear_events()
            logger.debug(f"Rollback concluído ({descartados} evento(s) descartado(s))")

    def _publicar_eventos(self) -> None:
        eventos = self.collect_events()
        self.clear_events()

        if self._event_publisher is None:
            return

        for event in eventos:
            try:
                self._event_publisher.publish(event)
            except Exception:
                logger.exception(f"Falha ao publicar {event}")

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """Sem transação real; eventos confirmados ficam em `published_events`."""

    def __init__(self):
        super().__init__()
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True
        self._published_events.extend(self._events)
        self.clear_events()

    def rollback(self) -> None:
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events

    def reset(self) -> None:
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()
