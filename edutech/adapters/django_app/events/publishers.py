"""
Publicadores de Domain Events.

Não há broker: eventos são registrados no log da aplicação e
entregues a handlers síncronos registrados localmente.

- LoggingEventPublisher: padrão (EVENT_PUBLISHER_MODE=logging)
- InMemoryEventPublisher: guarda os eventos para asserções em teste
"""

from typing import Callable, Dict, List
import json
import logging

from edutech.core.shared.events import DomainEvent
from edutech.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)


EventHandler = Callable[[DomainEvent], None]


class _PublisherComHandlers(EventPublisher):
    """Handlers por event_type; falha de um handler não impede os demais."""

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    def _notificar_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Handler {getattr(handler, '__name__', handler)} falhou para {event}")


class LoggingEventPublisher(_PublisherComHandlers):
    """
    Loga cada evento em uma linha:

        [EVENT] MatriculaConcluidaEvent | aggregate=<id> | data={"aluno_id": ..., "nota_final": "8.5"}
    """

    def __init__(self, log_level: int = logging.INFO):
        super().__init__()
        self._log_level = log_level

    def publish(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event.data, default=str, ensure_ascii=False)}"
        )
        self._notificar_handlers(event)


class InMemoryEventPublisher(_PublisherComHandlers):
    """Publisher de testes: acumula os eventos recebidos."""

    def __init__(self):
        super().__init__()
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        self._notificar_handlers(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return list(self._published_events)

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        return [e for e in self._published_events if e.event_type == event_type]


def get_event_publisher(mode: str = "logging") -> EventPublisher:
    """Publisher conforme EVENT_PUBLISHER_MODE ("memory" ou "logging")."""
    if mode == "memory":
        return InMemoryEventPublisher()
    return LoggingEventPublisher()
