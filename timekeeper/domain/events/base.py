"""
Domain events and their in-process dispatch.
Side effects such as chat notifications hang off events. Handlers are
awaited before the publishing use case returns, but a handler failure never
reaches the publisher.
"""

import asyncio
import logging
import uuid
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional


logger = logging.getLogger(__name__)

ALL_EVENTS = "*"


@dataclass(kw_only=True)
class DomainEvent(ABC):
    """Something that happened in the domain. Named after its class."""

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc).replace(tzinfo=None))
    event_type: str = field(default="", init=False)
    version: int = 1

    def __post_init__(self):
        self.event_type = type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    @abstractmethod
    def _get_event_data(self) -> Dict[str, Any]:
        """JSON-ready payload of the event."""


class EventHandler(ABC):

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        pass

    def can_handle(self, event: DomainEvent) -> bool:
        return True


class EventDispatcher:
    """
    Delivers each event to the handlers registered for its type and to the
    global handlers, concurrently.

    A failing handler is logged and never affects the publisher or the
    other handlers. The most recent ``max_log_size`` events are kept for
    inspection.
    """

    def __init__(self, max_log_size: int = 100):
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._event_log: Deque[Dict[str, Any]] = deque(maxlen=max_log_size)

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)
        logger.info(f"Registered {type(handler).__name__} for {event_type}")

    def register_global_handler(self, handler: EventHandler) -> None:
        self.register_handler(ALL_EVENTS, handler)

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        candidates = self._handlers.get(event.event_type, []) + self._handlers.get(ALL_EVENTS, [])
        return [handler for handler in candidates if handler.can_handle(event)]

    async def dispatch(self, event: DomainEvent) -> None:
        self._event_log.append(event.to_dict())

        handlers = self.handlers_for(event)
        if not handlers:
            logger.debug(f"{event.event_type} {event.event_id} has no handlers")
            return

        logger.info(f"Dispatching {event.event_type} {event.event_id} to {len(handlers)} handler(s)")
        await asyncio.gather(*(self._run(handler, event) for handler in handlers))

    async def _run(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            await handler.handle(event)
        except Exception:
            logger.exception(f"{type(handler).__name__} failed on {event.event_type} {event.event_id}")

    def get_event_log(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Logged events, newest first."""
        events = list(reversed(self._event_log))
        return events[:limit] if limit else events

    def get_registered_handlers(self) -> Dict[str, List[str]]:
        """Handler class names per event type; global handlers under ``"global"``."""
        return {
            ("global" if event_type == ALL_EVENTS else event_type): [type(h).__name__ for h in handlers]
            for event_type, handlers in self._handlers.items()
        }
