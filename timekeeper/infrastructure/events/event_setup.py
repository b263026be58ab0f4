"""
Event system setup and configuration.
Registers all event handlers with an event dispatcher.
"""

import logging

from timekeeper.domain.events.base import EventDispatcher
from .notification_handlers import EventLogHandler, TimeEntryNotificationHandler

logger = logging.getLogger(__name__)


def setup_event_handlers(dispatcher: EventDispatcher, notifier) -> EventDispatcher:
    """Set up and register all event handlers."""

    dispatcher.register_global_handler(EventLogHandler())
    dispatcher.register_handler("TimeEntryCreated", TimeEntryNotificationHandler(notifier))

    registered = dispatcher.get_registered_handlers()
    for event_type, handlers in registered.items():
        logger.info(f"Event {event_type}: {', '.join(handlers)} handlers")

    return dispatcher


def initialize_event_system(notifier) -> EventDispatcher:
    """Build a dispatcher with every handler registered."""
    dispatcher = setup_event_handlers(EventDispatcher(), notifier)
    logger.info("Event system initialized successfully")
    return dispatcher
