"""
Domain events for the application.
Event-driven components for notifications.
"""

from .base import DomainEvent, EventHandler, EventDispatcher
from .time_entry_events import TimeEntryCreated

__all__ = [
    "DomainEvent",
    "EventHandler",
    "EventDispatcher",
    "TimeEntryCreated"
]
