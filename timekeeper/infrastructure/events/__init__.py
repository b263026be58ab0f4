"""
Event handler wiring.
"""

from .event_setup import initialize_event_system, setup_event_handlers
from .notification_handlers import (
    EventLogHandler,
    TimeEntryNotificationHandler,
    format_time_entry_message,
)

__all__ = [
    "initialize_event_system",
    "setup_event_handlers",
    "EventLogHandler",
    "TimeEntryNotificationHandler",
    "format_time_entry_message",
]
