"""
Event handlers for chat notifications.
Converts domain events into Telegram messages.
"""

import logging
from html import escape

from timekeeper.domain.events.base import EventHandler, DomainEvent
from timekeeper.domain.events.time_entry_events import TimeEntryCreated


logger = logging.getLogger(__name__)


class EventLogHandler(EventHandler):
    """Logs every event that passes through the dispatcher."""

    def can_handle(self, event: DomainEvent) -> bool:
        return True

    async def handle(self, event: DomainEvent) -> None:
        logger.info(f"Event received: {event.event_type} (ID: {event.event_id})")


class TimeEntryNotificationHandler(EventHandler):
    """Announces new time entries in the company chat."""

    def __init__(self, notifier):
        self.notifier = notifier

    def can_handle(self, event: DomainEvent) -> bool:
        return isinstance(event, TimeEntryCreated)

    async def handle(self, event: DomainEvent) -> None:
        await self.notifier.notify(format_time_entry_message(event))


def format_time_entry_message(event: TimeEntryCreated) -> str:
    """Telegram HTML message for a new entry; user text is escaped."""
    lines = [
        "🆕 <b>New time entry added</b>",
        "",
        f"👤 User: {escape(event.username)}",
        f"📅 Date: {event.entry_date.isoformat()}",
        f"⏰ Time: {event.start_time:%H:%M} - {event.end_time:%H:%M}",
        f"⏱️ Hours: {event.hours:.2f}",
    ]
    if event.overtime_reason:
        lines.append(f"⚠️ Overtime reason: {escape(event.overtime_reason)}")
    if event.responsible_person:
        lines.append(f"👥 Responsible person: {escape(event.responsible_person)}")
    return "\n".join(lines)
