"""
Domain events related to time tracking.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass
from datetime import datetime, date

from .base import DomainEvent


@dataclass(kw_only=True)
class TimeEntryCreated(DomainEvent):
    """Event fired when a new time entry is created."""

    time_entry_id: int
    user_id: int
    username: str
    entry_date: date
    start_time: datetime
    end_time: datetime
    hours: float
    overtime_reason: Optional[str] = None
    responsible_person: Optional[str] = None

    @classmethod
    def from_entry(cls, entry, username: str) -> "TimeEntryCreated":
        return cls(
            time_entry_id=entry.id,
            user_id=entry.user_id,
            username=username,
            entry_date=entry.date,
            start_time=entry.start_time,
            end_time=entry.end_time,
            hours=entry.hours,
            overtime_reason=entry.overtime_reason,
            responsible_person=entry.responsible_person,
        )

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "time_entry_id": self.time_entry_id,
            "user_id": self.user_id,
            "username": self.username,
            "entry_date": self.entry_date.isoformat(),
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "hours": self.hours,
            "overtime_reason": self.overtime_reason,
            "responsible_person": self.responsible_person
        }
