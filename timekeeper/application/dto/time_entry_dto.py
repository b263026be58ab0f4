"""
Time Entry DTOs for the application layer.
Data Transfer Objects for time tracking operations.
"""

from typing import Optional
from datetime import datetime, date as calendar_date
from pydantic import Field

from timekeeper.domain.models.account import Account
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.services.entry_validator import EntryInput
from .base_dto import RequestDTO, ResponseDTO


class TimeEntryRequestDTO(RequestDTO):
    """DTO for creating or replacing a time entry."""

    date: Optional[str] = Field(default=None, description="YYYY-MM-DD or ISO-8601 timestamp")
    start_time: Optional[str] = Field(default=None, alias="startTime", description="ISO-8601 timestamp")
    end_time: Optional[str] = Field(default=None, alias="endTime", description="ISO-8601 timestamp")
    overtime_reason: Optional[str] = Field(default=None, alias="overtimeReason")
    responsible_person: Optional[str] = Field(default=None, alias="responsiblePerson")

    def to_input(self) -> EntryInput:
        return EntryInput(
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            overtime_reason=self.cleaned(self.overtime_reason),
            responsible_person=self.cleaned(self.responsible_person),
        )


class TimeEntryResponseDTO(ResponseDTO):
    """DTO for time entry response."""

    user_id: int = Field(description="Owner account ID")
    username: Optional[str] = Field(default=None, description="Owner username")
    position: Optional[str] = Field(default=None, description="Owner position")

    date: calendar_date = Field(description="Calendar date of the entry")
    start_time: datetime = Field(description="Start timestamp")
    end_time: datetime = Field(description="End timestamp")
    hours: float = Field(description="Duration in hours")
    is_overtime: bool = Field(description="More than 12 hours")
    status: str = Field(description="Regular or Overtime")

    overtime_reason: Optional[str] = Field(default=None)
    responsible_person: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, entry: TimeEntry, owner: Optional[Account] = None) -> "TimeEntryResponseDTO":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            username=owner.username if owner else None,
            position=owner.position.value if owner else None,
            date=entry.date,
            start_time=entry.start_time,
            end_time=entry.end_time,
            hours=round(entry.hours, 2),
            is_overtime=entry.is_overtime,
            status=entry.status_label,
            overtime_reason=entry.overtime_reason,
            responsible_person=entry.responsible_person,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
