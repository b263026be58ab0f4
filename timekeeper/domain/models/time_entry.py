"""
TimeEntry domain model.
Represents one recorded work interval of an account on a calendar date.
"""

from dataclasses import dataclass
from datetime import datetime, date
from typing import Optional

from timekeeper.domain.models.base import BaseEntity, InvalidTimeRangeError, IncompleteInputError


OVERTIME_THRESHOLD_HOURS = 12.0
COMPANY_REQUEST_REASON = "Company Request"


@dataclass(eq=False)
class TimeEntry(BaseEntity):
    """
    TimeEntry entity.

    ``hours`` is derived from the interval and never rounded; entries
    longer than the overtime threshold are allowed and only flagged.
    """

    user_id: int
    date: date
    start_time: datetime
    end_time: datetime
    overtime_reason: Optional[str] = None
    responsible_person: Optional[str] = None

    def __post_init__(self):
        self.overtime_reason = _clean(self.overtime_reason)
        self.responsible_person = _clean(self.responsible_person)
        self.validate()

    def validate(self) -> None:
        """Validate time entry state."""
        if self.user_id is None:
            raise IncompleteInputError("User ID is required", "user_id")
        if self.start_time >= self.end_time:
            raise InvalidTimeRangeError()

    @property
    def hours(self) -> float:
        """Duration in fractional hours."""
        return (self.end_time - self.start_time).total_seconds() / 3600

    @property
    def is_overtime(self) -> bool:
        return self.hours > OVERTIME_THRESHOLD_HOURS

    @property
    def status_label(self) -> str:
        return "Overtime" if self.is_overtime else "Regular"

    @property
    def shows_responsible_person(self) -> bool:
        """Responsible person is reported only for company-requested overtime."""
        return (
            self.is_overtime
            and self.overtime_reason == COMPANY_REQUEST_REASON
            and bool(self.responsible_person)
        )

    def overlaps(self, start_time: datetime, end_time: datetime) -> bool:
        """Half-open interval intersection with [start_time, end_time)."""
        return self.start_time < end_time and self.end_time > start_time

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    def reschedule(
        self,
        entry_date: date,
        start_time: datetime,
        end_time: datetime,
        overtime_reason: Optional[str] = None,
        responsible_person: Optional[str] = None,
    ) -> None:
        """Replace the interval and overtime details, keeping identity and owner."""
        self.date = entry_date
        self.start_time = start_time
        self.end_time = end_time
        self.overtime_reason = _clean(overtime_reason)
        self.responsible_person = _clean(responsible_person)
        self.validate()
        self.mark_as_updated()


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
