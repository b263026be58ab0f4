"""Entry validator.
Decides whether a candidate time entry is accepted, before anything is persisted.
"""

from dataclasses import dataclass
from datetime import datetime, date, timezone
from typing import Iterable, Optional

from timekeeper.domain.models.base import (
    ForbiddenError,
    IncompleteInputError,
    InvalidFormatError,
    InvalidTimeRangeError,
    OverlapConflictError,
)
from timekeeper.domain.models.time_entry import TimeEntry


@dataclass(frozen=True)
class EntryInput:
    """Raw, unparsed fields of a create or update request."""

    date: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]
    overtime_reason: Optional[str] = None
    responsible_person: Optional[str] = None


@dataclass(frozen=True)
class ParsedEntry:
    """Entry fields after parsing; start is strictly before end."""

    date: date
    start_time: datetime
    end_time: datetime
    overtime_reason: Optional[str] = None
    responsible_person: Optional[str] = None


class EntryValidator:
    """
    Domain service holding the acceptance rules for time entries.

    Rejections are raised in a fixed order: missing field
    (IncompleteInputError), unparseable value (InvalidFormatError),
    then overlap with another entry of the same owner on the same date
    (OverlapConflictError). Overtime is never a rejection reason.
    """

    def parse(self, raw: EntryInput) -> ParsedEntry:
        for name in ("date", "start_time", "end_time"):
            value = getattr(raw, name)
            if value is None or not str(value).strip():
                raise IncompleteInputError("All fields are required", name)

        entry_date = parse_date(raw.date)
        start_time = parse_timestamp(raw.start_time, "start_time")
        end_time = parse_timestamp(raw.end_time, "end_time")

        if start_time >= end_time:
            raise InvalidTimeRangeError()

        return ParsedEntry(
            date=entry_date,
            start_time=start_time,
            end_time=end_time,
            overtime_reason=raw.overtime_reason,
            responsible_person=raw.responsible_person,
        )

    def check_overlap(
        self,
        candidate: ParsedEntry,
        existing: Iterable[TimeEntry],
        exclude_id: Optional[int] = None,
    ) -> None:
        """
        Raise OverlapConflictError if ``candidate`` intersects any entry in
        ``existing`` other than ``exclude_id``.
        ``existing`` must already be narrowed to the owner and date.
        """
        for entry in existing:
            if exclude_id is not None and entry.id == exclude_id:
                continue
            if entry.overlaps(candidate.start_time, candidate.end_time):
                raise OverlapConflictError(conflicting_id=entry.id)

    def validate_new(
        self,
        user_id: int,
        raw: EntryInput,
        existing_for_date,
    ) -> TimeEntry:
        """
        Validate a new entry and build it.

        ``existing_for_date`` is called with the parsed date and must
        return the owner's entries on that date, so the store is only
        queried once the input is known to be well formed.
        """
        candidate = self.parse(raw)
        self.check_overlap(candidate, existing_for_date(candidate.date))
        return TimeEntry(
            user_id=user_id,
            date=candidate.date,
            start_time=candidate.start_time,
            end_time=candidate.end_time,
            overtime_reason=candidate.overtime_reason,
            responsible_person=candidate.responsible_person,
        )

    def validate_update(
        self,
        caller_id: int,
        entry: TimeEntry,
        raw: EntryInput,
        existing_for_date,
    ) -> TimeEntry:
        """
        Validate an update of ``entry`` by ``caller_id`` and apply it.
        Ownership is checked before any field.
        """
        if not entry.is_owned_by(caller_id):
            raise ForbiddenError("Not authorized")

        candidate = self.parse(raw)
        self.check_overlap(candidate, existing_for_date(candidate.date), exclude_id=entry.id)
        entry.reschedule(
            entry_date=candidate.date,
            start_time=candidate.start_time,
            end_time=candidate.end_time,
            overtime_reason=candidate.overtime_reason,
            responsible_person=candidate.responsible_person,
        )
        return entry


def parse_timestamp(value: str, field: str) -> datetime:
    """
    Parse an ISO-8601 timestamp. Offsets are converted to naive UTC;
    naive input is taken as-is.
    """
    text = str(value).strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise InvalidFormatError("Invalid date format", field)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_date(value: str, field: str = "date") -> date:
    """Parse ``YYYY-MM-DD`` or the calendar date of an ISO-8601 timestamp."""
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    return parse_timestamp(text, field).date()
