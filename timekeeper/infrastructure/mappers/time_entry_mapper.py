"""
Time entry mapper for converting between domain entities and database models.
"""

from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.infrastructure.db.models import TimeEntryModel


class TimeEntryMapper:
    """Maps between TimeEntry domain entity and TimeEntryModel database model."""

    def domain_to_model(self, time_entry: TimeEntry) -> TimeEntryModel:
        """Convert TimeEntry domain entity to TimeEntryModel."""
        model = TimeEntryModel(id=time_entry.id, user_id=time_entry.user_id)
        self.update_model(model, time_entry)
        return model

    def update_model(self, model: TimeEntryModel, time_entry: TimeEntry) -> None:
        """Copy the interval and overtime details onto an existing row."""
        model.date = time_entry.date
        model.start_time = time_entry.start_time
        model.end_time = time_entry.end_time
        model.overtime_reason = time_entry.overtime_reason
        model.responsible_person = time_entry.responsible_person
        model.created_at = time_entry.created_at
        model.updated_at = time_entry.updated_at

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        """Convert TimeEntryModel to TimeEntry domain entity."""
        return TimeEntry(
            id=model.id,
            user_id=model.user_id,
            date=model.date,
            start_time=model.start_time,
            end_time=model.end_time,
            overtime_reason=model.overtime_reason,
            responsible_person=model.responsible_person,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
