"""
SQLAlchemy-backed time entry storage with per-owner and date-range queries.
"""

from typing import Optional, List
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy import and_, asc, desc

from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.models.base import EntityNotFoundError
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository
from timekeeper.infrastructure.db.models import TimeEntryModel
from timekeeper.infrastructure.mappers.time_entry_mapper import TimeEntryMapper


def month_bounds(month: int, year: int):
    """First day of the month and first day of the following month."""
    start = date(year, month, 1)
    if month == 12:
        return start, date(year + 1, 1, 1)
    return start, date(year, month + 1, 1)


class SQLAlchemyTimeEntryRepository(TimeEntryRepository):
    """Time entries stored in the ``time_entries`` table."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimeEntryMapper()
        self.model = TimeEntryModel

    def save(self, time_entry: TimeEntry) -> TimeEntry:
        if time_entry.is_new:
            model = self.mapper.domain_to_model(time_entry)
            self.session.add(model)
        else:
            model = self.session.get(TimeEntryModel, time_entry.id)
            if not model:
                raise EntityNotFoundError("TimeEntry", time_entry.id)
            self.mapper.update_model(model, time_entry)

        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        model = self.session.get(TimeEntryModel, entry_id)

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def delete(self, entry_id: int, user_id: int) -> bool:
        """Delete a time entry owned by user_id."""
        model = self.session.query(TimeEntryModel).filter_by(
            id=entry_id, user_id=user_id
        ).first()

        if not model:
            return False

        self.session.delete(model)
        self.session.commit()
        return True

    def find_by_user_and_date(self, user_id: int, entry_date: date) -> List[TimeEntry]:
        models = self.session.query(TimeEntryModel).filter_by(
            user_id=user_id, date=entry_date
        ).order_by(asc(TimeEntryModel.start_time)).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def find_by_user_in_range(self, user_id: int, start_date: date, end_date: date) -> List[TimeEntry]:
        """Half-open range: start_date <= date < end_date."""
        models = self.session.query(TimeEntryModel).filter(
            and_(
                TimeEntryModel.user_id == user_id,
                TimeEntryModel.date >= start_date,
                TimeEntryModel.date < end_date
            )
        ).order_by(asc(TimeEntryModel.date), asc(TimeEntryModel.start_time)).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def find_by_user_in_period(self, user_id: int, month: int, year: int) -> List[TimeEntry]:
        start_date, end_date = month_bounds(month, year)
        return self.find_by_user_in_range(user_id, start_date, end_date)

    def find_all_in_period(self, month: int, year: int) -> List[TimeEntry]:
        start_date, end_date = month_bounds(month, year)
        models = self.session.query(TimeEntryModel).filter(
            and_(
                TimeEntryModel.date >= start_date,
                TimeEntryModel.date < end_date
            )
        ).order_by(asc(TimeEntryModel.date), asc(TimeEntryModel.start_time)).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def find_by_user(self, user_id: int) -> List[TimeEntry]:
        models = self.session.query(TimeEntryModel).filter_by(
            user_id=user_id
        ).order_by(desc(TimeEntryModel.date), desc(TimeEntryModel.start_time)).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def find_all(self) -> List[TimeEntry]:
        models = self.session.query(TimeEntryModel).order_by(
            desc(TimeEntryModel.date), desc(TimeEntryModel.start_time)
        ).all()

        return [self.mapper.model_to_domain(model) for model in models]
