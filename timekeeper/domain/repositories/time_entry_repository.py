"""Time Entry repository interface.
Defines the contract for time entry data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import date

from timekeeper.domain.models.time_entry import TimeEntry


class TimeEntryRepository(ABC):
    """
    Repository interface for TimeEntry entity.
    Defines all operations needed for time entry data persistence.
    """

    @abstractmethod
    def save(self, time_entry: TimeEntry) -> TimeEntry:
        """
        Insert a new time entry or update an existing one.
        Returns the saved time entry with its ID and timestamps.
        """
        pass

    @abstractmethod
    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        """
        Find a time entry by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def delete(self, entry_id: int, user_id: int) -> bool:
        """
        Delete a time entry owned by ``user_id``.
        Returns False when no such entry exists for that owner.
        """
        pass

    @abstractmethod
    def find_by_user_and_date(self, user_id: int, entry_date: date) -> List[TimeEntry]:
        """
        Find all entries of a user on one calendar date.
        """
        pass

    @abstractmethod
    def find_by_user_in_range(self, user_id: int, start_date: date, end_date: date) -> List[TimeEntry]:
        """
        Find entries of a user with start_date <= date < end_date.
        """
        pass

    @abstractmethod
    def find_by_user_in_period(self, user_id: int, month: int, year: int) -> List[TimeEntry]:
        """
        Find entries of a user in a calendar month, oldest date first.
        """
        pass

    @abstractmethod
    def find_all_in_period(self, month: int, year: int) -> List[TimeEntry]:
        """
        Find entries of every user in a calendar month, oldest date first.
        """
        pass

    @abstractmethod
    def find_by_user(self, user_id: int) -> List[TimeEntry]:
        """
        Find all entries of a user, newest date first.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[TimeEntry]:
        """
        Find all entries, newest date first.
        """
        pass
