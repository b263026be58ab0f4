"""
Mappers between domain entities and database models.
"""

from .account_mapper import AccountMapper
from .time_entry_mapper import TimeEntryMapper

__all__ = ["AccountMapper", "TimeEntryMapper"]
