"""
Repository interfaces for the domain layer.
"""

from .account_repository import AccountRepository
from .time_entry_repository import TimeEntryRepository

__all__ = [
    "AccountRepository",
    "TimeEntryRepository",
]
