"""
Database package: engine ownership, sessions and table models.
"""

from .database import Database, get_db
from .models import Base, AccountModel, TimeEntryModel

__all__ = ["Database", "get_db", "Base", "AccountModel", "TimeEntryModel"]
