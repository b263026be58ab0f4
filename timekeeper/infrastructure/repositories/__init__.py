"""
SQLAlchemy implementations of the domain repositories.
"""

from .account_repository import SQLAlchemyAccountRepository
from .time_entry_repository import SQLAlchemyTimeEntryRepository

__all__ = ["SQLAlchemyAccountRepository", "SQLAlchemyTimeEntryRepository"]
