"""Account repository interface.
Defines the contract for the account directory.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from timekeeper.domain.models.account import Account


class AccountRepository(ABC):
    """
    Repository interface for Account entity.
    Username and employee ID are each unique across the directory.
    """

    @abstractmethod
    def save(self, account: Account) -> Account:
        """
        Insert a new account or update an existing one.
        Raises DuplicateEntityError on a username or employee ID collision,
        leaving the directory unchanged.
        """
        pass

    @abstractmethod
    def get_by_id(self, account_id: int) -> Optional[Account]:
        """
        Find an account by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[Account]:
        """
        Find an account by username, used for credential checks.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def get_by_employee_id(self, employee_id: str) -> Optional[Account]:
        pass

    @abstractmethod
    def list_all(self) -> List[Account]:
        """All accounts ordered by username."""
        pass

    @abstractmethod
    def has_admin(self) -> bool:
        """Whether at least one admin account exists."""
        pass
