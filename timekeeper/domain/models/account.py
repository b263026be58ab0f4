"""
Account domain model.
Represents a registered worker, rider or administrator.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from timekeeper.domain.models.base import (
    BaseEntity,
    IncompleteInputError,
    InvalidFormatError,
)


USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6
EMPLOYEE_ID_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


class Position(str, Enum):
    """Job position of an account."""
    WORKER = "worker"
    RIDER = "rider"

    @property
    def display_name(self) -> str:
        return self.value.title()


@dataclass(eq=False)
class Account(BaseEntity):
    """
    Account entity.
    Holds identity, credential hash and role of a user. The clear-text
    password never reaches this object; see ``Account.register``.
    """

    username: str
    password_hash: str
    position: Position
    employee_id: str
    is_admin: bool = False

    def __post_init__(self):
        self.username = (self.username or "").strip()
        self.employee_id = (self.employee_id or "").strip()
        if isinstance(self.position, str) and not isinstance(self.position, Position):
            self.position = parse_position(self.position)
        self.validate()

    def validate(self) -> None:
        """Validate account state."""
        if not self.username:
            raise IncompleteInputError("Username is required", "username")
        if len(self.username) < USERNAME_MIN_LENGTH:
            raise InvalidFormatError(
                f"Username must be at least {USERNAME_MIN_LENGTH} characters long", "username"
            )
        if not self.employee_id:
            raise IncompleteInputError("Employee ID is required", "employee_id")
        if not EMPLOYEE_ID_PATTERN.match(self.employee_id):
            raise InvalidFormatError(
                "Employee ID can only contain letters, numbers, and hyphens", "employee_id"
            )
        if not self.password_hash:
            raise IncompleteInputError("Password is required", "password")

    @classmethod
    def register(
        cls,
        username: Optional[str],
        password: Optional[str],
        position: Optional[str],
        employee_id: Optional[str],
        password_hasher,
        is_admin: bool = False,
    ) -> "Account":
        """
        Build a new account from raw registration fields.

        Raises IncompleteInputError when any field is missing and
        InvalidFormatError when a field has the wrong shape. The password
        is hashed with ``password_hasher.hash`` before the entity exists.
        """
        missing = [
            name for name, value in (
                ("username", username),
                ("password", password),
                ("position", position),
                ("employee_id", employee_id),
            )
            if value is None or not str(value).strip()
        ]
        if missing:
            raise IncompleteInputError("All fields are required", missing[0])

        if len(password) < PASSWORD_MIN_LENGTH:
            raise InvalidFormatError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long", "password"
            )

        return cls(
            username=username,
            password_hash=password_hasher.hash(password),
            position=parse_position(position),
            employee_id=employee_id,
            is_admin=bool(is_admin),
        )


def parse_position(value: str) -> Position:
    try:
        return Position(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(p.value for p in Position)
        raise InvalidFormatError(f"Position must be one of: {allowed}", "position")
