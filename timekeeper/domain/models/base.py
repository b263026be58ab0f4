"""
Entity identity and the exception hierarchy shared by the domain.
"""

from datetime import datetime, timezone
from typing import Optional, Any
from abc import ABC
from dataclasses import dataclass, field


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored by the persistence layer."""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


@dataclass
class BaseEntity(ABC):
    """Identity and timestamps. Ids are assigned by the store."""

    id: Optional[int] = field(default=None, kw_only=True)
    created_at: datetime = field(default_factory=utcnow, kw_only=True)
    updated_at: datetime = field(default_factory=utcnow, kw_only=True)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        self.updated_at = utcnow()

    @property
    def is_new(self) -> bool:
        """Not yet stored."""
        return self.id is None

    def validate(self) -> None:
        """Raise a ValidationError subclass when invariants do not hold."""
        pass


class DomainException(Exception):
    """Root of the domain error hierarchy. ``code`` is the machine-readable name."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Rejected input, optionally tied to one field."""

    def __init__(self, message: str, field: Optional[str] = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)
        self.field = field


class IncompleteInputError(ValidationError):
    """A required field is missing or blank."""

    def __init__(self, message: str = "All fields are required", field: Optional[str] = None):
        super().__init__(message, field, code="INCOMPLETE_INPUT")


class InvalidFormatError(ValidationError):
    """A field is present but cannot be parsed or does not match its format."""

    def __init__(self, message: str = "Invalid date format", field: Optional[str] = None):
        super().__init__(message, field, code="INVALID_FORMAT")


class InvalidTimeRangeError(InvalidFormatError):
    """Start of an interval is not strictly before its end."""

    def __init__(self, message: str = "Start time must be before end time"):
        super().__init__(message, "end_time")
        self.code = "INVALID_TIME_RANGE"


class OverlapConflictError(DomainException):
    """A time entry intersects another entry of the same owner on the same date."""

    def __init__(self, message: str = "Time entry overlaps with existing entry", conflicting_id: Optional[int] = None):
        super().__init__(message, "OVERLAP_CONFLICT")
        self.conflicting_id = conflicting_id


class EntityNotFoundError(DomainException):
    """No such record, or not visible to the caller."""

    def __init__(self, entity_type: str, entity_id: Any = None, message: Optional[str] = None):
        if message is None:
            message = f"{entity_type} not found"
            if entity_id is not None:
                message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """A unique field value is already taken."""

    def __init__(self, entity_type: str, field: str, value: Any):
        message = f"{entity_type} with {field}='{value}' already exists"
        super().__init__(message, "DUPLICATE_ENTITY")
        self.entity_type = entity_type
        self.field = field
        self.value = value


class AuthenticationError(DomainException):
    """The caller could not be identified."""

    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INVALID_CREDENTIALS = "invalid_credentials"

    def __init__(self, message: str = "Authentication required", reason: str = MISSING_TOKEN):
        super().__init__(message, reason.upper())
        self.reason = reason


class ForbiddenError(DomainException):
    """The caller is identified but not allowed to perform the operation."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, "FORBIDDEN")
