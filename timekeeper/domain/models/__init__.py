"""
Domain models package.
Contains all domain entities, value objects and domain exceptions.
"""

from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    IncompleteInputError,
    InvalidFormatError,
    InvalidTimeRangeError,
    OverlapConflictError,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthenticationError,
    ForbiddenError,
)
from .account import Account, Position
from .time_entry import TimeEntry, OVERTIME_THRESHOLD_HOURS, COMPANY_REQUEST_REASON
from .report import ReportStat, ReportPeriod, OwnerReport

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "IncompleteInputError",
    "InvalidFormatError",
    "InvalidTimeRangeError",
    "OverlapConflictError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "AuthenticationError",
    "ForbiddenError",
    "Account",
    "Position",
    "TimeEntry",
    "OVERTIME_THRESHOLD_HOURS",
    "COMPANY_REQUEST_REASON",
    "ReportStat",
    "ReportPeriod",
    "OwnerReport",
]
