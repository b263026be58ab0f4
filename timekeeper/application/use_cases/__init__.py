"""
Application use cases.
"""

from .base_use_case import (
    BaseUseCase,
    QueryUseCase,
    CommandUseCase,
    AuthorizedUseCase,
)
from .account_use_cases import (
    RegisterAccountUseCase,
    LoginUseCase,
    CreateAdminUseCase,
    CreateAccountUseCase,
    ListAccountsUseCase,
)
from .time_entry_use_cases import (
    UpdateTimeEntryRequest,
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    ListMyTimeEntriesUseCase,
    ListAllTimeEntriesUseCase,
    DailyTimeEntriesUseCase,
    WeeklyTimeEntriesUseCase,
)
from .report_use_cases import (
    parse_period,
    OwnerReportRequest,
    BuildOwnerReportUseCase,
    BuildAllOwnersReportUseCase,
)

__all__ = [
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "AuthorizedUseCase",
    "RegisterAccountUseCase",
    "LoginUseCase",
    "CreateAdminUseCase",
    "CreateAccountUseCase",
    "ListAccountsUseCase",
    "UpdateTimeEntryRequest",
    "CreateTimeEntryUseCase",
    "UpdateTimeEntryUseCase",
    "DeleteTimeEntryUseCase",
    "ListMyTimeEntriesUseCase",
    "ListAllTimeEntriesUseCase",
    "DailyTimeEntriesUseCase",
    "WeeklyTimeEntriesUseCase",
    "parse_period",
    "OwnerReportRequest",
    "BuildOwnerReportUseCase",
    "BuildAllOwnersReportUseCase",
]
