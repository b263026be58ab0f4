"""
Report use cases for the application layer.
Collect a month of entries and fold them into report models for the renderers.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from timekeeper.application.use_cases.base_use_case import AuthorizedUseCase, QueryUseCase
from timekeeper.domain.models.base import EntityNotFoundError, InvalidFormatError
from timekeeper.domain.models.report import OwnerReport, ReportPeriod
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.repositories.account_repository import AccountRepository
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository
from timekeeper.domain.services.report_aggregator import ReportAggregator


logger = logging.getLogger(__name__)


def parse_period(month: Any, year: Any) -> ReportPeriod:
    """Build a period from raw path values."""
    try:
        month_number = int(str(month).strip())
    except ValueError:
        raise InvalidFormatError("Month must be a number", "month")
    try:
        year_number = int(str(year).strip())
    except ValueError:
        raise InvalidFormatError("Year must be a number", "year")
    return ReportPeriod(month=month_number, year=year_number)


@dataclass(frozen=True)
class OwnerReportRequest:
    user_id: int
    period: ReportPeriod


class BuildOwnerReportUseCase(AuthorizedUseCase, QueryUseCase[OwnerReportRequest, OwnerReport]):
    """
    One account's month. The caller must be that account or an admin.
    Raises EntityNotFoundError when the month has no entries.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        account_repository: AccountRepository,
        aggregator: Optional[ReportAggregator] = None
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.account_repository = account_repository
        self.aggregator = aggregator or ReportAggregator()

    async def _validate_request(self, request: OwnerReportRequest) -> None:
        self._require_owner_or_admin(request.user_id)

    async def _execute_business_logic(self, request: OwnerReportRequest) -> OwnerReport:
        account = self.account_repository.get_by_id(request.user_id)
        if account is None:
            raise EntityNotFoundError("Account", request.user_id, "User not found")

        period = request.period
        entries = self.time_entry_repository.find_by_user_in_period(account.id, period.month, period.year)
        if not entries:
            raise EntityNotFoundError("TimeEntry", message="No entries found")

        return OwnerReport(
            account=account,
            period=period,
            stat=self.aggregator.aggregate(entries),
            entries=entries,
        )


class BuildAllOwnersReportUseCase(AuthorizedUseCase, QueryUseCase[ReportPeriod, List[OwnerReport]]):
    """
    Every account with entries in the month, in order of their first entry.
    Admin only. Raises EntityNotFoundError when the month has no entries.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        account_repository: AccountRepository,
        aggregator: Optional[ReportAggregator] = None
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.account_repository = account_repository
        self.aggregator = aggregator or ReportAggregator()

    async def _validate_request(self, request: ReportPeriod) -> None:
        self._require_admin()

    async def _execute_business_logic(self, request: ReportPeriod) -> List[OwnerReport]:
        entries = self.time_entry_repository.find_all_in_period(request.month, request.year)
        if not entries:
            raise EntityNotFoundError("TimeEntry", message="No entries found")

        entries_by_owner: Dict[int, List[TimeEntry]] = {}
        for entry in entries:
            entries_by_owner.setdefault(entry.user_id, []).append(entry)

        reports = []
        for user_id, stat in self.aggregator.aggregate_by_owner(entries).items():
            account = self.account_repository.get_by_id(user_id)
            if account is None:
                logger.warning(f"Skipping entries of missing account {user_id}")
                continue
            reports.append(OwnerReport(
                account=account,
                period=request,
                stat=stat,
                entries=entries_by_owner[user_id],
            ))

        return reports
