"""
Time Entry use cases for the application layer.
Implements business logic for time tracking operations.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, List, Optional

from timekeeper.application.dto.base_dto import MessageResponseDTO
from timekeeper.application.dto.time_entry_dto import TimeEntryRequestDTO, TimeEntryResponseDTO
from timekeeper.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CreateUseCase,
    UpdateUseCase,
    DeleteUseCase,
    QueryUseCase,
)
from timekeeper.domain.events.base import EventDispatcher
from timekeeper.domain.events.time_entry_events import TimeEntryCreated
from timekeeper.domain.models.account import Account
from timekeeper.domain.models.base import EntityNotFoundError
from timekeeper.domain.repositories.account_repository import AccountRepository
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository
from timekeeper.domain.services.entry_validator import EntryValidator, parse_date


logger = logging.getLogger(__name__)

WEEK_LENGTH_DAYS = 7


@dataclass(frozen=True)
class UpdateTimeEntryRequest:
    entry_id: int
    data: TimeEntryRequestDTO


class CreateTimeEntryUseCase(AuthorizedUseCase, CreateUseCase[TimeEntryRequestDTO, TimeEntryResponseDTO]):
    """Record a new work interval for the caller and announce it."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        event_dispatcher: Optional[EventDispatcher] = None,
        validator: Optional[EntryValidator] = None
    ):
        super().__init__(event_dispatcher)
        self.time_entry_repository = time_entry_repository
        self.validator = validator or EntryValidator()

    async def _execute_command_logic(self, request: TimeEntryRequestDTO) -> TimeEntryResponseDTO:
        account = self._require_account()

        time_entry = self.validator.validate_new(
            account.id,
            request.to_input(),
            lambda entry_date: self.time_entry_repository.find_by_user_and_date(account.id, entry_date),
        )
        saved_entry = self.time_entry_repository.save(time_entry)

        logger.info(
            f"Account {account.id} recorded entry {saved_entry.id} "
            f"({saved_entry.hours:.2f}h on {saved_entry.date})"
        )
        self._record_event(TimeEntryCreated.from_entry(saved_entry, account.username))

        return TimeEntryResponseDTO.from_domain(saved_entry, account)


class UpdateTimeEntryUseCase(AuthorizedUseCase, UpdateUseCase[UpdateTimeEntryRequest, TimeEntryResponseDTO]):
    """Replace the interval of an entry the caller owns."""

    def __init__(self, time_entry_repository: TimeEntryRepository, validator: Optional[EntryValidator] = None):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.validator = validator or EntryValidator()

    async def _execute_command_logic(self, request: UpdateTimeEntryRequest) -> TimeEntryResponseDTO:
        account = self._require_account()

        time_entry = self.time_entry_repository.get_by_id(request.entry_id)
        if time_entry is None:
            raise EntityNotFoundError("TimeEntry", request.entry_id, "Time entry not found")

        time_entry = self.validator.validate_update(
            account.id,
            time_entry,
            request.data.to_input(),
            lambda entry_date: self.time_entry_repository.find_by_user_and_date(account.id, entry_date),
        )
        saved_entry = self.time_entry_repository.save(time_entry)

        logger.info(f"Account {account.id} updated entry {saved_entry.id}")
        return TimeEntryResponseDTO.from_domain(saved_entry, account)


class DeleteTimeEntryUseCase(AuthorizedUseCase, DeleteUseCase[int, MessageResponseDTO]):
    """Delete an entry of the caller. Entries of other accounts look absent."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_command_logic(self, request: int) -> MessageResponseDTO:
        account = self._require_account()

        if not self.time_entry_repository.delete(request, account.id):
            raise EntityNotFoundError("TimeEntry", request, "Time entry not found")

        logger.info(f"Account {account.id} deleted entry {request}")
        return MessageResponseDTO(message="Time entry deleted")


class ListMyTimeEntriesUseCase(AuthorizedUseCase, QueryUseCase[None, List[TimeEntryResponseDTO]]):
    """All entries of the caller, newest first."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_business_logic(self, request: None) -> List[TimeEntryResponseDTO]:
        account = self._require_account()
        entries = self.time_entry_repository.find_by_user(account.id)
        return [TimeEntryResponseDTO.from_domain(entry, account) for entry in entries]


class ListAllTimeEntriesUseCase(AuthorizedUseCase, QueryUseCase[None, List[TimeEntryResponseDTO]]):
    """Every entry of every account, newest first. Admin only."""

    def __init__(self, time_entry_repository: TimeEntryRepository, account_repository: AccountRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.account_repository = account_repository

    async def _validate_request(self, request: None) -> None:
        self._require_admin()

    async def _execute_business_logic(self, request: None) -> List[TimeEntryResponseDTO]:
        owners: Dict[int, Account] = {
            account.id: account for account in self.account_repository.list_all()
        }
        return [
            TimeEntryResponseDTO.from_domain(entry, owners.get(entry.user_id))
            for entry in self.time_entry_repository.find_all()
        ]


class DailyTimeEntriesUseCase(AuthorizedUseCase, QueryUseCase[str, List[TimeEntryResponseDTO]]):
    """Entries of the caller on one calendar date."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_business_logic(self, request: str) -> List[TimeEntryResponseDTO]:
        account = self._require_account()
        entry_date = parse_date(request)
        entries = self.time_entry_repository.find_by_user_and_date(account.id, entry_date)
        return [TimeEntryResponseDTO.from_domain(entry, account) for entry in entries]


class WeeklyTimeEntriesUseCase(AuthorizedUseCase, QueryUseCase[str, List[TimeEntryResponseDTO]]):
    """Entries of the caller in the seven days starting at the given date."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_business_logic(self, request: str) -> List[TimeEntryResponseDTO]:
        account = self._require_account()
        start_date = parse_date(request, "start_date")
        end_date = start_date + timedelta(days=WEEK_LENGTH_DAYS)
        entries = self.time_entry_repository.find_by_user_in_range(account.id, start_date, end_date)
        return [TimeEntryResponseDTO.from_domain(entry, account) for entry in entries]
