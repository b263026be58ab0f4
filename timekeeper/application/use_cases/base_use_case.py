"""
Use case scaffolding shared by the account, time entry and report flows.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic, List

from timekeeper.domain.events.base import DomainEvent, EventDispatcher
from timekeeper.domain.models.account import Account
from timekeeper.domain.models.base import AuthenticationError, ForbiddenError


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class BaseUseCase(ABC, Generic[T, R]):
    """
    One application operation: validate the request, then run it.
    Domain errors are not caught here; the web layer maps them to responses.
    """

    async def execute(self, request: T) -> R:
        started = time.perf_counter()

        await self._validate_request(request)
        result = await self._execute_business_logic(request)

        logger.debug(f"{type(self).__name__} took {time.perf_counter() - started:.3f}s")
        return result

    async def _validate_request(self, request: T) -> None:
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """Read-only operation."""


class CommandUseCase(BaseUseCase[T, R]):
    """
    State-changing operation. Events recorded while it runs are dispatched
    only after it returns without raising.
    """

    def __init__(self, event_dispatcher: Optional[EventDispatcher] = None):
        self.event_dispatcher = event_dispatcher
        self.events: List[DomainEvent] = []

    async def _execute_business_logic(self, request: T) -> R:
        result = await self._execute_command_logic(request)
        await self._publish_events()
        return result

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        pass

    def _record_event(self, event: DomainEvent) -> None:
        self.events.append(event)

    async def _publish_events(self) -> None:
        pending, self.events = self.events, []
        if self.event_dispatcher is None:
            return
        for event in pending:
            await self.event_dispatcher.dispatch(event)


class CreateUseCase(CommandUseCase[T, R]):
    pass


class UpdateUseCase(CommandUseCase[T, R]):
    pass


class DeleteUseCase(CommandUseCase[T, R]):
    pass


class AuthorizedUseCase(BaseUseCase[T, R]):
    """Mixin for operations performed on behalf of an authenticated account."""

    current_account: Optional[Account] = None

    def set_current_account(self, account: Optional[Account]) -> "AuthorizedUseCase":
        self.current_account = account
        return self

    def _require_account(self) -> Account:
        if self.current_account is None:
            raise AuthenticationError("No token, authorization denied", AuthenticationError.MISSING_TOKEN)
        return self.current_account

    def _require_admin(self) -> Account:
        account = self._require_account()
        if not account.is_admin:
            raise ForbiddenError("Admin access required")
        return account

    def _require_owner_or_admin(self, resource_owner_id: int) -> Account:
        account = self._require_account()
        if account.id != resource_owner_id and not account.is_admin:
            raise ForbiddenError("Not authorized")
        return account
