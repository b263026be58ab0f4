"""
Account use cases for the application layer.
Registration, login and account administration.
"""

import logging
from typing import List

from timekeeper.application.dto.account_dto import (
    RegisterRequestDTO,
    CreateAccountRequestDTO,
    LoginRequestDTO,
    AccountResponseDTO,
    AuthResponseDTO,
)
from timekeeper.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CreateUseCase,
    QueryUseCase,
)
from timekeeper.domain.models.account import Account
from timekeeper.domain.models.base import (
    AuthenticationError,
    ForbiddenError,
    IncompleteInputError,
)
from timekeeper.domain.repositories.account_repository import AccountRepository


logger = logging.getLogger(__name__)


class _AccountFactoryMixin:
    """Shared construction of accounts from request DTOs."""

    account_repository: AccountRepository

    def _register(self, request: RegisterRequestDTO, is_admin: bool) -> Account:
        account = Account.register(
            username=request.username,
            password=request.password,
            position=request.position,
            employee_id=request.employee_id,
            password_hasher=self.password_hasher,
            is_admin=is_admin,
        )
        saved = self.account_repository.save(account)
        logger.info(f"Created account {saved.id} ({saved.username}, admin={saved.is_admin})")
        return saved


class RegisterAccountUseCase(_AccountFactoryMixin, CreateUseCase[RegisterRequestDTO, AuthResponseDTO]):
    """Self-registration. Always creates a non-admin account."""

    def __init__(self, account_repository: AccountRepository, password_hasher, jwt_handler):
        super().__init__()
        self.account_repository = account_repository
        self.password_hasher = password_hasher
        self.jwt_handler = jwt_handler

    async def _execute_command_logic(self, request: RegisterRequestDTO) -> AuthResponseDTO:
        account = self._register(request, is_admin=False)
        token = self.jwt_handler.create_access_token(account)
        return AuthResponseDTO.issue(account, token, message="User registered successfully")


class LoginUseCase(QueryUseCase[LoginRequestDTO, AuthResponseDTO]):
    """Exchange username and password for a token."""

    def __init__(self, account_repository: AccountRepository, password_hasher, jwt_handler):
        super().__init__()
        self.account_repository = account_repository
        self.password_hasher = password_hasher
        self.jwt_handler = jwt_handler

    async def _validate_request(self, request: LoginRequestDTO) -> None:
        if not request.username or not request.password:
            raise IncompleteInputError("Username and password are required",
                                       "username" if not request.username else "password")

    async def _execute_business_logic(self, request: LoginRequestDTO) -> AuthResponseDTO:
        account = self.account_repository.get_by_username(request.username.strip())

        # Unknown user and wrong password are indistinguishable to the caller
        if account is None or not self.password_hasher.verify(request.password, account.password_hash):
            logger.warning(f"Failed login attempt for username '{request.username}'")
            raise AuthenticationError("Invalid credentials", AuthenticationError.INVALID_CREDENTIALS)

        token = self.jwt_handler.create_access_token(account)
        logger.info(f"Account {account.id} logged in")
        return AuthResponseDTO.issue(account, token)


class CreateAdminUseCase(_AccountFactoryMixin, AuthorizedUseCase, CreateUseCase[RegisterRequestDTO, AuthResponseDTO]):
    """
    Create an admin account.
    Open while the directory has no admin; afterwards only admins may call it.
    """

    def __init__(self, account_repository: AccountRepository, password_hasher, jwt_handler):
        super().__init__()
        self.account_repository = account_repository
        self.password_hasher = password_hasher
        self.jwt_handler = jwt_handler

    async def _validate_request(self, request: RegisterRequestDTO) -> None:
        if not self.account_repository.has_admin():
            return
        if self.current_account is None:
            raise AuthenticationError("Admin already exists; authenticate as an admin",
                                      AuthenticationError.MISSING_TOKEN)
        if not self.current_account.is_admin:
            raise ForbiddenError("Admin access required")

    async def _execute_command_logic(self, request: RegisterRequestDTO) -> AuthResponseDTO:
        account = self._register(request, is_admin=True)
        token = self.jwt_handler.create_access_token(account)
        return AuthResponseDTO.issue(account, token, message="Admin user created successfully")


class CreateAccountUseCase(_AccountFactoryMixin, AuthorizedUseCase, CreateUseCase[CreateAccountRequestDTO, AccountResponseDTO]):
    """Admin creates an account for somebody else."""

    def __init__(self, account_repository: AccountRepository, password_hasher, allow_admin: bool = True):
        super().__init__()
        self.account_repository = account_repository
        self.password_hasher = password_hasher
        self.allow_admin = allow_admin

    async def _validate_request(self, request: CreateAccountRequestDTO) -> None:
        self._require_admin()

    async def _execute_command_logic(self, request: CreateAccountRequestDTO) -> AccountResponseDTO:
        is_admin = self.allow_admin and request.is_admin
        account = self._register(request, is_admin=is_admin)
        return AccountResponseDTO.from_domain(account)


class ListAccountsUseCase(AuthorizedUseCase, QueryUseCase[None, List[AccountResponseDTO]]):
    """All accounts, without credentials."""

    def __init__(self, account_repository: AccountRepository):
        super().__init__()
        self.account_repository = account_repository

    async def _validate_request(self, request: None) -> None:
        self._require_admin()

    async def _execute_business_logic(self, request: None) -> List[AccountResponseDTO]:
        return [AccountResponseDTO.from_domain(account) for account in self.account_repository.list_all()]
