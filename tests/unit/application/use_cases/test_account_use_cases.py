"""
Unit tests for account use cases.
"""

from unittest.mock import Mock

import pytest

from timekeeper.application.dto.account_dto import (
    CreateAccountRequestDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from timekeeper.application.use_cases.account_use_cases import (
    CreateAccountUseCase,
    CreateAdminUseCase,
    ListAccountsUseCase,
    LoginUseCase,
    RegisterAccountUseCase,
)
from timekeeper.domain.models.base import (
    AuthenticationError,
    DuplicateEntityError,
    ForbiddenError,
    IncompleteInputError,
)
from tests.conftest import InMemoryAccountRepository, PlainHasher, make_account


def register_request(username="alice", employee_id="EMP-001", **overrides):
    values = {
        "username": username,
        "password": "secret123",
        "position": "worker",
        "employee_id": employee_id,
    }
    values.update(overrides)
    return RegisterRequestDTO(**values)


class TestRegisterAccountUseCase:
    """Test cases for self-registration."""

    def setup_method(self):
        self.repository = InMemoryAccountRepository()
        self.jwt_handler = Mock()
        self.jwt_handler.create_access_token.return_value = "token-1"
        self.use_case = RegisterAccountUseCase(self.repository, PlainHasher(), self.jwt_handler)

    @pytest.mark.asyncio
    async def test_register_returns_token(self):
        response = await self.use_case.execute(register_request())

        assert response.token == "token-1"
        assert response.username == "alice"
        assert response.is_admin is False
        assert response.user.employee_id == "EMP-001"
        assert self.repository.get_by_username("alice").password_hash == "hashed:secret123"

    @pytest.mark.asyncio
    async def test_duplicate_employee_id_leaves_directory_unchanged(self):
        await self.use_case.execute(register_request())

        with pytest.raises(DuplicateEntityError):
            await self.use_case.execute(register_request(username="bob"))

        assert [a.username for a in self.repository.list_all()] == ["alice"]

    @pytest.mark.asyncio
    async def test_missing_field(self):
        with pytest.raises(IncompleteInputError):
            await self.use_case.execute(register_request(position=None))

        assert self.repository.list_all() == []
        self.jwt_handler.create_access_token.assert_not_called()


class TestLoginUseCase:
    """Test cases for credential login."""

    def setup_method(self):
        self.repository = InMemoryAccountRepository()
        self.repository.save(make_account(account_id=None, username="alice"))
        self.jwt_handler = Mock()
        self.jwt_handler.create_access_token.return_value = "token-2"
        self.use_case = LoginUseCase(self.repository, PlainHasher(), self.jwt_handler)

    @pytest.mark.asyncio
    async def test_login_success(self):
        response = await self.use_case.execute(LoginRequestDTO(username="alice", password="secret123"))

        assert response.token == "token-2"
        assert response.position == "worker"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [("alice", "wrong-pass"), ("nobody", "secret123")])
    async def test_invalid_credentials(self, username, password):
        with pytest.raises(AuthenticationError) as exc:
            await self.use_case.execute(LoginRequestDTO(username=username, password=password))

        assert exc.value.code == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_missing_password(self):
        with pytest.raises(IncompleteInputError) as exc:
            await self.use_case.execute(LoginRequestDTO(username="alice"))

        assert exc.value.field == "password"


class TestCreateAdminUseCase:
    """Test cases for admin bootstrap and admin creation."""

    def setup_method(self):
        self.repository = InMemoryAccountRepository()
        self.jwt_handler = Mock()
        self.jwt_handler.create_access_token.return_value = "token-3"

    def use_case(self, caller=None):
        return CreateAdminUseCase(self.repository, PlainHasher(), self.jwt_handler).set_current_account(caller)

    @pytest.mark.asyncio
    async def test_first_admin_needs_no_caller(self):
        response = await self.use_case().execute(register_request(username="boss", employee_id="ADM-1"))

        assert response.is_admin is True
        assert self.repository.has_admin()

    @pytest.mark.asyncio
    async def test_second_admin_requires_token(self):
        await self.use_case().execute(register_request(username="boss", employee_id="ADM-1"))

        with pytest.raises(AuthenticationError) as exc:
            await self.use_case().execute(register_request(username="boss2", employee_id="ADM-2"))

        assert exc.value.code == "MISSING_TOKEN"

    @pytest.mark.asyncio
    async def test_second_admin_refused_for_worker(self):
        await self.use_case().execute(register_request(username="boss", employee_id="ADM-1"))
        worker = self.repository.save(make_account(account_id=None, username="alice", employee_id="EMP-9"))

        with pytest.raises(ForbiddenError):
            await self.use_case(worker).execute(register_request(username="boss2", employee_id="ADM-2"))

    @pytest.mark.asyncio
    async def test_admin_creates_admin(self):
        await self.use_case().execute(register_request(username="boss", employee_id="ADM-1"))
        admin = self.repository.get_by_username("boss")

        response = await self.use_case(admin).execute(register_request(username="boss2", employee_id="ADM-2"))

        assert response.is_admin is True
        assert len(self.repository.list_all()) == 2


class TestAccountAdministration:
    """Test cases for admin-only account management."""

    def setup_method(self):
        self.repository = InMemoryAccountRepository()
        self.admin = self.repository.save(
            make_account(account_id=None, username="boss", is_admin=True, employee_id="ADM-1")
        )
        self.worker = self.repository.save(make_account(account_id=None, username="alice", employee_id="EMP-1"))

    @pytest.mark.asyncio
    async def test_admin_creates_admin_account(self):
        use_case = CreateAccountUseCase(self.repository, PlainHasher()).set_current_account(self.admin)
        request = CreateAccountRequestDTO(
            username="carol", password="secret123", position="rider", employeeId="R-1", isAdmin=True
        )

        response = await use_case.execute(request)

        assert response.is_admin is True
        assert response.position == "rider"

    @pytest.mark.asyncio
    async def test_worker_variant_never_grants_admin(self):
        use_case = CreateAccountUseCase(self.repository, PlainHasher(), allow_admin=False)
        use_case.set_current_account(self.admin)
        request = CreateAccountRequestDTO(
            username="carol", password="secret123", position="rider", employee_id="R-1", is_admin=True
        )

        response = await use_case.execute(request)

        assert response.is_admin is False

    @pytest.mark.asyncio
    async def test_worker_cannot_create_accounts(self):
        use_case = CreateAccountUseCase(self.repository, PlainHasher()).set_current_account(self.worker)

        with pytest.raises(ForbiddenError):
            await use_case.execute(CreateAccountRequestDTO(
                username="carol", password="secret123", position="rider", employee_id="R-1"
            ))

    @pytest.mark.asyncio
    async def test_list_accounts(self):
        use_case = ListAccountsUseCase(self.repository).set_current_account(self.admin)

        accounts = await use_case.execute(None)

        assert [a.username for a in accounts] == ["alice", "boss"]
        assert "password_hash" not in accounts[0].model_dump()

    @pytest.mark.asyncio
    async def test_list_accounts_requires_admin(self):
        use_case = ListAccountsUseCase(self.repository).set_current_account(self.worker)

        with pytest.raises(ForbiddenError):
            await use_case.execute(None)
