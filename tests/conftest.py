"""
Shared fixtures.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from timekeeper.config import Settings
from timekeeper.domain.models.account import Account, Position
from timekeeper.domain.models.base import DuplicateEntityError
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.repositories.account_repository import AccountRepository
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository
from timekeeper.infrastructure.db.database import Database
from timekeeper.main import create_application


TEST_PASSWORD = "secret123"


class RecordingNotifier:
    """Notifier double that keeps every message in memory."""

    is_configured = True

    def __init__(self, fail: bool = False):
        self.messages: List[str] = []
        self.fail = fail

    async def notify(self, text: str) -> bool:
        if self.fail:
            raise RuntimeError("notifier is down")
        self.messages.append(text)
        return True


class PlainHasher:
    """Reversible stand-in for the argon2 hasher in unit tests."""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


class InMemoryAccountRepository(AccountRepository):
    def __init__(self):
        self.accounts: Dict[int, Account] = {}
        self.next_id = 1

    def save(self, account: Account) -> Account:
        for other in self.accounts.values():
            if other.id == account.id:
                continue
            if other.username == account.username:
                raise DuplicateEntityError("Account", "username", account.username)
            if other.employee_id == account.employee_id:
                raise DuplicateEntityError("Account", "employee_id", account.employee_id)
        if account.id is None:
            account.id = self.next_id
            self.next_id += 1
        self.accounts[account.id] = account
        return account

    def get_by_id(self, account_id: int) -> Optional[Account]:
        return self.accounts.get(account_id)

    def get_by_username(self, username: str) -> Optional[Account]:
        return next((a for a in self.accounts.values() if a.username == username), None)

    def get_by_employee_id(self, employee_id: str) -> Optional[Account]:
        return next((a for a in self.accounts.values() if a.employee_id == employee_id), None)

    def list_all(self) -> List[Account]:
        return sorted(self.accounts.values(), key=lambda a: a.username)

    def has_admin(self) -> bool:
        return any(a.is_admin for a in self.accounts.values())


class InMemoryTimeEntryRepository(TimeEntryRepository):
    def __init__(self):
        self.entries: Dict[int, TimeEntry] = {}
        self.next_id = 1

    def save(self, time_entry: TimeEntry) -> TimeEntry:
        if time_entry.id is None:
            time_entry.id = self.next_id
            self.next_id += 1
        self.entries[time_entry.id] = time_entry
        return time_entry

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self.entries.get(entry_id)

    def delete(self, entry_id: int, user_id: int) -> bool:
        entry = self.entries.get(entry_id)
        if entry is None or entry.user_id != user_id:
            return False
        del self.entries[entry_id]
        return True

    def find_by_user_and_date(self, user_id: int, entry_date: date) -> List[TimeEntry]:
        return [e for e in self.entries.values() if e.user_id == user_id and e.date == entry_date]

    def find_by_user_in_range(self, user_id: int, start_date: date, end_date: date) -> List[TimeEntry]:
        return sorted(
            (e for e in self.entries.values()
             if e.user_id == user_id and start_date <= e.date < end_date),
            key=lambda e: (e.date, e.start_time),
        )

    def find_by_user_in_period(self, user_id: int, month: int, year: int) -> List[TimeEntry]:
        return [e for e in self.find_all_in_period(month, year) if e.user_id == user_id]

    def find_all_in_period(self, month: int, year: int) -> List[TimeEntry]:
        return sorted(
            (e for e in self.entries.values() if e.date.month == month and e.date.year == year),
            key=lambda e: (e.date, e.start_time),
        )

    def find_by_user(self, user_id: int) -> List[TimeEntry]:
        return [e for e in self.find_all() if e.user_id == user_id]

    def find_all(self) -> List[TimeEntry]:
        return sorted(self.entries.values(), key=lambda e: (e.date, e.start_time), reverse=True)


def make_account(account_id=1, username="alice", is_admin=False, position=Position.WORKER, employee_id=None):
    return Account(
        id=account_id,
        username=username,
        password_hash=f"hashed:{TEST_PASSWORD}",
        position=position,
        employee_id=employee_id or f"EMP-{account_id}",
        is_admin=is_admin,
    )


def make_entry(user_id=1, day="2024-01-10", start="09:00", end="17:00", entry_id=None, **kwargs):
    entry_date = date.fromisoformat(day)
    return TimeEntry(
        id=entry_id,
        user_id=user_id,
        date=entry_date,
        start_time=datetime.fromisoformat(f"{day}T{start}:00"),
        end_time=datetime.fromisoformat(f"{day}T{end}:00"),
        **kwargs,
    )


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        environment="testing",
        debug=False,
        database_url="sqlite://",
        jwt_secret_key="test-secret-key",
        rate_limit_enabled=False,
        telegram_bot_token=None,
        telegram_chat_id=None,
    )


@pytest.fixture
def database(settings):
    db = Database.from_settings(settings)
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(settings, database, notifier):
    return create_application(settings=settings, database=database, notifier=notifier)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register(client, username="alice", employee_id="EMP-001", position="worker", password=TEST_PASSWORD):
    return client.post(
        "/api/auth/register",
        json={
            "username": username,
            "password": password,
            "position": position,
            "employee_id": employee_id,
        },
    )


@pytest.fixture
def worker_token(client):
    response = register(client)
    assert response.status_code == 201
    return response.json()["token"]


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/api/auth/create-admin",
        json={
            "username": "boss",
            "password": TEST_PASSWORD,
            "position": "worker",
            "employee_id": "ADM-001",
        },
    )
    assert response.status_code == 201
    return response.json()["token"]
