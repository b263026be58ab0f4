"""
Unit tests for token handling and password hashing.
"""

import pytest
from jose import jwt

from timekeeper.config import Settings
from timekeeper.domain.models.base import AuthenticationError
from timekeeper.infrastructure.auth import JWTHandler, PasswordHasher
from tests.conftest import make_account


class TestJWTHandler:
    """Test cases for JWTHandler."""

    def setup_method(self):
        self.settings = Settings(_env_file=None, jwt_secret_key="unit-secret")
        self.handler = JWTHandler(self.settings)
        self.account = make_account(account_id=7, username="alice", employee_id="EMP-7")

    def test_round_trip_claims(self):
        claims = self.handler.verify_token(self.handler.create_access_token(self.account))

        assert claims["sub"] == "7"
        assert claims["username"] == "alice"
        assert claims["employee_id"] == "EMP-7"
        assert claims["is_admin"] is False
        assert claims["exp"] - claims["iat"] == 24 * 60 * 60

    def test_bearer_prefix_is_accepted(self):
        token = self.handler.create_access_token(self.account)

        assert self.handler.verify_token(f"Bearer {token}")["sub"] == "7"

    def test_expired_token(self):
        token = self.handler.create_access_token(self.account, expires_minutes=-5)

        with pytest.raises(AuthenticationError) as exc:
            self.handler.verify_token(token)

        assert exc.value.reason == AuthenticationError.TOKEN_EXPIRED

    def test_wrong_signature(self):
        other = JWTHandler(Settings(_env_file=None, jwt_secret_key="other-secret"))
        token = other.create_access_token(self.account)

        with pytest.raises(AuthenticationError) as exc:
            self.handler.verify_token(token)

        assert exc.value.reason == AuthenticationError.INVALID_TOKEN

    def test_garbage_token(self):
        with pytest.raises(AuthenticationError) as exc:
            self.handler.verify_token("not-a-token")

        assert exc.value.code == "INVALID_TOKEN"

    def test_token_without_subject(self):
        token = jwt.encode({"exp": 4102444800}, "unit-secret", algorithm="HS256")

        with pytest.raises(AuthenticationError) as exc:
            self.handler.verify_token(token)

        assert exc.value.code == "INVALID_TOKEN"


class TestPasswordHasher:
    """Test cases for PasswordHasher."""

    def setup_method(self):
        self.hasher = PasswordHasher()

    def test_hash_and_verify(self):
        password_hash = self.hasher.hash("secret123")

        assert password_hash.startswith("$argon2")
        assert self.hasher.verify("secret123", password_hash)
        assert not self.hasher.verify("secret124", password_hash)

    def test_unknown_hash_format(self):
        assert not self.hasher.verify("secret123", "plain-text")

    def test_empty_input(self):
        assert not self.hasher.verify("", "whatever")
