"""
Authentication infrastructure.
"""

from .jwt_handler import JWTHandler
from .password import PasswordHasher, pwd_context
from .dependencies import (
    get_current_account,
    get_current_admin,
    get_optional_account,
    get_jwt_handler,
    get_password_hasher,
    CurrentAccount,
    CurrentAdmin,
    OptionalAccount,
)

__all__ = [
    "JWTHandler",
    "PasswordHasher",
    "pwd_context",
    "get_current_account",
    "get_current_admin",
    "get_optional_account",
    "get_jwt_handler",
    "get_password_hasher",
    "CurrentAccount",
    "CurrentAdmin",
    "OptionalAccount",
]
