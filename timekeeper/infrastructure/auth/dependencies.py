"""
Authentication dependencies for FastAPI.
Resolves the caller from the bearer token on every request.
"""

from typing import Optional, Annotated
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from timekeeper.domain.models.account import Account
from timekeeper.domain.models.base import AuthenticationError
from timekeeper.domain.services.access_gate import AccessGate
from timekeeper.infrastructure.auth.jwt_handler import JWTHandler
from timekeeper.infrastructure.auth.password import PasswordHasher
from timekeeper.infrastructure.db.database import get_db
from timekeeper.infrastructure.repositories.account_repository import SQLAlchemyAccountRepository


# Missing credentials are reported through AuthenticationError, not a bare 403
security = HTTPBearer(auto_error=False)


def get_jwt_handler(request: Request) -> JWTHandler:
    """Dependency to get JWT handler."""
    return request.app.state.jwt_handler


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_access_gate(db: Annotated[Session, Depends(get_db)]) -> AccessGate:
    return AccessGate(SQLAlchemyAccountRepository(db))


def _resolve(
    credentials: Optional[HTTPAuthorizationCredentials],
    jwt_handler: JWTHandler,
    gate: AccessGate,
    require_admin: bool,
) -> Account:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token, authorization denied", AuthenticationError.MISSING_TOKEN)
    claims = jwt_handler.verify_token(credentials.credentials)
    return gate.resolve(claims, require_admin=require_admin)


async def get_current_account(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)],
    gate: Annotated[AccessGate, Depends(get_access_gate)]
) -> Account:
    """
    FastAPI dependency to get the current authenticated account.

    Raises:
        AuthenticationError: If the token is missing, invalid, expired,
            or its account no longer exists
    """
    return _resolve(credentials, jwt_handler, gate, require_admin=False)


async def get_current_admin(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)],
    gate: Annotated[AccessGate, Depends(get_access_gate)]
) -> Account:
    """
    FastAPI dependency for admin-only operations.

    Raises:
        ForbiddenError: If the caller is authenticated but not an admin
    """
    return _resolve(credentials, jwt_handler, gate, require_admin=True)


async def get_optional_account(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)],
    gate: Annotated[AccessGate, Depends(get_access_gate)]
) -> Optional[Account]:
    """
    Like ``get_current_account`` but returns None when no token is sent.
    A token that is sent must still be valid.
    """
    if credentials is None:
        return None
    return _resolve(credentials, jwt_handler, gate, require_admin=False)


# Type aliases for cleaner dependency injection
CurrentAccount = Annotated[Account, Depends(get_current_account)]
CurrentAdmin = Annotated[Account, Depends(get_current_admin)]
OptionalAccount = Annotated[Optional[Account], Depends(get_optional_account)]
