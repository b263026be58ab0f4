"""
JWT token handler.
Issues access tokens for accounts and verifies their signature and expiry.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import ExpiredSignatureError, JWTError, jwt

from timekeeper.config import Settings, get_settings
from timekeeper.domain.models.account import Account
from timekeeper.domain.models.base import AuthenticationError


class JWTHandler:
    """Handles JWT token creation and validation."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.jwt_secret = self.settings.jwt_secret_key
        self.jwt_algorithm = self.settings.jwt_algorithm
        self.expire_minutes = self.settings.jwt_access_token_expire_minutes

    def create_access_token(self, account: Account, expires_minutes: Optional[int] = None) -> str:
        """
        Create a signed token for an account.

        Only ``sub`` is relied upon when the token comes back; the other
        claims are informational for clients.
        """
        now = datetime.now(timezone.utc)
        minutes = self.expire_minutes if expires_minutes is None else expires_minutes
        expire = now + timedelta(minutes=minutes)

        payload = {
            "sub": str(account.id),
            "username": account.username,
            "position": account.position.value,
            "is_admin": account.is_admin,
            "employee_id": account.employee_id,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }

        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a token.

        Raises:
            AuthenticationError: with reason ``token_expired`` when the
                signature is valid but the token is past ``exp``, and
                ``invalid_token`` for anything else.
        """
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "require_exp": True, "require_sub": True}
            )
        except ExpiredSignatureError:
            raise AuthenticationError("Token has expired", AuthenticationError.TOKEN_EXPIRED)
        except JWTError:
            raise AuthenticationError("Invalid token", AuthenticationError.INVALID_TOKEN)

        return payload
