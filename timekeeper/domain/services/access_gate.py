"""Access control gate.
Turns verified token claims into a freshly loaded account.
"""

import logging
from typing import Any, Dict

from timekeeper.domain.models.account import Account
from timekeeper.domain.models.base import AuthenticationError, ForbiddenError
from timekeeper.domain.repositories.account_repository import AccountRepository


logger = logging.getLogger(__name__)


class AccessGate:
    """
    Resolves the caller on every request.

    Only the subject of the claims is trusted; role and admin flag are
    always read from the directory, so revoked rights take effect
    before the token expires.
    """

    def __init__(self, account_repository: AccountRepository):
        self.account_repository = account_repository

    def resolve(self, claims: Dict[str, Any], require_admin: bool = False) -> Account:
        subject = claims.get("sub")
        try:
            account_id = int(subject)
        except (TypeError, ValueError):
            raise AuthenticationError("Invalid token", AuthenticationError.INVALID_TOKEN)

        account = self.account_repository.get_by_id(account_id)
        if account is None:
            raise AuthenticationError("User no longer exists", AuthenticationError.ACCOUNT_NOT_FOUND)

        if require_admin and not account.is_admin:
            logger.info(f"Account {account.id} refused admin-only operation")
            raise ForbiddenError("Admin access required")

        return account
