"""
Password hashing with passlib.
"""

from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """Thin wrapper so the domain only sees ``hash`` and ``verify``."""

    def __init__(self, context: CryptContext = pwd_context):
        self.context = context

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return self.context.verify(password, password_hash)
        except ValueError:
            # Stored hash is not in a format the context recognises
            return False
