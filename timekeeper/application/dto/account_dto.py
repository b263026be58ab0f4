"""
Account DTOs for the application layer.
"""

from typing import Optional
from pydantic import Field

from timekeeper.domain.models.account import Account
from .base_dto import BaseDTO, RequestDTO, ResponseDTO


class RegisterRequestDTO(RequestDTO):
    """DTO for self-registration and admin bootstrap."""

    username: Optional[str] = Field(default=None, description="Unique username, at least 3 characters")
    password: Optional[str] = Field(default=None, description="At least 6 characters")
    position: Optional[str] = Field(default=None, description="worker or rider")
    employee_id: Optional[str] = Field(
        default=None, alias="employeeId", description="Letters, digits and hyphens"
    )


class CreateAccountRequestDTO(RegisterRequestDTO):
    """DTO for accounts created by an admin."""

    is_admin: bool = Field(default=False, alias="isAdmin", description="Grant admin rights")


class LoginRequestDTO(RequestDTO):
    """DTO for credential login."""

    username: Optional[str] = None
    password: Optional[str] = None


class AccountResponseDTO(ResponseDTO):
    """Public view of an account. Never carries the password hash."""

    username: str = Field(description="Username")
    position: str = Field(description="worker or rider")
    employee_id: str = Field(description="Employee ID")
    is_admin: bool = Field(description="Admin rights")

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponseDTO":
        return cls(
            id=account.id,
            username=account.username,
            position=account.position.value,
            employee_id=account.employee_id,
            is_admin=account.is_admin,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AuthResponseDTO(BaseDTO):
    """Token plus the identity it was issued for."""

    message: Optional[str] = None
    token: str
    token_type: str = "bearer"
    username: str
    position: str
    is_admin: bool
    employee_id: str
    user: AccountResponseDTO

    @classmethod
    def issue(cls, account: Account, token: str, message: Optional[str] = None) -> "AuthResponseDTO":
        return cls(
            message=message,
            token=token,
            username=account.username,
            position=account.position.value,
            is_admin=account.is_admin,
            employee_id=account.employee_id,
            user=AccountResponseDTO.from_domain(account),
        )
