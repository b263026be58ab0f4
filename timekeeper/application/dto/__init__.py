"""
Data transfer objects for the HTTP API.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, MessageResponseDTO
from .account_dto import (
    RegisterRequestDTO,
    CreateAccountRequestDTO,
    LoginRequestDTO,
    AccountResponseDTO,
    AuthResponseDTO,
)
from .time_entry_dto import TimeEntryRequestDTO, TimeEntryResponseDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "MessageResponseDTO",
    "RegisterRequestDTO",
    "CreateAccountRequestDTO",
    "LoginRequestDTO",
    "AccountResponseDTO",
    "AuthResponseDTO",
    "TimeEntryRequestDTO",
    "TimeEntryResponseDTO",
]
