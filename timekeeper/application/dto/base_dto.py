"""
Pydantic shapes exchanged between the routers and the use cases.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """
    Fields arrive as raw strings; the domain decides whether a value is
    missing or malformed.
    """

    def cleaned(self, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


class ResponseDTO(BaseDTO):
    """Stored records carry their id and timestamps."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageResponseDTO(BaseDTO):
    """Plain acknowledgement."""

    message: str
