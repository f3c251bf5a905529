from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from app.core.dto.base import CamelModel


class SubscriberModel(CamelModel):
    id: str
    chat_id: str
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime


class SubscriberCreateModel(CamelModel):
    chat_id: str = Field(..., min_length=1)
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("chat_id", mode="before")
    @classmethod
    def chat_id_to_str(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("username", "first_name", "last_name")
    @classmethod
    def empty_to_none(cls, value: str | None) -> str | None:
        return value or None
