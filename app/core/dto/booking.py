from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from app.core.dto.base import CamelModel


class BookingRequestCreateModel(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=2, max_length=100)
    phone: str = Field(..., min_length=10, max_length=20)
    service: str = Field(..., min_length=1, max_length=200)
    comment: str | None = Field(None, max_length=1000)

    @field_validator("comment")
    @classmethod
    def empty_comment_to_none(cls, value: str | None) -> str | None:
        return value or None


class BookingRequestModel(CamelModel):
    id: str
    name: str
    phone: str
    service: str
    comment: str | None = None
    created_at: datetime
