from datetime import datetime

from pydantic import Field, field_validator

from app.core.dto.base import CamelModel, forbid_null


class ReviewModel(CamelModel):
    id: str
    name: str
    text: str
    photo: str | None = None
    created_at: datetime


class ReviewCreateModel(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    text: str = Field(..., min_length=1, max_length=2000)
    photo: str | None = None


class ReviewUpdateModel(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    text: str | None = Field(None, min_length=1, max_length=2000)
    photo: str | None = None

    reject_null = field_validator("name", "text")(forbid_null)
