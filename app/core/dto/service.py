from pydantic import Field, field_validator

from app.core.dto.base import CamelModel, forbid_null


class ServiceModel(CamelModel):
    id: str
    name: str
    description: str
    price: str
    icon: str | None = "💅"
    image: str | None = None


class ServiceCreateModel(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., max_length=2000)
    price: str = Field(..., min_length=1, max_length=100)
    icon: str | None = "💅"
    image: str | None = None


class ServiceUpdateModel(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    price: str | None = Field(None, min_length=1, max_length=100)
    icon: str | None = None
    image: str | None = None

    reject_null = field_validator("name", "description", "price")(forbid_null)
