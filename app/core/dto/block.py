import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Discriminator, Field, Tag, TypeAdapter, field_validator, model_validator

from app.core.dto.base import CamelModel, forbid_null
from app.utils.enums import BlockTypeEnum


class BlockImage(BaseModel):
    path: str = Field(..., min_length=1)
    width: int | None = Field(None, gt=0)
    height: int | None = Field(None, gt=0)

    @model_validator(mode="before")
    @classmethod
    def parse_plain_path(cls, value: Any) -> Any:
        # старый формат: список путей без размеров
        if isinstance(value, str):
            return {"path": value}
        return value


class BlockStat(BaseModel):
    label: str
    value: str


def decode_json_list(value: Any) -> Any:
    """Галерея и статистика хранятся JSON-строкой, пустой список - как null."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = json.loads(text)
        except json.JSONDecodeError:
            return None
    if isinstance(value, list) and not value:
        return None
    return value


def encode_json_list(items: list[dict] | None) -> str | None:
    if not items:
        return None
    return json.dumps(items, ensure_ascii=False)


class RichContentMixin(BaseModel):
    images: list[BlockImage] | None = None
    stats: list[BlockStat] | None = None

    @field_validator("images", "stats", mode="before")
    @classmethod
    def parse_encoded_list(cls, value: Any) -> Any:
        return decode_json_list(value)


class BaseBlockModel(CamelModel):
    id: str
    enabled: bool = True
    title: str
    content: str | None = None
    image: str | None = None
    order: int = 0


class AboutBlockModel(BaseBlockModel, RichContentMixin):
    block_type: Literal["about"]


class ServicesBlockModel(BaseBlockModel):
    block_type: Literal["services"]


class ReviewsBlockModel(BaseBlockModel):
    block_type: Literal["reviews"]


class ContactsBlockModel(BaseBlockModel):
    block_type: Literal["contacts"]


class CustomBlockModel(BaseBlockModel, RichContentMixin):
    block_type: str = Field(..., min_length=1)


def _block_tag(value: Any) -> str:
    if isinstance(value, dict):
        block_type = value.get("blockType", value.get("block_type"))
    else:
        block_type = getattr(value, "block_type", None)
    if block_type in BlockTypeEnum.fixed():
        return block_type
    return "custom"


BlockModel = Annotated[
    Union[
        Annotated[AboutBlockModel, Tag("about")],
        Annotated[ServicesBlockModel, Tag("services")],
        Annotated[ReviewsBlockModel, Tag("reviews")],
        Annotated[ContactsBlockModel, Tag("contacts")],
        Annotated[CustomBlockModel, Tag("custom")],
    ],
    Discriminator(_block_tag),
]

block_adapter = TypeAdapter(BlockModel)


class BlockCreateModel(CamelModel, RichContentMixin):
    block_type: str = Field(..., min_length=1)
    enabled: bool = True
    title: str = Field(..., min_length=1)
    content: str | None = None
    image: str | None = None
    order: int = 0


class BlockUpdateModel(CamelModel, RichContentMixin):
    block_type: str | None = Field(None, min_length=1)
    enabled: bool | None = None
    title: str | None = Field(None, min_length=1)
    content: str | None = None
    image: str | None = None
    order: int | None = None

    reject_null = field_validator("block_type", "enabled", "title", "order")(forbid_null)
