from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Поля в Python - snake_case, в JSON и в файлах хранилища - camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessModel(BaseModel):
    success: bool = True


def forbid_null(value: Any) -> Any:
    """Поле можно не передавать, но нельзя обнулить."""
    if value is None:
        raise ValueError("Значение не может быть null")
    return value
