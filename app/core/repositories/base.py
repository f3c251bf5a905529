from datetime import datetime, timezone
from typing import Any, Generic, TypeVar
from uuid import uuid4

from pydantic import TypeAdapter

from app.infrastructure.database.adapters.base import StorageConnection
from app.infrastructure.errors.base import NotFoundError
from app.utils.seed_data import COLLECTION_DEFAULTS


ModelType = TypeVar("ModelType")


class JsonRepository(Generic[ModelType]):
    """
    CRUD над одной коллекцией хранилища.

    Каждая мутация - полный цикл чтение-изменение-запись коллекции.
    Записи хранятся в camelCase (по алиасам моделей).
    """

    collection: str
    newest_first: bool = False
    timestamped: bool = False
    not_found_detail: str = "Запись не найдена"

    def __init__(self, connection: StorageConnection, model: Any):
        self.connection = connection
        self.model = model
        self.adapter = TypeAdapter(model)

    async def _load_records(self) -> list[dict]:
        records = await self.connection.read(self.collection)
        if records is None:
            records = COLLECTION_DEFAULTS.get(self.collection, list)()
            await self.connection.write(self.collection, records)
        return records

    async def _save_records(self, records: list[dict]) -> None:
        await self.connection.write(self.collection, records)

    def _to_model(self, record: dict) -> ModelType:
        return self.adapter.validate_python(record)

    def _to_record(self, item: ModelType) -> dict:
        return self.adapter.dump_python(item, mode="json", by_alias=True)

    def _sort(self, items: list[ModelType]) -> list[ModelType]:
        if self.newest_first:
            # sort стабилен: при равных createdAt первым остаётся добавленный позже
            return sorted(items, key=lambda item: item.created_at, reverse=True)
        return items

    async def get_all_items(self) -> list[ModelType]:
        records = await self._load_records()
        return self._sort([self._to_model(record) for record in records])

    async def get_item(self, item_id: str) -> ModelType | None:
        for record in await self._load_records():
            if record.get("id") == item_id:
                return self._to_model(record)
        return None

    async def get_by_filter(self, one_or_none: bool = False, **filters: Any) -> list[ModelType] | ModelType | None:
        items = [
            item for item in await self.get_all_items()
            if all(getattr(item, key, None) == value for key, value in filters.items())
        ]
        if one_or_none:
            return items[0] if items else None
        return items

    async def add_item(self, data: dict) -> ModelType:
        records = await self._load_records()

        payload = {**data, "id": str(uuid4())}
        if self.timestamped:
            payload["created_at"] = datetime.now(timezone.utc)
        item = self._to_model(payload)

        if self.newest_first:
            records.insert(0, self._to_record(item))
        else:
            records.append(self._to_record(item))
        await self._save_records(records)
        return item

    async def update_item(self, item_id: str, data: dict) -> ModelType:
        records = await self._load_records()
        index = self._find_index(records, item_id)

        current = self._to_model(records[index])
        merged = {**self.adapter.dump_python(current), **data}
        # id и дата создания не меняются
        merged["id"] = item_id
        if self.timestamped:
            merged["created_at"] = current.created_at
        item = self._to_model(merged)

        records[index] = self._to_record(item)
        await self._save_records(records)
        return item

    async def delete_item(self, item_id: str) -> ModelType:
        records = await self._load_records()
        index = self._find_index(records, item_id)
        deleted = self._to_model(records.pop(index))
        await self._save_records(records)
        return deleted

    def _find_index(self, records: list[dict], item_id: str) -> int:
        for index, record in enumerate(records):
            if record.get("id") == item_id:
                return index
        raise NotFoundError(self.not_found_detail)
