from app.core.dto.subscriber import SubscriberModel
from app.core.repositories.base import JsonRepository
from app.infrastructure.database.adapters.base import StorageConnection
from app.infrastructure.errors.base import ConflictError
from app.utils.enums import CollectionEnum


class SubscriberRepository(JsonRepository[SubscriberModel]):
    collection = CollectionEnum.SUBSCRIBERS.value
    timestamped = True
    not_found_detail = "Подписчик не найден"

    def __init__(self, connection: StorageConnection):
        super().__init__(connection, SubscriberModel)

    async def get_by_chat_id(self, chat_id: str) -> SubscriberModel | None:
        return await self.get_by_filter(chat_id=str(chat_id), one_or_none=True)

    async def add_item(self, data: dict) -> SubscriberModel:
        if await self.get_by_chat_id(data["chat_id"]):
            raise ConflictError("Subscriber already exists")
        return await super().add_item(data)
