from app.core.dto.block import BlockModel, encode_json_list
from app.core.repositories.base import JsonRepository
from app.infrastructure.database.adapters.base import StorageConnection
from app.utils.enums import CollectionEnum


class BlockRepository(JsonRepository[BlockModel]):
    collection = CollectionEnum.BLOCKS.value
    not_found_detail = "Блок не найден"

    def __init__(self, connection: StorageConnection):
        super().__init__(connection, BlockModel)

    def _to_record(self, item: BlockModel) -> dict:
        record = super()._to_record(item)
        # плоская запись: галерея и статистика - JSON-строки, пустые - null
        record["images"] = encode_json_list(record.get("images"))
        record["stats"] = encode_json_list(record.get("stats"))
        return record

    def _sort(self, items: list[BlockModel]) -> list[BlockModel]:
        return sorted(items, key=lambda block: block.order)

    async def get_enabled_items(self) -> list[BlockModel]:
        return [block for block in await self.get_all_items() if block.enabled]
