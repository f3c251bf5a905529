from app.core.dto.image import ImageModel
from app.core.repositories.base import JsonRepository
from app.infrastructure.database.adapters.base import StorageConnection
from app.utils.enums import CollectionEnum


class ImageRepository(JsonRepository[ImageModel]):
    collection = CollectionEnum.IMAGES.value
    newest_first = True
    timestamped = True
    not_found_detail = "Изображение не найдено"

    def __init__(self, connection: StorageConnection):
        super().__init__(connection, ImageModel)

    async def get_by_path(self, path: str) -> ImageModel | None:
        return await self.get_by_filter(path=path, one_or_none=True)
