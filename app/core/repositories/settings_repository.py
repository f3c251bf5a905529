from app.core.dto.settings import SettingsModel
from app.infrastructure.database.adapters.base import StorageConnection
from app.infrastructure.security.passwords import hash_password
from app.utils.enums import CollectionEnum
from app.utils.seed_data import default_settings


class SettingsRepository:
    """Настройки сайта - единственная запись."""

    collection = CollectionEnum.SETTINGS.value

    def __init__(self, connection: StorageConnection):
        self.connection = connection

    async def get(self) -> SettingsModel:
        record = await self.connection.read(self.collection)
        if record is None:
            record = default_settings()
            await self.connection.write(self.collection, record)
        return SettingsModel.model_validate(record)

    async def update(self, data: dict) -> SettingsModel:
        current = await self.get()

        data = dict(data)
        password = data.pop("admin_password", None)
        if password:
            data["admin_password"] = hash_password(password)

        updated = SettingsModel.model_validate({**current.model_dump(), **data, "id": current.id})
        await self.connection.write(self.collection, updated.model_dump(mode="json", by_alias=True))
        return updated
