from app.core.dto.settings import AdminSettingsModel, PublicSettingsModel, SettingsUpdateModel
from app.core.repositories.settings_repository import SettingsRepository
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class SettingsService:
    def __init__(self, repository: SettingsRepository):
        self.repository = repository

    async def get_settings(self) -> PublicSettingsModel:
        settings = await self.repository.get()
        return PublicSettingsModel.model_validate(settings.model_dump())

    async def get_admin_settings(self) -> AdminSettingsModel:
        settings = await self.repository.get()
        return AdminSettingsModel.model_validate(settings.model_dump())

    async def update_settings(self, data: SettingsUpdateModel) -> AdminSettingsModel:
        changes = data.model_dump(exclude_unset=True)
        updated = await self.repository.update(changes)
        logger.info(
            "settings_updated",
            fields=sorted(changes),
            password_changed=bool(changes.get("admin_password")),
        )
        return AdminSettingsModel.model_validate(updated.model_dump())
