from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_settings_service
from app.core.dto.settings import AdminSettingsModel, SettingsUpdateModel
from app.core.services.settings_service import SettingsService


router = APIRouter()


@router.get(
    "",
    summary="Получить настройки",
    description="Все настройки, включая токен бота. Пароль администратора не возвращается"
)
async def get_admin_settings(
    settings_service: Annotated[SettingsService, Depends(get_settings_service)]
) -> AdminSettingsModel:
    return await settings_service.get_admin_settings()


@router.put(
    "",
    summary="Обновить настройки",
    description="Частичное обновление: меняются только переданные поля. Новый пароль сохраняется в виде хеша"
)
async def update_settings(
    data: SettingsUpdateModel,
    settings_service: Annotated[SettingsService, Depends(get_settings_service)]
) -> AdminSettingsModel:
    return await settings_service.update_settings(data)
