from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_settings_service
from app.core.dto.settings import PublicSettingsModel
from app.core.services.settings_service import SettingsService


router = APIRouter()


@router.get(
    "",
    summary="Получить настройки сайта",
    description="Имя мастера, контакты, соцсети и тексты главной страницы. Пароль и токен бота не возвращаются"
)
async def get_settings(
    settings_service: Annotated[SettingsService, Depends(get_settings_service)]
) -> PublicSettingsModel:
    return await settings_service.get_settings()
