from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_notification_service
from app.core.dto.base import SuccessModel
from app.core.dto.telegram import TelegramTestResultModel, WebhookSetupModel
from app.core.services.notification_service import NotificationService
from app.infrastructure.errors.telegram_errors import BotTokenNotConfigured, TelegramRequestFailed
from app.utils.error_extra import error_response


router = APIRouter()


@router.post(
    "/test",
    responses={**error_response(BotTokenNotConfigured)},
    summary="Отправить тестовое сообщение",
    description="Рассылка всем подписчикам. В ответе - сколько сообщений доставлено из скольких"
)
async def send_test_message(
    service: Annotated[NotificationService, Depends(get_notification_service)]
) -> TelegramTestResultModel:
    report = await service.send_test_message()
    return TelegramTestResultModel(
        message=f"Отправлено {report.delivered} из {report.total} подписчиков",
        delivered=report.delivered,
        total=report.total,
    )


@router.post(
    "/webhook",
    responses={**error_response(BotTokenNotConfigured), **error_response(TelegramRequestFailed)},
    summary="Зарегистрировать webhook бота",
    description="Вызывает setWebhook Telegram Bot API с переданным URL"
)
async def register_webhook(
    data: WebhookSetupModel,
    service: Annotated[NotificationService, Depends(get_notification_service)]
) -> SuccessModel:
    await service.register_webhook(data.url)
    return SuccessModel()
