from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from app.api.v1.dependencies import get_subscriber_service, verify_webhook_secret
from app.core.dto.base import SuccessModel
from app.core.services.subscriber_service import SubscriberService
from app.infrastructure.errors.telegram_errors import InvalidWebhookSecret
from app.utils.error_extra import error_response


router = APIRouter()


@router.post(
    "/telegram",
    dependencies=[Depends(verify_webhook_secret)],
    responses={**error_response(InvalidWebhookSecret)},
    summary="Webhook Telegram-бота",
    description="Команда /start подписывает чат на уведомления о заявках. Остальные обновления игнорируются"
)
async def telegram_webhook(
    update: Annotated[dict[str, Any], Body()],
    service: Annotated[SubscriberService, Depends(get_subscriber_service)]
) -> SuccessModel:
    await service.handle_update(update)
    return SuccessModel()
