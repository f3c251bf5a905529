from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_subscriber_service
from app.core.dto.base import SuccessModel
from app.core.dto.subscriber import SubscriberCreateModel, SubscriberModel
from app.core.services.subscriber_service import SubscriberService
from app.infrastructure.errors.base import ConflictError, NotFoundError
from app.utils.error_extra import error_response


router = APIRouter()


@router.get("", summary="Получить подписчиков бота")
async def get_subscribers(
    service: Annotated[SubscriberService, Depends(get_subscriber_service)]
) -> list[SubscriberModel]:
    return await service.get_subscribers()


@router.post(
    "",
    responses={**error_response(ConflictError)},
    summary="Добавить подписчика вручную",
    description="Подписчик с таким chatId уже есть - 409"
)
async def create_subscriber(
    data: SubscriberCreateModel,
    service: Annotated[SubscriberService, Depends(get_subscriber_service)]
) -> SubscriberModel:
    return await service.create_subscriber(data)


@router.delete(
    "/{subscriber_id}",
    responses={**error_response(NotFoundError)},
    summary="Удалить подписчика"
)
async def delete_subscriber(
    subscriber_id: str,
    service: Annotated[SubscriberService, Depends(get_subscriber_service)]
) -> SuccessModel:
    await service.delete_subscriber(subscriber_id)
    return SuccessModel()
