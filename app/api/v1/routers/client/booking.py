from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends

from app.api.v1.dependencies import get_booking_service
from app.core.dto.booking import BookingRequestCreateModel, BookingRequestModel
from app.core.services.booking_service import BookingService


router = APIRouter()


@router.post(
    "",
    summary="Записаться на услугу",
    description="Сохраняет заявку и в фоне рассылает уведомление подписчикам бота"
)
async def create_request(
    data: BookingRequestCreateModel,
    background_tasks: BackgroundTasks,
    service: Annotated[BookingService, Depends(get_booking_service)]
) -> BookingRequestModel:
    return await service.create_request(data, background_tasks=background_tasks)
