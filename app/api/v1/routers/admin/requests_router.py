from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_booking_service
from app.core.dto.booking import BookingRequestModel
from app.core.services.booking_service import BookingService


router = APIRouter()


@router.get(
    "",
    summary="Получить заявки",
    description="Все заявки на запись, новые первыми"
)
async def get_requests(
    service: Annotated[BookingService, Depends(get_booking_service)]
) -> list[BookingRequestModel]:
    return await service.get_requests()
