from fastapi import BackgroundTasks

from app.core.dto.booking import BookingRequestCreateModel, BookingRequestModel
from app.core.repositories.booking_repository import BookingRequestRepository
from app.core.services.notification_service import NotificationService
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class BookingService:

    def __init__(
        self,
        repository: BookingRequestRepository,
        notification_service: NotificationService,
    ):
        self.repository = repository
        self.notification_service = notification_service

    async def create_request(
        self,
        data: BookingRequestCreateModel,
        background_tasks: BackgroundTasks | None = None,
    ) -> BookingRequestModel:
        created = await self.repository.add_item(data.model_dump())
        logger.info("request_created", request_id=created.id, service=created.service)

        # уведомление уходит после сохранения и не влияет на ответ
        if background_tasks is not None:
            background_tasks.add_task(self.notification_service.notify_new_request, created)
        else:
            await self.notification_service.notify_new_request(created)

        return created

    async def get_requests(self) -> list[BookingRequestModel]:
        return await self.repository.get_all_items()
