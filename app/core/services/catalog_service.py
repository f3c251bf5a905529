from app.core.dto.service import ServiceCreateModel, ServiceModel, ServiceUpdateModel
from app.core.repositories.service_repository import ServiceRepository
from app.infrastructure.errors.base import NotFoundError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class CatalogService:
    """Услуги мастера: прайс на главной и выбор в форме записи."""

    def __init__(self, repository: ServiceRepository):
        self.repository = repository

    async def get_services(self) -> list[ServiceModel]:
        return await self.repository.get_all_items()

    async def get_service(self, service_id: str) -> ServiceModel:
        service = await self.repository.get_item(service_id)
        if not service:
            raise NotFoundError("Услуга не найдена")
        return service

    async def create_service(self, data: ServiceCreateModel) -> ServiceModel:
        service = await self.repository.add_item(data.model_dump())
        logger.info("service_created", service_id=service.id)
        return service

    async def update_service(self, service_id: str, data: ServiceUpdateModel) -> ServiceModel:
        service = await self.repository.update_item(service_id, data.model_dump(exclude_unset=True))
        logger.info("service_updated", service_id=service_id)
        return service

    async def delete_service(self, service_id: str) -> None:
        await self.repository.delete_item(service_id)
        logger.info("service_deleted", service_id=service_id)
