from app.core.dto.service import ServiceModel
from app.core.repositories.base import JsonRepository
from app.infrastructure.database.adapters.base import StorageConnection
from app.utils.enums import CollectionEnum


class ServiceRepository(JsonRepository[ServiceModel]):
    collection = CollectionEnum.SERVICES.value
    not_found_detail = "Услуга не найдена"

    def __init__(self, connection: StorageConnection):
        super().__init__(connection, ServiceModel)
