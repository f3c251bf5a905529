from app.core.dto.booking import BookingRequestModel
from app.core.repositories.base import JsonRepository
from app.infrastructure.database.adapters.base import StorageConnection
from app.utils.enums import CollectionEnum


class BookingRequestRepository(JsonRepository[BookingRequestModel]):
    collection = CollectionEnum.REQUESTS.value
    newest_first = True
    timestamped = True
    not_found_detail = "Заявка не найдена"

    def __init__(self, connection: StorageConnection):
        super().__init__(connection, BookingRequestModel)
