from app.core.dto.review import ReviewModel
from app.core.repositories.base import JsonRepository
from app.infrastructure.database.adapters.base import StorageConnection
from app.utils.enums import CollectionEnum


class ReviewRepository(JsonRepository[ReviewModel]):
    collection = CollectionEnum.REVIEWS.value
    newest_first = True
    timestamped = True
    not_found_detail = "Отзыв не найден"

    def __init__(self, connection: StorageConnection):
        super().__init__(connection, ReviewModel)
