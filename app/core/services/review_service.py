from app.core.dto.review import ReviewCreateModel, ReviewModel, ReviewUpdateModel
from app.core.repositories.review_repository import ReviewRepository
from app.infrastructure.errors.base import NotFoundError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class ReviewService:

    def __init__(self, repository: ReviewRepository):
        self.repository = repository

    async def get_all_reviews(self) -> list[ReviewModel]:
        return await self.repository.get_all_items()

    async def get_review(self, review_id: str) -> ReviewModel:
        review = await self.repository.get_item(review_id)
        if not review:
            raise NotFoundError("Отзыв не найден")
        return review

    async def create_review(self, data: ReviewCreateModel) -> ReviewModel:
        review = await self.repository.add_item(data.model_dump())
        logger.info("review_created", review_id=review.id)
        return review

    async def update_review(self, review_id: str, data: ReviewUpdateModel) -> ReviewModel:
        review = await self.repository.update_item(review_id, data.model_dump(exclude_unset=True))
        logger.info("review_updated", review_id=review_id)
        return review

    async def delete_review(self, review_id: str) -> None:
        await self.repository.delete_item(review_id)
        logger.info("review_deleted", review_id=review_id)
