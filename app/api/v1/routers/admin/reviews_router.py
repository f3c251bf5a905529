from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_review_service
from app.core.dto.base import SuccessModel
from app.core.dto.review import ReviewCreateModel, ReviewModel, ReviewUpdateModel
from app.core.services.review_service import ReviewService
from app.infrastructure.errors.base import NotFoundError
from app.utils.error_extra import error_response


router = APIRouter()


@router.get("", summary="Получить все отзывы")
async def get_all_reviews(
    service: Annotated[ReviewService, Depends(get_review_service)]
) -> list[ReviewModel]:
    return await service.get_all_reviews()


@router.get(
    "/{review_id}",
    responses={**error_response(NotFoundError)},
    summary="Получить отзыв"
)
async def get_review(
    review_id: str,
    service: Annotated[ReviewService, Depends(get_review_service)]
) -> ReviewModel:
    return await service.get_review(review_id)


@router.post(
    "",
    summary="Добавить отзыв",
    description="Дата создания проставляется сервером"
)
async def create_review(
    data: ReviewCreateModel,
    service: Annotated[ReviewService, Depends(get_review_service)]
) -> ReviewModel:
    return await service.create_review(data)


@router.put(
    "/{review_id}",
    responses={**error_response(NotFoundError)},
    summary="Обновить отзыв"
)
async def update_review(
    review_id: str,
    data: ReviewUpdateModel,
    service: Annotated[ReviewService, Depends(get_review_service)]
) -> ReviewModel:
    return await service.update_review(review_id, data)


@router.delete(
    "/{review_id}",
    responses={**error_response(NotFoundError)},
    summary="Удалить отзыв"
)
async def delete_review(
    review_id: str,
    service: Annotated[ReviewService, Depends(get_review_service)]
) -> SuccessModel:
    await service.delete_review(review_id)
    return SuccessModel()
