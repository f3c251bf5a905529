from typing import Annotated

from fastapi import APIRouter, Body, Depends, File, UploadFile

from app.api.v1.dependencies import get_image_service
from app.core.dto.base import SuccessModel
from app.core.dto.image import DeleteUploadModel, DeleteUploadResultModel, ImageModel
from app.core.services.image_service import ImageService
from app.infrastructure.errors.base import NotFoundError
from app.infrastructure.errors.image_errors import ImageError
from app.utils.error_extra import error_response


router = APIRouter()


@router.post(
    "/upload",
    responses={**error_response(ImageError)},
    summary="Загрузить изображение",
    description="JPEG, PNG или WebP до 5 МБ. Возвращает запись с путём вида /uploads/<файл>"
)
async def upload_image(
    image: Annotated[UploadFile, File()],
    service: Annotated[ImageService, Depends(get_image_service)]
) -> ImageModel:
    return await service.upload_image(image)


@router.get("/images", summary="Получить загруженные изображения")
async def get_images(
    service: Annotated[ImageService, Depends(get_image_service)]
) -> list[ImageModel]:
    return await service.get_images()


@router.delete(
    "/images/{image_id}",
    responses={**error_response(NotFoundError)},
    summary="Удалить изображение",
    description="Удаляет запись и файл. Ошибка удаления файла только логируется"
)
async def delete_image(
    image_id: str,
    service: Annotated[ImageService, Depends(get_image_service)]
) -> SuccessModel:
    await service.delete_image(image_id)
    return SuccessModel()


@router.delete(
    "/delete-upload",
    responses={**error_response(ImageError)},
    summary="Удалить загруженный файл по пути",
    description="Путь передаётся в query или в теле. С blockId и imageUrl ссылка убирается и из галереи блока"
)
async def delete_upload(
    service: Annotated[ImageService, Depends(get_image_service)],
    path: str | None = None,
    body: Annotated[DeleteUploadModel | None, Body()] = None,
) -> DeleteUploadResultModel:
    data = body or DeleteUploadModel()
    if path:
        data = data.model_copy(update={"path": path})
    return await service.delete_upload(data)
