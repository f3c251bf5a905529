from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from app.api.v1.dependencies import get_image_service
from app.core.services.image_service import ImageService
from app.infrastructure.errors.base import NotFoundError
from app.utils.error_extra import error_response


router = APIRouter()


@router.get(
    "/{filename}",
    responses={**error_response(NotFoundError)},
    summary="Отдать загруженный файл",
    include_in_schema=False
)
async def get_upload(
    filename: str,
    service: Annotated[ImageService, Depends(get_image_service)]
) -> FileResponse:
    return FileResponse(service.get_upload_file(filename))
