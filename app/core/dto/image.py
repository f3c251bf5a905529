from datetime import datetime

from app.core.dto.base import CamelModel


class ImageModel(CamelModel):
    id: str
    filename: str
    original_name: str
    path: str
    size: int
    width: int | None = None
    height: int | None = None
    created_at: datetime


class DeleteUploadModel(CamelModel):
    path: str | None = None
    block_id: str | None = None
    image_url: str | None = None


class DeleteUploadResultModel(CamelModel):
    success: bool = True
    file_deleted: bool
