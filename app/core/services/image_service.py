import asyncio
import io
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from app.core.dto.image import DeleteUploadModel, DeleteUploadResultModel, ImageModel
from app.core.repositories.image_repository import ImageRepository
from app.core.services.block_service import BlockService
from app.infrastructure.config.config import APP_CONFIG
from app.infrastructure.errors.base import NotFoundError
from app.infrastructure.errors.image_errors import (
    EmptyImageFile,
    ImageError,
    ImageProcessingError,
    ImageTooLarge,
    InvalidImageFormat,
    InvalidImageType,
    InvalidUploadPath,
)
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)

ALLOWED_EXTENSIONS = (".jpeg", ".jpg", ".png", ".webp")
ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp")
ALLOWED_PIL_FORMATS = ("JPEG", "PNG", "WEBP")


class ImageService:
    """Загрузка изображений в каталог uploads и учёт их метаданных."""

    def __init__(self, repository: ImageRepository, block_service: BlockService, uploads_dir: Path):
        self.repository = repository
        self.block_service = block_service
        self.uploads_dir = Path(uploads_dir)

    @property
    def max_bytes(self) -> int:
        return APP_CONFIG.MAX_IMAGE_SIZE_MB * 1024 * 1024

    def served_path(self, filename: str) -> str:
        return f"{APP_CONFIG.UPLOADS_URL.rstrip('/')}/{filename}"

    def resolve_upload_path(self, served_path: str) -> Path:
        """Путь вида /uploads/<файл> -> файл на диске строго внутри каталога загрузок."""
        prefix = APP_CONFIG.UPLOADS_URL.rstrip("/") + "/"
        if not served_path.startswith(prefix):
            raise InvalidUploadPath()
        return self.resolve_filename(served_path[len(prefix):])

    def resolve_filename(self, relative: str) -> Path:
        root = self.uploads_dir.resolve()
        target = (root / relative).resolve()
        if target == root or root not in target.parents:
            raise InvalidUploadPath()
        return target

    def _validate_declared_type(self, file: UploadFile) -> str:
        extension = Path(file.filename or "").suffix.lower()
        if extension not in ALLOWED_EXTENSIONS:
            raise InvalidImageFormat(", ".join(ext.lstrip(".") for ext in ALLOWED_EXTENSIONS))
        if (file.content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
            raise InvalidImageType()
        return extension

    def _read_dimensions(self, content: bytes) -> tuple[int, int]:
        try:
            with Image.open(io.BytesIO(content)) as image:
                image_format = image.format
                width, height = image.size
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as exc:
            raise ImageProcessingError(str(exc)) from exc

        if image_format not in ALLOWED_PIL_FORMATS:
            raise InvalidImageFormat(", ".join(ext.lstrip(".") for ext in ALLOWED_EXTENSIONS))
        return width, height

    def _store(self, filename: str, content: bytes) -> Path:
        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        target = self.uploads_dir / filename
        target.write_bytes(content)
        return target

    async def _remove_file(self, target: Path) -> bool:
        try:
            await asyncio.to_thread(target.unlink)
        except OSError as exc:
            logger.warning("upload_file_delete_failed", path=str(target), error=str(exc))
            return False
        logger.info("upload_file_deleted", path=str(target))
        return True

    async def upload_image(self, file: UploadFile) -> ImageModel:
        extension = self._validate_declared_type(file)

        content = await file.read(self.max_bytes + 1)
        if not content:
            raise EmptyImageFile()
        if len(content) > self.max_bytes:
            raise ImageTooLarge(APP_CONFIG.MAX_IMAGE_SIZE_MB)

        width, height = self._read_dimensions(content)

        filename = f"{uuid4().hex}{extension}"
        target = await asyncio.to_thread(self._store, filename, content)
        try:
            image = await self.repository.add_item(
                {
                    "filename": filename,
                    "original_name": file.filename or filename,
                    "path": self.served_path(filename),
                    "size": len(content),
                    "width": width,
                    "height": height,
                }
            )
        except Exception:
            await self._remove_file(target)
            raise

        logger.info("image_uploaded", image_id=image.id, path=image.path, size=image.size)
        return image

    async def get_images(self) -> list[ImageModel]:
        return await self.repository.get_all_items()

    async def delete_image(self, image_id: str) -> None:
        image = await self.repository.get_item(image_id)
        if not image:
            raise NotFoundError("Изображение не найдено")

        try:
            await self._remove_file(self.resolve_upload_path(image.path))
        except InvalidUploadPath:
            logger.warning("image_path_outside_uploads", image_id=image_id, path=image.path)

        await self.repository.delete_item(image_id)
        logger.info("image_deleted", image_id=image_id)

    async def delete_upload(self, data: DeleteUploadModel) -> DeleteUploadResultModel:
        if not data.path:
            raise ImageError("Path is required")

        target = self.resolve_upload_path(data.path)
        file_deleted = await self._remove_file(target)

        image = await self.repository.get_by_path(data.path)
        if image:
            await self.repository.delete_item(image.id)

        if data.block_id and data.image_url:
            await self.block_service.remove_gallery_image(data.block_id, data.image_url, data.path)

        return DeleteUploadResultModel(file_deleted=file_deleted)

    def get_upload_file(self, filename: str) -> Path:
        try:
            target = self.resolve_filename(filename)
        except InvalidUploadPath:
            raise NotFoundError("File not found")
        if not target.is_file():
            raise NotFoundError("File not found")
        return target
