from app.core.dto.block import BlockCreateModel, BlockModel, BlockUpdateModel
from app.core.repositories.block_repository import BlockRepository
from app.infrastructure.errors.base import NotFoundError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class BlockService:
    def __init__(self, repository: BlockRepository):
        self.repository = repository

    async def get_enabled_blocks(self) -> list[BlockModel]:
        return await self.repository.get_enabled_items()

    async def get_all_blocks(self) -> list[BlockModel]:
        return await self.repository.get_all_items()

    async def get_block(self, block_id: str) -> BlockModel:
        block = await self.repository.get_item(block_id)
        if not block:
            raise NotFoundError("Блок не найден")
        return block

    async def create_block(self, data: BlockCreateModel) -> BlockModel:
        block = await self.repository.add_item(data.model_dump())
        logger.info("block_created", block_id=block.id, block_type=block.block_type)
        return block

    async def update_block(self, block_id: str, data: BlockUpdateModel) -> BlockModel:
        block = await self.repository.update_item(block_id, data.model_dump(exclude_unset=True))
        logger.info("block_updated", block_id=block_id)
        return block

    async def delete_block(self, block_id: str) -> None:
        await self.repository.delete_item(block_id)
        logger.info("block_deleted", block_id=block_id)

    async def remove_gallery_image(self, block_id: str, *paths: str) -> BlockModel | None:
        block = await self.repository.get_item(block_id)
        images = getattr(block, "images", None) if block else None
        if not images:
            return block

        kept = [image.model_dump() for image in images if image.path not in paths]
        if len(kept) == len(images):
            return block

        logger.info("block_image_reference_removed", block_id=block_id, removed=len(images) - len(kept))
        return await self.repository.update_item(block_id, {"images": kept})
