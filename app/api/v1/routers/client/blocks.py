from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_block_service
from app.core.dto.block import BlockModel
from app.core.services.block_service import BlockService


router = APIRouter()


@router.get(
    "",
    summary="Получить блоки страницы",
    description="Только включённые блоки, в порядке поля order"
)
async def get_blocks(
    block_service: Annotated[BlockService, Depends(get_block_service)]
) -> list[BlockModel]:
    return await block_service.get_enabled_blocks()
