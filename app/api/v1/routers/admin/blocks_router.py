from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_block_service
from app.core.dto.base import SuccessModel
from app.core.dto.block import BlockCreateModel, BlockModel, BlockUpdateModel
from app.core.services.block_service import BlockService
from app.infrastructure.errors.base import NotFoundError
from app.utils.error_extra import error_response


router = APIRouter()


@router.get(
    "",
    summary="Получить все блоки",
    description="Включая выключенные"
)
async def get_all_blocks(
    block_service: Annotated[BlockService, Depends(get_block_service)]
) -> list[BlockModel]:
    return await block_service.get_all_blocks()


@router.get(
    "/{block_id}",
    responses={**error_response(NotFoundError)},
    summary="Получить блок"
)
async def get_block(
    block_id: str,
    block_service: Annotated[BlockService, Depends(get_block_service)]
) -> BlockModel:
    return await block_service.get_block(block_id)


@router.post(
    "",
    summary="Создать блок",
    description="Галерея (images) и статистика (stats) учитываются только у about и пользовательских блоков"
)
async def create_block(
    data: BlockCreateModel,
    block_service: Annotated[BlockService, Depends(get_block_service)]
) -> BlockModel:
    return await block_service.create_block(data)


@router.put(
    "/{block_id}",
    responses={**error_response(NotFoundError)},
    summary="Обновить блок"
)
async def update_block(
    block_id: str,
    data: BlockUpdateModel,
    block_service: Annotated[BlockService, Depends(get_block_service)]
) -> BlockModel:
    return await block_service.update_block(block_id, data)


@router.delete(
    "/{block_id}",
    responses={**error_response(NotFoundError)},
    summary="Удалить блок"
)
async def delete_block(
    block_id: str,
    block_service: Annotated[BlockService, Depends(get_block_service)]
) -> SuccessModel:
    await block_service.delete_block(block_id)
    return SuccessModel()
