from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_catalog_service
from app.core.dto.service import ServiceModel
from app.core.services.catalog_service import CatalogService


router = APIRouter()


@router.get(
    "",
    summary="Получить услуги",
    description="Список услуг с ценой"
)
async def get_services(
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)]
) -> list[ServiceModel]:
    return await catalog_service.get_services()
