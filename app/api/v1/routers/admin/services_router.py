from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_catalog_service
from app.core.dto.base import SuccessModel
from app.core.dto.service import ServiceCreateModel, ServiceModel, ServiceUpdateModel
from app.core.services.catalog_service import CatalogService
from app.infrastructure.errors.base import NotFoundError
from app.utils.error_extra import error_response


router = APIRouter()


@router.get("", summary="Получить услуги")
async def get_services(
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)]
) -> list[ServiceModel]:
    return await catalog_service.get_services()


@router.get(
    "/{service_id}",
    responses={**error_response(NotFoundError)},
    summary="Получить услугу"
)
async def get_service(
    service_id: str,
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)]
) -> ServiceModel:
    return await catalog_service.get_service(service_id)


@router.post("", summary="Создать услугу")
async def create_service(
    data: ServiceCreateModel,
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)]
) -> ServiceModel:
    return await catalog_service.create_service(data)


@router.put(
    "/{service_id}",
    responses={**error_response(NotFoundError)},
    summary="Обновить услугу"
)
async def update_service(
    service_id: str,
    data: ServiceUpdateModel,
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)]
) -> ServiceModel:
    return await catalog_service.update_service(service_id, data)


@router.delete(
    "/{service_id}",
    responses={**error_response(NotFoundError)},
    summary="Удалить услугу"
)
async def delete_service(
    service_id: str,
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)]
) -> SuccessModel:
    await catalog_service.delete_service(service_id)
    return SuccessModel()
