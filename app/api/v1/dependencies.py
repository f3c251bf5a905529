from pathlib import Path
from typing import Annotated

import httpx
from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

import app.core.repositories as repositories
import app.core.services as services
from app.infrastructure.config.config import APP_CONFIG
from app.infrastructure.database.adapters.base import StorageConnection
from app.infrastructure.errors.telegram_errors import InvalidWebhookSecret


token_scheme = HTTPBearer(auto_error=False)


async def get_db_connection(request: Request) -> StorageConnection:
    return request.app.state.db_connection


async def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


async def get_uploads_dir(request: Request) -> Path:
    return request.app.state.uploads_dir


async def get_auth_service(connection=Depends(get_db_connection)) -> services.AuthService:
    return services.AuthService(
        repository=repositories.SettingsRepository(connection=connection)
    )


async def get_current_admin_dependency(
    auth_service: Annotated[services.AuthService, Depends(get_auth_service)],
    auth_scheme: Annotated[HTTPAuthorizationCredentials | None, Depends(token_scheme)]
) -> None:
    token = auth_scheme.credentials if auth_scheme else None
    await auth_service.verify_token(token)


async def get_settings_service(connection=Depends(get_db_connection)) -> services.SettingsService:
    return services.SettingsService(
        repository=repositories.SettingsRepository(connection=connection)
    )


async def get_block_service(connection=Depends(get_db_connection)) -> services.BlockService:
    return services.BlockService(
        repository=repositories.BlockRepository(connection=connection)
    )


async def get_catalog_service(connection=Depends(get_db_connection)) -> services.CatalogService:
    return services.CatalogService(
        repository=repositories.ServiceRepository(connection=connection)
    )


async def get_review_service(connection=Depends(get_db_connection)) -> services.ReviewService:
    return services.ReviewService(
        repository=repositories.ReviewRepository(connection=connection)
    )


async def get_notification_service(
    connection=Depends(get_db_connection),
    http_client=Depends(get_http_client),
) -> services.NotificationService:
    return services.NotificationService(
        settings_repository=repositories.SettingsRepository(connection=connection),
        subscriber_repository=repositories.SubscriberRepository(connection=connection),
        http_client=http_client,
    )


async def get_booking_service(
    connection=Depends(get_db_connection),
    notification_service=Depends(get_notification_service),
) -> services.BookingService:
    return services.BookingService(
        repository=repositories.BookingRequestRepository(connection=connection),
        notification_service=notification_service,
    )


async def get_subscriber_service(
    connection=Depends(get_db_connection),
    notification_service=Depends(get_notification_service),
) -> services.SubscriberService:
    return services.SubscriberService(
        repository=repositories.SubscriberRepository(connection=connection),
        notification_service=notification_service,
    )


async def get_image_service(
    connection=Depends(get_db_connection),
    block_service=Depends(get_block_service),
    uploads_dir=Depends(get_uploads_dir),
) -> services.ImageService:
    return services.ImageService(
        repository=repositories.ImageRepository(connection=connection),
        block_service=block_service,
        uploads_dir=uploads_dir,
    )


async def verify_webhook_secret(
    secret_token: Annotated[str | None, Header(alias="X-Telegram-Bot-Api-Secret-Token")] = None,
) -> None:
    expected = APP_CONFIG.TELEGRAM_WEBHOOK_SECRET
    if expected and secret_token != expected:
        raise InvalidWebhookSecret()
