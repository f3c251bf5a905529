from fastapi import APIRouter

from app.api.v1.routers.admin import admin_routers
from app.api.v1.routers.client import client_routers
from app.api.v1.routers.webhook import router as webhook_router
from app.api.v1.routers.uploads import router as uploads_router


api_v1_routers = APIRouter(prefix="/api")
api_v1_routers.include_router(client_routers)
api_v1_routers.include_router(admin_routers)
api_v1_routers.include_router(webhook_router, prefix="/webhook", tags=["Webhook"])

__all__ = ["api_v1_routers", "uploads_router"]
