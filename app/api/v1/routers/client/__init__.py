from fastapi import APIRouter

from app.api.v1.routers.client.settings import router as settings_router
from app.api.v1.routers.client.blocks import router as blocks_router
from app.api.v1.routers.client.services import router as services_router
from app.api.v1.routers.client.reviews import router as reviews_router
from app.api.v1.routers.client.booking import router as booking_router


client_routers = APIRouter()


client_routers.include_router(settings_router, prefix="/settings", tags=["Settings"])
client_routers.include_router(blocks_router, prefix="/blocks", tags=["Blocks"])
client_routers.include_router(services_router, prefix="/services", tags=["Services"])
client_routers.include_router(reviews_router, prefix="/reviews", tags=["Reviews"])
client_routers.include_router(booking_router, prefix="/requests", tags=["Requests"])
