from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_current_admin_dependency
from app.api.v1.routers.admin.auth_router import router as auth_router
from app.api.v1.routers.admin.settings_router import router as settings_router
from app.api.v1.routers.admin.blocks_router import router as blocks_router
from app.api.v1.routers.admin.services_router import router as services_router
from app.api.v1.routers.admin.reviews_router import router as reviews_router
from app.api.v1.routers.admin.requests_router import router as requests_router
from app.api.v1.routers.admin.subscribers_router import router as subscribers_router
from app.api.v1.routers.admin.telegram_router import router as telegram_router
from app.api.v1.routers.admin.images_router import router as images_router
from app.infrastructure.errors.auth_errors import InvalidCredentials
from app.utils.error_extra import error_response


PROTECTED = Depends(get_current_admin_dependency)
AUTH_ERRORS = {
    **error_response(InvalidCredentials)
}
admin_routers = APIRouter(prefix="/admin")


admin_routers.include_router(auth_router, tags=["AUTH"])

admin_routers.include_router(
    settings_router, prefix="/settings", tags=["Admin Settings"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
admin_routers.include_router(
    blocks_router, prefix="/blocks", tags=["Admin Blocks"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
admin_routers.include_router(
    services_router, prefix="/services", tags=["Admin Services"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
admin_routers.include_router(
    reviews_router, prefix="/reviews", tags=["Admin Reviews"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
admin_routers.include_router(
    requests_router, prefix="/requests", tags=["Admin Requests"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
admin_routers.include_router(
    subscribers_router, prefix="/subscribers", tags=["Admin Subscribers"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
admin_routers.include_router(
    telegram_router, prefix="/telegram", tags=["Admin Telegram"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
admin_routers.include_router(
    images_router, tags=["Admin Images"],
    dependencies=[PROTECTED], responses=AUTH_ERRORS
)
