from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.routers import api_v1_routers, uploads_router
from app.infrastructure.database.adapters import create_connection
from app.infrastructure.logging.logger import configure_logging, get_logger
from app.infrastructure.middleware import LoggingMiddleware
from app.infrastructure.config.config import APP_CONFIG
from app.utils.seed_data import init_storage


configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app):
    logger.info("application_startup", app_name=APP_CONFIG.APP_NAME, debug=APP_CONFIG.DEBUG)

    db_connection = create_connection()
    await init_storage(db_connection)
    app.state.db_connection = db_connection
    logger.info("storage_connected", backend=APP_CONFIG.STORAGE_BACKEND)

    uploads_dir = Path(APP_CONFIG.UPLOADS_DIR)
    if not uploads_dir.exists():
        uploads_dir.mkdir(parents=True, exist_ok=True)
        logger.info("uploads_directory_created", path=str(uploads_dir))
    app.state.uploads_dir = uploads_dir

    app.state.http_client = httpx.AsyncClient(timeout=APP_CONFIG.TELEGRAM_TIMEOUT)

    yield

    await app.state.http_client.aclose()
    logger.info("application_shutdown")


app = FastAPI(
    title=APP_CONFIG.APP_NAME,
    debug=APP_CONFIG.DEBUG,
    lifespan=lifespan
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=APP_CONFIG.CORS_ALLOWED_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)

app.include_router(api_v1_routers)
app.include_router(uploads_router, prefix=APP_CONFIG.UPLOADS_URL.rstrip("/"), tags=["Uploads"])
