from app.infrastructure.config.config import APP_CONFIG
from app.infrastructure.database.adapters.base import StorageConnection
from app.infrastructure.database.adapters.json_connection import JsonFileConnection
from app.infrastructure.database.adapters.memory_connection import MemoryConnection


def create_connection(backend: str | None = None) -> StorageConnection:
    backend = (backend or APP_CONFIG.STORAGE_BACKEND).lower()
    if backend == "memory":
        return MemoryConnection()
    if backend == "file":
        return JsonFileConnection(APP_CONFIG.DATA_DIR)
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = [
    "StorageConnection",
    "JsonFileConnection",
    "MemoryConnection",
    "create_connection",
]
