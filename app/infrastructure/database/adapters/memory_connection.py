import copy
from typing import Any

from app.infrastructure.database.adapters.base import StorageConnection


class MemoryConnection(StorageConnection):
    """Хранилище в памяти процесса, данные теряются при перезапуске."""

    def __init__(self):
        self._collections: dict[str, Any] = {}

    async def read(self, name: str) -> Any | None:
        if name not in self._collections:
            return None
        return copy.deepcopy(self._collections[name])

    async def write(self, name: str, data: Any) -> None:
        self._collections[name] = copy.deepcopy(data)
