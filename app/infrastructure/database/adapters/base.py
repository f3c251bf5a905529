from abc import ABC, abstractmethod
from typing import Any


class StorageConnection(ABC):
    """Хранилище именованных коллекций (settings, blocks, services, ...)."""

    @abstractmethod
    async def read(self, name: str) -> Any | None:
        """Вернуть содержимое коллекции или None, если её ещё нет."""

    @abstractmethod
    async def write(self, name: str, data: Any) -> None:
        """Полностью перезаписать коллекцию."""

    async def exists(self, name: str) -> bool:
        return await self.read(name) is not None
