import asyncio
import json
import os
from pathlib import Path
from typing import Any

from app.infrastructure.database.adapters.base import StorageConnection
from app.infrastructure.errors.base import StorageError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class JsonFileConnection(StorageConnection):
    """
    Долговременное хранилище: один JSON-файл на коллекцию.

    Каждая запись перезаписывает файл целиком (через временный файл и rename),
    блокировок нет: при параллельных записях побеждает последняя.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    def _path(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def _read_sync(self, name: str) -> Any | None:
        path = self._path(name)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("collection_read_failed", collection=name, path=str(path), error=str(exc))
            raise StorageError(f"Не удалось прочитать коллекцию {name}") from exc

    def _write_sync(self, name: str, data: Any) -> None:
        path = self._path(name)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.error("collection_write_failed", collection=name, path=str(path), error=str(exc))
            raise StorageError(f"Не удалось сохранить коллекцию {name}") from exc

    async def read(self, name: str) -> Any | None:
        return await asyncio.to_thread(self._read_sync, name)

    async def write(self, name: str, data: Any) -> None:
        await asyncio.to_thread(self._write_sync, name, data)
