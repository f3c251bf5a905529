"""
Общие фикстуры тестов.

Хранилище - MemoryConnection с начальными данными, Telegram Bot API
подменяется httpx.MockTransport, загрузки пишутся во временный каталог.
"""

import io
from collections.abc import AsyncGenerator, Callable
from urllib.parse import parse_qsl

import httpx
import pytest
from PIL import Image

from app.infrastructure.database.adapters import MemoryConnection
from app.utils.seed_data import init_storage


ADMIN_PASSWORD = "admin123"
BOT_TOKEN = "123456:TEST-TOKEN"


class TelegramStub:
    """Фейковый Bot API: запоминает вызовы, отказывает выбранным чатам."""

    def __init__(self):
        self.calls: list[dict] = []
        self.failing_chats: set[str] = set()
        self.unreachable_chats: set[str] = set()
        self.garbled_chats: set[str] = set()
        self.fail_all = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = dict(parse_qsl(request.content.decode("utf-8")))
        method = request.url.path.rsplit("/", 1)[-1]
        self.calls.append({"method": method, "payload": payload, "url": str(request.url)})

        chat_id = str(payload.get("chat_id"))
        if chat_id in self.unreachable_chats:
            raise httpx.ConnectError("connection refused", request=request)
        if chat_id in self.garbled_chats:
            return httpx.Response(200, json=["unexpected"])
        if self.fail_all or chat_id in self.failing_chats:
            return httpx.Response(
                400,
                json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"},
            )
        if method == "sendMessage":
            return httpx.Response(200, json={"ok": True, "result": self._message(payload)})
        return httpx.Response(200, json={"ok": True, "result": True})

    @staticmethod
    def _message(payload: dict) -> dict:
        return {
            "message_id": 1,
            "date": 1700000000,
            "chat": {"id": int(payload["chat_id"]), "type": "private"},
            "text": payload.get("text", ""),
        }

    def messages(self) -> list[dict]:
        return [call["payload"] for call in self.calls if call["method"] == "sendMessage"]


@pytest.fixture
async def connection() -> MemoryConnection:
    connection = MemoryConnection()
    await init_storage(connection)
    return connection


@pytest.fixture
def telegram() -> TelegramStub:
    return TelegramStub()


@pytest.fixture
async def http_client(telegram: TelegramStub) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(telegram.handler)) as client:
        yield client


@pytest.fixture
def uploads_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    def _make(image_format: str = "PNG", size: tuple[int, int] = (40, 30)) -> bytes:
        buffer = io.BytesIO()
        Image.new("RGB", size, color=(220, 120, 160)).save(buffer, format=image_format)
        return buffer.getvalue()

    return _make
