"""
Фикстуры API-тестов.

ASGITransport не запускает lifespan, поэтому состояние приложения
(хранилище, http-клиент, каталог загрузок) выставляется здесь.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from tests.conftest import ADMIN_PASSWORD, BOT_TOKEN


@pytest.fixture
async def client(connection, http_client, uploads_dir) -> AsyncGenerator[AsyncClient, None]:
    app.state.db_connection = connection
    app.state.http_client = http_client
    app.state.uploads_dir = uploads_dir

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client


@pytest.fixture
async def admin_headers(client: AsyncClient) -> dict[str, str]:
    response = await client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
async def bot_configured(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.put("/api/admin/settings", json={"botToken": BOT_TOKEN}, headers=admin_headers)
    assert response.status_code == 200


@pytest.fixture
async def subscriber(client: AsyncClient, admin_headers: dict[str, str]) -> dict:
    response = await client.post(
        "/api/admin/subscribers",
        json={"chatId": "1001", "firstName": "Мария"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    return response.json()
