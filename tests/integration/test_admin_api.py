"""Админ-панель: вход, настройки, CRUD контента, подписчики, Telegram."""

import pytest
from httpx import AsyncClient

from tests.conftest import ADMIN_PASSWORD


ADMIN_ENDPOINTS = [
    ("get", "/api/admin/settings"),
    ("put", "/api/admin/settings"),
    ("get", "/api/admin/blocks"),
    ("post", "/api/admin/blocks"),
    ("delete", "/api/admin/services/some-id"),
    ("get", "/api/admin/requests"),
    ("get", "/api/admin/subscribers"),
    ("post", "/api/admin/telegram/test"),
    ("get", "/api/admin/images"),
    ("delete", "/api/admin/delete-upload"),
]


class TestAuth:

    async def test_login(self, client: AsyncClient):
        response = await client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["tokenType"] == "bearer"

    async def test_login_wrong_password(self, client: AsyncClient):
        response = await client.post("/api/admin/login", json={"password": "nope"})

        assert response.status_code == 401

    @pytest.mark.parametrize("method,url", ADMIN_ENDPOINTS)
    async def test_endpoints_require_bearer(self, client: AsyncClient, method, url):
        missing = await client.request(method, url)
        wrong = await client.request(method, url, headers={"Authorization": "Bearer wrong"})

        assert missing.status_code == 401
        assert wrong.status_code == 401
        assert missing.json() == wrong.json()
        assert wrong.headers["WWW-Authenticate"] == "Bearer"

    async def test_raw_password_bearer(self, client: AsyncClient):
        response = await client.get("/api/admin/settings", headers={"Authorization": f"Bearer {ADMIN_PASSWORD}"})

        assert response.status_code == 200

    async def test_password_change(self, client: AsyncClient, admin_headers):
        await client.put("/api/admin/settings", json={"adminPassword": "new-secret"}, headers=admin_headers)

        old = await client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
        new = await client.post("/api/admin/login", json={"password": "new-secret"})
        stale = await client.get("/api/admin/settings", headers=admin_headers)

        assert old.status_code == 401
        assert new.status_code == 200
        assert stale.status_code == 401


class TestSettings:

    async def test_admin_settings_hide_password(self, client: AsyncClient, admin_headers, bot_configured):
        body = (await client.get("/api/admin/settings", headers=admin_headers)).json()

        assert "adminPassword" not in body
        assert body["botToken"]

    async def test_sequential_updates_keep_both_changes(self, client: AsyncClient, admin_headers):
        first = await client.put("/api/admin/settings", json={"masterName": "Елена"}, headers=admin_headers)
        second = await client.put("/api/admin/settings", json={"masterPhone": "+7 900 000-00-00"}, headers=admin_headers)

        assert first.status_code == second.status_code == 200
        body = (await client.get("/api/settings")).json()
        assert body["masterName"] == "Елена"
        assert body["masterPhone"] == "+7 900 000-00-00"


    async def test_null_for_required_field_rejected(self, client: AsyncClient, admin_headers):
        response = await client.put("/api/admin/settings", json={"telegramEnabled": None}, headers=admin_headers)

        assert response.status_code == 422
        body = (await client.get("/api/settings")).json()
        assert body["telegramEnabled"] is False


class TestBlocks:

    async def test_crud(self, client: AsyncClient, admin_headers):
        created = await client.post(
            "/api/admin/blocks",
            json={
                "blockType": "gallery",
                "title": "Мои работы",
                "images": [{"path": "/uploads/a.png", "width": 100, "height": 80}],
                "order": 5,
            },
            headers=admin_headers,
        )
        assert created.status_code == 200
        block_id = created.json()["id"]
        assert created.json()["images"][0]["path"] == "/uploads/a.png"

        updated = await client.put(f"/api/admin/blocks/{block_id}", json={"title": "Галерея"}, headers=admin_headers)
        assert updated.json()["title"] == "Галерея"
        assert updated.json()["images"][0]["width"] == 100

        deleted = await client.delete(f"/api/admin/blocks/{block_id}", headers=admin_headers)
        assert deleted.json() == {"success": True}

        missing = await client.get(f"/api/admin/blocks/{block_id}", headers=admin_headers)
        assert missing.status_code == 404

    async def test_admin_list_includes_disabled(self, client: AsyncClient, admin_headers):
        await client.post(
            "/api/admin/blocks",
            json={"blockType": "promo", "title": "Акция", "enabled": False},
            headers=admin_headers,
        )

        admin_blocks = (await client.get("/api/admin/blocks", headers=admin_headers)).json()
        public_blocks = (await client.get("/api/blocks")).json()

        assert "promo" in [block["blockType"] for block in admin_blocks]
        assert "promo" not in [block["blockType"] for block in public_blocks]


    async def test_stats_round_trip(self, client: AsyncClient, admin_headers):
        stats = [{"label": "10+", "value": "лет опыта"}]
        await client.post(
            "/api/admin/blocks",
            json={"blockType": "numbers", "title": "Цифры", "stats": stats, "images": []},
            headers=admin_headers,
        )

        block = next(item for item in (await client.get("/api/blocks")).json() if item["blockType"] == "numbers")

        assert block["stats"] == stats
        assert block["images"] is None

    async def test_null_title_rejected(self, client: AsyncClient, admin_headers):
        block = (await client.get("/api/admin/blocks", headers=admin_headers)).json()[0]

        response = await client.put(f"/api/admin/blocks/{block['id']}", json={"title": None}, headers=admin_headers)

        assert response.status_code == 422
        assert (await client.get(f"/api/admin/blocks/{block['id']}", headers=admin_headers)).json()["title"] == block["title"]


class TestServicesAndReviews:

    async def test_service_crud(self, client: AsyncClient, admin_headers):
        created = await client.post(
            "/api/admin/services",
            json={"name": "Педикюр", "description": "Уход за стопами", "price": "2000"},
            headers=admin_headers,
        )
        service_id = created.json()["id"]

        updated = await client.put(f"/api/admin/services/{service_id}", json={"price": "2200"}, headers=admin_headers)
        assert updated.json()["price"] == "2200"
        assert updated.json()["name"] == "Педикюр"

        assert (await client.delete(f"/api/admin/services/{service_id}", headers=admin_headers)).json() == {"success": True}
        assert service_id not in [item["id"] for item in (await client.get("/api/services")).json()]

    async def test_update_missing_service(self, client: AsyncClient, admin_headers):
        response = await client.put("/api/admin/services/missing", json={"price": "1"}, headers=admin_headers)

        assert response.status_code == 404

    async def test_reviews_newest_first(self, client: AsyncClient, admin_headers):
        for name in ("Ольга", "Ирина"):
            await client.post("/api/admin/reviews", json={"name": name, "text": "Спасибо!"}, headers=admin_headers)

        reviews = (await client.get("/api/reviews")).json()

        assert [review["name"] for review in reviews] == ["Ирина", "Ольга"]
        assert all(review["createdAt"] for review in reviews)


    async def test_null_service_name_rejected(self, client: AsyncClient, admin_headers):
        service = (await client.get("/api/services")).json()[0]

        response = await client.put(f"/api/admin/services/{service['id']}", json={"name": None}, headers=admin_headers)

        assert response.status_code == 422

    async def test_null_review_text_rejected(self, client: AsyncClient, admin_headers):
        created = await client.post("/api/admin/reviews", json={"name": "Ольга", "text": "Спасибо!"}, headers=admin_headers)

        response = await client.put(f"/api/admin/reviews/{created.json()['id']}", json={"text": None}, headers=admin_headers)

        assert response.status_code == 422
        assert (await client.get("/api/reviews")).json()[0]["text"] == "Спасибо!"


class TestSubscribers:

    async def test_duplicate_chat_id(self, client: AsyncClient, admin_headers, subscriber):
        response = await client.post("/api/admin/subscribers", json={"chatId": subscriber["chatId"]}, headers=admin_headers)

        assert response.status_code == 409
        assert len((await client.get("/api/admin/subscribers", headers=admin_headers)).json()) == 1

    async def test_delete(self, client: AsyncClient, admin_headers, subscriber):
        response = await client.delete(f"/api/admin/subscribers/{subscriber['id']}", headers=admin_headers)

        assert response.json() == {"success": True}
        assert (await client.get("/api/admin/subscribers", headers=admin_headers)).json() == []


class TestTelegram:

    async def test_test_message_without_token(self, client: AsyncClient, admin_headers, subscriber):
        response = await client.post("/api/admin/telegram/test", headers=admin_headers)

        assert response.status_code == 400

    async def test_test_message_without_subscribers(self, client: AsyncClient, admin_headers, bot_configured):
        response = await client.post("/api/admin/telegram/test", headers=admin_headers)

        assert response.status_code == 400

    async def test_test_message_reports_counts(self, client: AsyncClient, admin_headers, bot_configured, subscriber, telegram):
        await client.post("/api/admin/subscribers", json={"chatId": "2002"}, headers=admin_headers)
        telegram.failing_chats.add("2002")

        response = await client.post("/api/admin/telegram/test", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert (body["delivered"], body["total"]) == (1, 2)
        assert body["message"] == "Отправлено 1 из 2 подписчиков"

    async def test_register_webhook(self, client: AsyncClient, admin_headers, bot_configured, telegram):
        response = await client.post(
            "/api/admin/telegram/webhook",
            json={"url": "https://example.com/api/webhook/telegram"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert telegram.calls[-1]["method"] == "setWebhook"

    async def test_register_webhook_rejected(self, client: AsyncClient, admin_headers, bot_configured, telegram):
        telegram.fail_all = True

        response = await client.post(
            "/api/admin/telegram/webhook",
            json={"url": "https://example.com/hook"},
            headers=admin_headers,
        )

        assert response.status_code == 502
