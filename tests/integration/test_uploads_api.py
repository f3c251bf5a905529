"""Загрузка, раздача и удаление изображений."""

from httpx import AsyncClient


async def upload(client: AsyncClient, headers: dict, content: bytes, filename: str = "photo.png", content_type: str = "image/png"):
    return await client.post(
        "/api/admin/upload",
        files={"image": (filename, content, content_type)},
        headers=headers,
    )


class TestUpload:

    async def test_upload_png(self, client: AsyncClient, admin_headers, uploads_dir, make_image):
        response = await upload(client, admin_headers, make_image(size=(40, 30)))

        assert response.status_code == 200
        image = response.json()
        assert image["path"] == f"/uploads/{image['filename']}"
        assert image["filename"].endswith(".png")
        assert image["originalName"] == "photo.png"
        assert (image["width"], image["height"]) == (40, 30)
        assert (uploads_dir / image["filename"]).exists()

        listed = (await client.get("/api/admin/images", headers=admin_headers)).json()
        assert [item["id"] for item in listed] == [image["id"]]

    async def test_uploaded_file_is_served(self, client: AsyncClient, admin_headers, make_image):
        content = make_image(image_format="JPEG")
        image = (await upload(client, admin_headers, content, "photo.jpg", "image/jpeg")).json()

        response = await client.get(image["path"])

        assert response.status_code == 200
        assert response.content == content

    async def test_missing_file_is_404(self, client: AsyncClient):
        response = await client.get("/uploads/nothing.png")

        assert response.status_code == 404

    async def test_wrong_extension(self, client: AsyncClient, admin_headers, uploads_dir, make_image):
        response = await upload(client, admin_headers, make_image(), "photo.gif", "image/png")

        assert response.status_code == 400
        assert list(uploads_dir.iterdir()) == []

    async def test_wrong_content_type(self, client: AsyncClient, admin_headers, uploads_dir, make_image):
        response = await upload(client, admin_headers, make_image(), "photo.png", "text/plain")

        assert response.status_code == 400
        assert list(uploads_dir.iterdir()) == []

    async def test_too_large(self, client: AsyncClient, admin_headers, uploads_dir):
        response = await upload(client, admin_headers, b"\x89PNG" + b"0" * (5 * 1024 * 1024))

        assert response.status_code == 400
        assert list(uploads_dir.iterdir()) == []

    async def test_empty_file(self, client: AsyncClient, admin_headers, uploads_dir):
        response = await upload(client, admin_headers, b"")

        assert response.status_code == 400
        assert list(uploads_dir.iterdir()) == []

    async def test_not_an_image(self, client: AsyncClient, admin_headers, uploads_dir):
        response = await upload(client, admin_headers, b"definitely not a png")

        assert response.status_code == 400
        assert list(uploads_dir.iterdir()) == []
        assert (await client.get("/api/admin/images", headers=admin_headers)).json() == []


class TestDeleteImage:

    async def test_removes_record_and_file(self, client: AsyncClient, admin_headers, uploads_dir, make_image):
        image = (await upload(client, admin_headers, make_image())).json()

        response = await client.delete(f"/api/admin/images/{image['id']}", headers=admin_headers)

        assert response.json() == {"success": True}
        assert not (uploads_dir / image["filename"]).exists()
        assert (await client.get("/api/admin/images", headers=admin_headers)).json() == []

    async def test_record_removed_when_file_already_gone(self, client: AsyncClient, admin_headers, uploads_dir, make_image):
        image = (await upload(client, admin_headers, make_image())).json()
        (uploads_dir / image["filename"]).unlink()

        response = await client.delete(f"/api/admin/images/{image['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert (await client.get("/api/admin/images", headers=admin_headers)).json() == []

    async def test_missing_image(self, client: AsyncClient, admin_headers):
        response = await client.delete("/api/admin/images/missing", headers=admin_headers)

        assert response.status_code == 404


class TestDeleteUpload:

    async def test_by_query_path(self, client: AsyncClient, admin_headers, uploads_dir, make_image):
        image = (await upload(client, admin_headers, make_image())).json()

        response = await client.delete("/api/admin/delete-upload", params={"path": image["path"]}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "fileDeleted": True}
        assert not (uploads_dir / image["filename"]).exists()
        assert (await client.get("/api/admin/images", headers=admin_headers)).json() == []

    async def test_by_body_removes_gallery_reference(self, client: AsyncClient, admin_headers, make_image):
        image = (await upload(client, admin_headers, make_image())).json()
        block = (
            await client.post(
                "/api/admin/blocks",
                json={
                    "blockType": "gallery",
                    "title": "Работы",
                    "images": [{"path": image["path"]}, {"path": "/uploads/other.png"}],
                },
                headers=admin_headers,
            )
        ).json()

        response = await client.request(
            "DELETE",
            "/api/admin/delete-upload",
            json={"path": image["path"], "blockId": block["id"], "imageUrl": image["path"]},
            headers=admin_headers,
        )

        assert response.status_code == 200
        updated = (await client.get(f"/api/admin/blocks/{block['id']}", headers=admin_headers)).json()
        assert [item["path"] for item in updated["images"]] == ["/uploads/other.png"]

    async def test_missing_file_still_succeeds(self, client: AsyncClient, admin_headers):
        response = await client.delete("/api/admin/delete-upload", params={"path": "/uploads/gone.png"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["fileDeleted"] is False

    async def test_path_required(self, client: AsyncClient, admin_headers):
        response = await client.delete("/api/admin/delete-upload", headers=admin_headers)

        assert response.status_code == 400

    async def test_path_outside_uploads(self, client: AsyncClient, admin_headers, uploads_dir):
        secret = uploads_dir.parent / "secret.txt"
        secret.write_text("keep me")

        traversal = await client.delete(
            "/api/admin/delete-upload", params={"path": "/uploads/../secret.txt"}, headers=admin_headers
        )
        foreign = await client.delete("/api/admin/delete-upload", params={"path": "/etc/passwd"}, headers=admin_headers)

        assert traversal.status_code == 400
        assert foreign.status_code == 400
        assert secret.exists()
