"""Тесты файлового хранилища коллекций."""

import json

import pytest

from app.core.repositories import ServiceRepository
from app.infrastructure.database.adapters import JsonFileConnection, MemoryConnection, create_connection
from app.infrastructure.errors.base import StorageError


class TestJsonFileConnection:

    async def test_missing_collection_reads_as_none(self, tmp_path):
        connection = JsonFileConnection(tmp_path)

        assert await connection.read("services") is None
        assert await connection.exists("services") is False

    async def test_write_then_read(self, tmp_path):
        connection = JsonFileConnection(tmp_path / "data")
        records = [{"id": "1", "name": "Маникюр"}]

        await connection.write("services", records)

        assert await connection.read("services") == records
        stored = json.loads((tmp_path / "data" / "services.json").read_text(encoding="utf-8"))
        assert stored == records

    async def test_write_leaves_no_temp_file(self, tmp_path):
        connection = JsonFileConnection(tmp_path)

        await connection.write("blocks", [])
        await connection.write("blocks", [{"id": "a"}])

        assert sorted(path.name for path in tmp_path.iterdir()) == ["blocks.json"]

    async def test_corrupt_file_raises_storage_error(self, tmp_path):
        (tmp_path / "reviews.json").write_text("{not json", encoding="utf-8")
        connection = JsonFileConnection(tmp_path)

        with pytest.raises(StorageError):
            await connection.read("reviews")

        # повреждённый файл не перезаписывается значениями по умолчанию
        assert (tmp_path / "reviews.json").read_text(encoding="utf-8") == "{not json"

    async def test_repository_seeds_missing_collection(self, tmp_path):
        connection = JsonFileConnection(tmp_path)
        repository = ServiceRepository(connection)

        services = await repository.get_all_items()

        assert [service.name for service in services][0] == "Классический маникюр"
        assert (tmp_path / "services.json").exists()

    async def test_data_survives_new_connection(self, tmp_path):
        await ServiceRepository(JsonFileConnection(tmp_path)).add_item(
            {"name": "Педикюр", "description": "", "price": "2000"}
        )

        services = await ServiceRepository(JsonFileConnection(tmp_path)).get_all_items()

        assert "Педикюр" in [service.name for service in services]


class TestCreateConnection:

    def test_memory_backend(self):
        assert isinstance(create_connection("memory"), MemoryConnection)

    def test_file_backend(self):
        assert isinstance(create_connection("file"), JsonFileConnection)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_connection("redis")
