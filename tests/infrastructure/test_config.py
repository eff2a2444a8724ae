"""Tests for settings and the composition root."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from catalog.infrastructure.bootstrap import collection_store, product_repository
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_collection_store import (
    JsonFileCollectionStore,
)
from catalog.infrastructure.persistence.memory_collection_store import (
    InMemoryCollectionStore,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for key in ("CATALOG_COLLECTION_NAME", "CATALOG_STORE_BACKEND",
                "CATALOG_DATA_FILE", "CATALOG_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    # Keep a stray .env in the working directory out of the picture.
    monkeypatch.chdir(tmp_path)


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.collection_name == "products"
        assert settings.store_backend == "json"
        assert settings.data_file == Path("data") / "catalog.json"
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("CATALOG_COLLECTION_NAME", "stock")
        monkeypatch.setenv("CATALOG_STORE_BACKEND", "memory")
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.collection_name == "stock"
        assert settings.store_backend == "memory"
        assert settings.log_level == "DEBUG"

    def test_blank_collection_name_rejected(self):
        with pytest.raises(ValidationError):
            Settings(collection_name="  ")

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError, match="log level"):
            Settings()

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            Settings(store_backend="redis")


class TestBootstrap:

    def test_memory_backend(self):
        store = collection_store(Settings(store_backend="memory"))
        assert isinstance(store, InMemoryCollectionStore)

    def test_json_backend(self, tmp_path):
        store = collection_store(Settings(data_file=tmp_path / "c.json"))
        assert isinstance(store, JsonFileCollectionStore)

    def test_repository_uses_configured_collection(self):
        repo = product_repository(Settings(collection_name="stock", store_backend="memory"))
        assert repo.collection_name == "stock"
