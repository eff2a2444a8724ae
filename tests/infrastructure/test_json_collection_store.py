"""Tests for the JSON-file collection store."""

import json
from decimal import Decimal

import pytest

from catalog.domain.exceptions import RepositoryError, StoreUnavailableError
from catalog.domain.model.product import Product
from catalog.domain.store.result import Failure, FailureKind, Success
from catalog.infrastructure.persistence.json_collection_store import (
    JsonFileCollectionStore,
)
from catalog.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "catalog.json"


class TestJsonFileCollectionStore:

    @pytest.mark.asyncio
    async def test_file_created_lazily(self, data_file):
        store = JsonFileCollectionStore(data_file)

        assert await store.collection_exists("products") == Success(False)
        assert not data_file.exists()

        await store.create_collection("products")
        assert data_file.exists()

    @pytest.mark.asyncio
    async def test_data_survives_new_instance(self, data_file):
        first = JsonFileCollectionStore(data_file)
        await first.create_collection("products")
        element_id = (await first.generate_id("products")).value
        await first.insert_element("products", element_id, {"name": "Tea"})

        second = JsonFileCollectionStore(data_file)
        assert await second.get_element("products", element_id) == Success({"name": "Tea"})
        assert await second.generate_id("products") == Success(element_id + 1)

    @pytest.mark.asyncio
    async def test_document_layout(self, data_file):
        store = JsonFileCollectionStore(data_file)
        await store.create_collection("products")
        await store.generate_id("products")
        await store.insert_element("products", 1, {"name": "Tea"})

        document = json.loads(data_file.read_text(encoding="utf-8"))
        assert document == {
            "collections": {
                "products": {"last_id": 1, "elements": {"1": {"name": "Tea"}}}
            }
        }

    @pytest.mark.asyncio
    async def test_failed_operation_does_not_write(self, data_file):
        store = JsonFileCollectionStore(data_file)

        result = await store.insert_element("products", 1, {"name": "Tea"})

        assert isinstance(result, Failure)
        assert not data_file.exists()

    @pytest.mark.asyncio
    async def test_delete_element(self, data_file):
        store = JsonFileCollectionStore(data_file)
        await store.create_collection("products")
        await store.insert_element("products", 3, {"name": "Tea"})

        assert await store.delete_element("products", 3) == Success()
        assert await store.element_exists("products", 3) == Success(False)
        assert isinstance(await store.delete_element("products", 3), Failure)

    @pytest.mark.asyncio
    async def test_corrupt_file_is_an_error(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("{not json", encoding="utf-8")
        store = JsonFileCollectionStore(data_file)

        result = await store.collection_exists("products")

        assert isinstance(result, Failure)
        assert result.kind is FailureKind.ERROR

    @pytest.mark.asyncio
    async def test_unreadable_path_is_a_connection_issue(self, tmp_path):
        # A directory where the file should be cannot be read as text.
        store = JsonFileCollectionStore(tmp_path)

        result = await store.collection_exists("products")

        assert isinstance(result, Failure)
        assert result.kind is FailureKind.CONNECTION_ISSUE


class TestRepositoryOverJsonStore:

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, data_file):
        repo = StoreProductRepository("products", JsonFileCollectionStore(data_file))
        tea = Product(
            name="Tea",
            category="Beverages",
            unit_price=Decimal("2.50"),
            units_in_stock=100,
        )

        product_id = await repo.add_product(tea)
        assert product_id == 1

        reopened = StoreProductRepository("products", JsonFileCollectionStore(data_file))
        loaded = await reopened.get_product(product_id)
        assert loaded == Product(
            id=1,
            name="Tea",
            category="Beverages",
            unit_price=Decimal("2.50"),
            units_in_stock=100,
        )

        loaded.units_in_stock = 90
        await reopened.update_product(loaded)
        assert (await repo.get_product(1)).units_in_stock == 90

        await repo.remove_product(1)

    @pytest.mark.asyncio
    async def test_errors_translate(self, tmp_path, data_file):
        broken = StoreProductRepository("products", JsonFileCollectionStore(tmp_path))
        with pytest.raises(StoreUnavailableError):
            await broken.get_product(1)

        data_file.parent.mkdir(parents=True)
        data_file.write_text("[]", encoding="utf-8")
        corrupt = StoreProductRepository("products", JsonFileCollectionStore(data_file))
        with pytest.raises(RepositoryError):
            await corrupt.get_product(1)
