"""CollectionStore-backed implementation of ProductRepository.

Each operation is a straight chain of awaited store calls. The outcome
of every call is checked before the next one is made: a connectivity
failure becomes StoreUnavailableError, any other failure becomes
RepositoryError. Nothing is retried, cached or rolled back; if
``add_product`` creates the collection and the insert then fails, the
collection stays.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from catalog.domain.exceptions import (
    CollectionNotFoundError,
    ProductNotFoundError,
    RepositoryError,
    StoreUnavailableError,
)
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.store.collection_store import CollectionStore
from catalog.domain.store.result import Failure, FailureKind, OperationResult
from catalog.infrastructure.persistence.product_record import ProductRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreProductRepository(ProductRepository):

    def __init__(self, collection_name: str, store: CollectionStore) -> None:
        if not collection_name or not collection_name.strip():
            raise ValueError("Collection name should not be empty or whitespace only")
        self._collection_name = collection_name
        self._store = store

    @property
    def collection_name(self) -> str:
        return self._collection_name

    # --- ProductRepository interface ------------------------------------------

    async def add_product(self, product: Product) -> int:
        product.validate()
        logger.debug("Adding product %r to '%s'", product.name, self._collection_name)

        exists = self._unwrap(
            await self._store.collection_exists(self._collection_name),
            "collection_exists",
        )
        if not exists:
            self._unwrap(
                await self._store.create_collection(self._collection_name),
                "create_collection",
            )
            logger.info("Created collection '%s'", self._collection_name)

        product_id = self._unwrap(
            await self._store.generate_id(self._collection_name), "generate_id"
        )

        fields = ProductRecord.from_product(product).to_fields()
        self._unwrap(
            await self._store.insert_element(self._collection_name, product_id, fields),
            "insert_element",
        )
        return product_id

    async def get_product(self, product_id: int) -> Product:
        logger.debug("Fetching product #%s from '%s'", product_id, self._collection_name)
        await self._ensure_exists(product_id)

        fields = self._unwrap(
            await self._store.get_element(self._collection_name, product_id),
            "get_element",
        )
        return ProductRecord.from_fields(fields, product_id).to_product(product_id)

    async def remove_product(self, product_id: int) -> None:
        logger.debug("Removing product #%s from '%s'", product_id, self._collection_name)
        await self._ensure_exists(product_id)

        self._unwrap(
            await self._store.delete_element(self._collection_name, product_id),
            "delete_element",
        )

    async def update_product(self, product: Product) -> None:
        product.validate()
        logger.debug("Updating product #%s in '%s'", product.id, self._collection_name)
        await self._ensure_exists(product.id)

        fields = ProductRecord.from_product(product).to_fields()
        self._unwrap(
            await self._store.update_element(self._collection_name, product.id, fields),
            "update_element",
        )

    # --- Internal helpers -----------------------------------------------------

    async def _ensure_exists(self, product_id: int) -> None:
        """Check the collection, then the element, in that order."""
        collection_exists = self._unwrap(
            await self._store.collection_exists(self._collection_name),
            "collection_exists",
        )
        if not collection_exists:
            raise CollectionNotFoundError(self._collection_name)

        element_exists = self._unwrap(
            await self._store.element_exists(self._collection_name, product_id),
            "element_exists",
        )
        if not element_exists:
            raise ProductNotFoundError(product_id)

    def _unwrap(self, result: OperationResult[T], operation: str) -> T:
        if not isinstance(result, Failure):
            return result.value

        logger.warning(
            "Store call %s on '%s' failed (%s): %s",
            operation,
            self._collection_name,
            result.kind.value,
            result.message or "no details",
        )
        detail = f": {result.message}" if result.message else ""
        if result.kind is FailureKind.CONNECTION_ISSUE:
            raise StoreUnavailableError(f"Database connection is lost during {operation}{detail}")
        raise RepositoryError(f"A database error occurred during {operation}{detail}")
