"""Builds the product repository from settings.

``store_backend`` picks the collection store: the JSON file store for
normal CLI use, or the in-memory store for throwaway sessions. The CLI
commands get their repository from here and never import a store.
"""

from __future__ import annotations

from catalog.domain.store.collection_store import CollectionStore
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.json_collection_store import (
    JsonFileCollectionStore,
)
from catalog.infrastructure.persistence.memory_collection_store import (
    InMemoryCollectionStore,
)
from catalog.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)


def collection_store(settings: Settings) -> CollectionStore:
    if settings.store_backend == "memory":
        return InMemoryCollectionStore()
    return JsonFileCollectionStore(settings.data_file)


def product_repository(settings: Settings | None = None) -> StoreProductRepository:
    settings = settings or get_settings()
    return StoreProductRepository(settings.collection_name, collection_store(settings))
