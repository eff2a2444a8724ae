"""Dict-backed implementation of CollectionStore.

Identifiers start at 1 in every collection and only ever grow, so an id
freed by a delete is never handed out again. Nothing here awaits, which
makes each call atomic with respect to other coroutines on the loop.
"""

from __future__ import annotations

from typing import Mapping

from catalog.domain.store.collection_store import CollectionStore
from catalog.domain.store.result import Failure, OperationResult, Success


class InMemoryCollectionStore(CollectionStore):

    def __init__(self) -> None:
        self._collections: dict[str, dict[int, dict[str, str]]] = {}
        self._last_ids: dict[str, int] = {}

    # --- CollectionStore interface --------------------------------------------

    async def collection_exists(self, name: str) -> OperationResult[bool]:
        return Success(name in self._collections)

    async def create_collection(self, name: str) -> OperationResult[None]:
        # Creating twice is allowed: concurrent adders may both see it missing.
        self._collections.setdefault(name, {})
        self._last_ids.setdefault(name, 0)
        return Success()

    async def generate_id(self, name: str) -> OperationResult[int]:
        if name not in self._collections:
            return Failure.error(f"Collection '{name}' does not exist")
        self._last_ids[name] += 1
        return Success(self._last_ids[name])

    async def element_exists(self, name: str, element_id: int) -> OperationResult[bool]:
        collection = self._collections.get(name)
        if collection is None:
            return Failure.error(f"Collection '{name}' does not exist")
        return Success(element_id in collection)

    async def insert_element(
        self, name: str, element_id: int, fields: Mapping[str, str]
    ) -> OperationResult[None]:
        collection = self._collections.get(name)
        if collection is None:
            return Failure.error(f"Collection '{name}' does not exist")
        if element_id in collection:
            return Failure.error(f"Element {element_id} already exists in '{name}'")
        collection[element_id] = dict(fields)
        return Success()

    async def get_element(
        self, name: str, element_id: int
    ) -> OperationResult[dict[str, str]]:
        collection = self._collections.get(name)
        if collection is None or element_id not in collection:
            return Failure.error(f"Element {element_id} not found in '{name}'")
        return Success(dict(collection[element_id]))

    async def update_element(
        self, name: str, element_id: int, fields: Mapping[str, str]
    ) -> OperationResult[None]:
        collection = self._collections.get(name)
        if collection is None or element_id not in collection:
            return Failure.error(f"Element {element_id} not found in '{name}'")
        collection[element_id] = dict(fields)
        return Success()

    async def delete_element(self, name: str, element_id: int) -> OperationResult[None]:
        collection = self._collections.get(name)
        if collection is None or element_id not in collection:
            return Failure.error(f"Element {element_id} not found in '{name}'")
        del collection[element_id]
        return Success()
