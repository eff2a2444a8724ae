"""JSON-file-backed implementation of CollectionStore.

The whole store is one JSON document::

    {"collections": {"products": {"last_id": 2, "elements": {"1": {...}}}}}

Every call reads the document, applies the change and writes it back.
File access runs in a worker thread so the event loop is never blocked.
I/O errors are reported as connection issues; a document that cannot be
parsed is reported as a plain error.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from catalog.domain.store.collection_store import CollectionStore
from catalog.domain.store.result import Failure, OperationResult, Success

logger = logging.getLogger(__name__)

Document = dict[str, Any]


class JsonFileCollectionStore(CollectionStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = asyncio.Lock()

    # --- CollectionStore interface --------------------------------------------

    async def collection_exists(self, name: str) -> OperationResult[bool]:
        return await self._query(lambda doc: Success(name in doc["collections"]))

    async def create_collection(self, name: str) -> OperationResult[None]:
        def create(doc: Document) -> OperationResult[None]:
            doc["collections"].setdefault(name, {"last_id": 0, "elements": {}})
            return Success()

        return await self._modify(create)

    async def generate_id(self, name: str) -> OperationResult[int]:
        def generate(doc: Document) -> OperationResult[int]:
            collection = doc["collections"].get(name)
            if collection is None:
                return Failure.error(f"Collection '{name}' does not exist")
            collection["last_id"] += 1
            return Success(collection["last_id"])

        return await self._modify(generate)

    async def element_exists(self, name: str, element_id: int) -> OperationResult[bool]:
        def exists(doc: Document) -> OperationResult[bool]:
            collection = doc["collections"].get(name)
            if collection is None:
                return Failure.error(f"Collection '{name}' does not exist")
            return Success(str(element_id) in collection["elements"])

        return await self._query(exists)

    async def insert_element(
        self, name: str, element_id: int, fields: Mapping[str, str]
    ) -> OperationResult[None]:
        def insert(doc: Document) -> OperationResult[None]:
            collection = doc["collections"].get(name)
            if collection is None:
                return Failure.error(f"Collection '{name}' does not exist")
            if str(element_id) in collection["elements"]:
                return Failure.error(f"Element {element_id} already exists in '{name}'")
            collection["elements"][str(element_id)] = dict(fields)
            return Success()

        return await self._modify(insert)

    async def get_element(
        self, name: str, element_id: int
    ) -> OperationResult[dict[str, str]]:
        def get(doc: Document) -> OperationResult[dict[str, str]]:
            elements = doc["collections"].get(name, {}).get("elements", {})
            if str(element_id) not in elements:
                return Failure.error(f"Element {element_id} not found in '{name}'")
            return Success(dict(elements[str(element_id)]))

        return await self._query(get)

    async def update_element(
        self, name: str, element_id: int, fields: Mapping[str, str]
    ) -> OperationResult[None]:
        def update(doc: Document) -> OperationResult[None]:
            elements = doc["collections"].get(name, {}).get("elements", {})
            if str(element_id) not in elements:
                return Failure.error(f"Element {element_id} not found in '{name}'")
            elements[str(element_id)] = dict(fields)
            return Success()

        return await self._modify(update)

    async def delete_element(self, name: str, element_id: int) -> OperationResult[None]:
        def delete(doc: Document) -> OperationResult[None]:
            elements = doc["collections"].get(name, {}).get("elements", {})
            if str(element_id) not in elements:
                return Failure.error(f"Element {element_id} not found in '{name}'")
            del elements[str(element_id)]
            return Success()

        return await self._modify(delete)

    # --- Document access ------------------------------------------------------

    async def _query(self, action: Callable[[Document], OperationResult]) -> OperationResult:
        async with self._lock:
            loaded = await self._load_document()
            if isinstance(loaded, Failure):
                return loaded
            return action(loaded.value)

    async def _modify(self, action: Callable[[Document], OperationResult]) -> OperationResult:
        async with self._lock:
            loaded = await self._load_document()
            if isinstance(loaded, Failure):
                return loaded

            result = action(loaded.value)
            if isinstance(result, Failure):
                return result

            try:
                await asyncio.to_thread(self._persist, loaded.value)
            except OSError as exc:
                logger.error("Could not write %s: %s", self._file_path, exc)
                return Failure.connection_issue(str(exc))
            return result

    async def _load_document(self) -> OperationResult[Document]:
        try:
            return Success(await asyncio.to_thread(self._load))
        except OSError as exc:
            logger.error("Could not read %s: %s", self._file_path, exc)
            return Failure.connection_issue(str(exc))
        except ValueError as exc:
            logger.error("Store file %s is corrupt: %s", self._file_path, exc)
            return Failure.error(f"Unreadable store file: {exc}")

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> Document:
        if not self._file_path.exists():
            return {"collections": {}}
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict) or not isinstance(raw.get("collections"), dict):
            raise ValueError("expected an object with a 'collections' object")
        return raw

    def _persist(self, document: Document) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(document, indent=2) + "\n", encoding="utf-8"
        )
