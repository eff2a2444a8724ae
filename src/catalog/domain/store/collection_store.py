"""Abstract collection store.

A store keeps named collections of flat string-keyed records addressed
by integer identifiers. Defined in the domain layer so the repository
never depends on a concrete backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from catalog.domain.store.result import OperationResult


class CollectionStore(ABC):

    @abstractmethod
    async def collection_exists(self, name: str) -> OperationResult[bool]:
        """Report whether the named collection exists."""

    @abstractmethod
    async def create_collection(self, name: str) -> OperationResult[None]:
        """Create the named collection."""

    @abstractmethod
    async def generate_id(self, name: str) -> OperationResult[int]:
        """Reserve a new, unused element identifier in the collection."""

    @abstractmethod
    async def element_exists(self, name: str, element_id: int) -> OperationResult[bool]:
        """Report whether the collection holds an element with this id."""

    @abstractmethod
    async def insert_element(
        self, name: str, element_id: int, fields: Mapping[str, str]
    ) -> OperationResult[None]:
        """Store a new element under ``element_id``."""

    @abstractmethod
    async def get_element(
        self, name: str, element_id: int
    ) -> OperationResult[dict[str, str]]:
        """Return a copy of the element's fields."""

    @abstractmethod
    async def update_element(
        self, name: str, element_id: int, fields: Mapping[str, str]
    ) -> OperationResult[None]:
        """Replace the fields of an existing element."""

    @abstractmethod
    async def delete_element(self, name: str, element_id: int) -> OperationResult[None]:
        """Remove an existing element."""
