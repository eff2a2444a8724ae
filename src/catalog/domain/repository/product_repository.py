"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. The store-backed implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def add_product(self, product: Product) -> int:
        """Persist a new product and return the identifier assigned to it."""

    @abstractmethod
    async def get_product(self, product_id: int) -> Product:
        """Return the product with the given ID."""

    @abstractmethod
    async def remove_product(self, product_id: int) -> None:
        """Delete the product with the given ID."""

    @abstractmethod
    async def update_product(self, product: Product) -> None:
        """Overwrite the stored fields of ``product.id`` with ``product``."""
