"""Product entity.

The identifier is assigned by the store when the product is first added
and never changes afterwards. Everything else is plain, mutable data.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.exceptions import InvalidProductError


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass: updating a product means changing the
    fields of a loaded instance and handing it back to the repository.
    """

    name: str
    category: str
    unit_price: Decimal
    units_in_stock: int = 0
    discontinued: bool = False
    id: int = 0

    def validate(self) -> None:
        """Check the field constraints, stopping at the first violation.

        Raises InvalidProductError naming the offending field.
        """
        if not self.name or not self.name.strip():
            raise InvalidProductError(
                "name", "Product name should not be empty or whitespace only"
            )
        if not self.category or not self.category.strip():
            raise InvalidProductError(
                "category", "Product category should not be empty or whitespace only"
            )
        if not self.unit_price.is_finite():
            raise InvalidProductError(
                "unit_price", f"Unit price should be a finite number, got {self.unit_price}"
            )
        if self.unit_price < Decimal("0"):
            raise InvalidProductError(
                "unit_price",
                f"Unit price should be greater or equal to zero, got {self.unit_price}",
            )
        if self.units_in_stock < 0:
            raise InvalidProductError(
                "units_in_stock",
                f"Units in stock should be greater or equal to zero, got {self.units_in_stock}",
            )
