"""Stored form of a Product.

The store only understands flat ``str -> str`` mappings. ``ProductRecord``
is the typed counterpart of that mapping with an explicit encode/decode
pair, so a record that lost a key or holds garbage is reported as a
CorruptRecordError instead of blowing up somewhere downstream.

Numbers are written in a locale-independent form: ``Decimal`` text with a
``.`` separator for the price and plain digits for the stock count.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping

from catalog.domain.exceptions import CorruptRecordError
from catalog.domain.model.product import Product

NAME = "name"
CATEGORY = "category"
PRICE = "price"
IN_STOCK = "in-stock"
DISCONTINUED = "discontinued"

FIELD_KEYS = (NAME, CATEGORY, PRICE, IN_STOCK, DISCONTINUED)

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ProductRecord:

    name: str
    category: str
    price: Decimal
    in_stock: int
    discontinued: bool

    # --- Conversion to/from the domain ---------------------------------------

    @staticmethod
    def from_product(product: Product) -> ProductRecord:
        return ProductRecord(
            name=product.name,
            category=product.category,
            price=product.unit_price,
            in_stock=product.units_in_stock,
            discontinued=product.discontinued,
        )

    def to_product(self, product_id: int) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            category=self.category,
            unit_price=self.price,
            units_in_stock=self.in_stock,
            discontinued=self.discontinued,
        )

    # --- Conversion to/from store fields -------------------------------------

    def to_fields(self) -> dict[str, str]:
        return {
            NAME: self.name,
            CATEGORY: self.category,
            PRICE: format(self.price, "f"),
            IN_STOCK: str(self.in_stock),
            DISCONTINUED: str(bool(self.discontinued)),
        }

    @staticmethod
    def from_fields(
        fields: Mapping[str, str], product_id: int | None = None
    ) -> ProductRecord:
        """Decode a stored mapping. Unknown keys are ignored."""
        missing = [key for key in FIELD_KEYS if key not in fields]
        if missing:
            raise CorruptRecordError(
                missing[0],
                f"Stored record is missing key(s): {', '.join(missing)}",
                product_id,
            )

        return ProductRecord(
            name=fields[NAME],
            category=fields[CATEGORY],
            price=_parse_price(fields[PRICE], product_id),
            in_stock=_parse_stock(fields[IN_STOCK], product_id),
            discontinued=_parse_flag(fields[DISCONTINUED], product_id),
        )


def _parse_price(raw: str, product_id: int | None) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise CorruptRecordError(
            PRICE, f"Invalid stored price: {raw!r}", product_id
        ) from exc
    if not value.is_finite():
        raise CorruptRecordError(PRICE, f"Invalid stored price: {raw!r}", product_id)
    return value


def _parse_stock(raw: str, product_id: int | None) -> int:
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw.strip()):
        raise CorruptRecordError(
            IN_STOCK, f"Invalid stored stock count: {raw!r}", product_id
        )
    return int(raw.strip())


def _parse_flag(raw: str, product_id: int | None) -> bool:
    text = raw.strip().lower() if isinstance(raw, str) else ""
    if text == "true":
        return True
    if text == "false":
        return False
    raise CorruptRecordError(
        DISCONTINUED, f"Invalid stored discontinued flag: {raw!r}", product_id
    )
