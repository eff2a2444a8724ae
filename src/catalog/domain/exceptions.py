"""Domain-level exceptions.

All catalog errors are subclasses of DomainException so the CLI layer can
catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidProductError(ValidationError):
    """A product field does not satisfy its constraint.

    Raised before the store is touched, so the caller can fix the input
    and try again.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CollectionNotFoundError(EntityNotFoundError):

    def __init__(self, collection_name: str) -> None:
        super().__init__(f"Collection '{collection_name}' not found")
        self.collection_name = collection_name


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class RepositoryError(DomainException):
    """The store reported a failure the repository cannot recover from."""


class StoreUnavailableError(RepositoryError):
    """The store could not be reached."""


class CorruptRecordError(RepositoryError):
    """A stored product record is missing a key or holds an unparsable value."""

    def __init__(self, key: str, message: str, product_id: int | None = None) -> None:
        if product_id is not None:
            message = f"Product #{product_id}: {message}"
        super().__init__(message)
        self.key = key
        self.product_id = product_id
