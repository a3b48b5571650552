"""Domain errors raised by catalog services."""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """Base class for catalog errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class CatalogDataError(CatalogError):
    """The catalog file is missing or malformed."""


class InvalidQueryError(CatalogError):
    """Search term is empty after trimming."""


class ProductNotFoundError(CatalogError):
    """No product with the requested id."""


class CollectionNotFoundError(CatalogError):
    """No known label and no member products for a collection id."""


class InvalidProductError(CatalogError):
    """New product payload is missing required fields."""


class DuplicateProductError(CatalogError):
    """A product with the derived id already exists."""


class AlreadyFavoritedError(CatalogError):
    """Product is already in the user's favorites."""


class FavoriteNotFoundError(CatalogError):
    """Product is not in the user's favorites."""
