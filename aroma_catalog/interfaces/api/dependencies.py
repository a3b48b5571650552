"""FastAPI dependencies for dependency injection."""

from typing import Dict, Optional, Sequence

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from aroma_catalog.application.services.catalog_service import CatalogService
from aroma_catalog.application.services.favorites_service import FavoritesService
from aroma_catalog.application.services.product_search_service import ProductSearchService
from aroma_catalog.config.settings import settings
from aroma_catalog.infrastructure.catalog.loader import load_products
from aroma_catalog.infrastructure.catalog.models import Product
from aroma_catalog.infrastructure.favorites.store import FavoritesStore, InMemoryFavoritesStore

ANONYMOUS_USER = "anonymous"

# Global service instances (initialized in lifespan)
_catalog_service: CatalogService | None = None
_product_search_service: ProductSearchService | None = None
_favorites_service: FavoritesService | None = None
_api_tokens: Dict[str, str] = {}

_bearer = HTTPBearer(auto_error=False)


def init_services(
    products: Optional[Sequence[Product]] = None,
    favorites_store: Optional[FavoritesStore] = None,
    api_tokens: Optional[Dict[str, str]] = None,
):
    """
    Initialize global service instances.

    Args:
        products: Catalog to serve; loaded from settings.catalog_data_path when None
        favorites_store: Favorites backend; in-memory when None
        api_tokens: Bearer token to user id map; settings.api_tokens when None
    """
    global _catalog_service, _product_search_service, _favorites_service, _api_tokens

    if products is None:
        products = load_products(settings.catalog_data_path)

    _catalog_service = CatalogService(products)
    _product_search_service = ProductSearchService(products)
    _favorites_service = FavoritesService(
        favorites_store or InMemoryFavoritesStore(),
        _catalog_service,
    )
    _api_tokens = dict(settings.api_tokens if api_tokens is None else api_tokens)


def get_catalog_service() -> CatalogService:
    """
    Get catalog service instance.

    Returns:
        CatalogService instance
    """
    if _catalog_service is None:
        raise RuntimeError("Services not initialized. Call init_services() first.")
    return _catalog_service


def get_product_search_service() -> ProductSearchService:
    """
    Get product search service instance.

    Returns:
        ProductSearchService instance
    """
    if _product_search_service is None:
        raise RuntimeError("Services not initialized. Call init_services() first.")
    return _product_search_service


def get_favorites_service() -> FavoritesService:
    if _favorites_service is None:
        raise RuntimeError("Services not initialized. Call init_services() first.")
    return _favorites_service


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> str:
    """
    Resolve the caller's user id from a bearer token.

    Requests without a token share the anonymous favorites list; a token
    that is not configured is rejected.
    """
    if credentials is None:
        return ANONYMOUS_USER

    user_id = _api_tokens.get(credentials.credentials)
    if user_id is None:
        raise HTTPException(
            status_code=401,
            detail="Invalid bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
