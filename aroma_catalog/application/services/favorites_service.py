"""Favorites operations over an injected store."""

from typing import Any, Dict, Iterable, List

from aroma_catalog.application.errors import (
    AlreadyFavoritedError,
    FavoriteNotFoundError,
)
from aroma_catalog.application.services.catalog_service import CatalogService
from aroma_catalog.config.logging_config import get_logger
from aroma_catalog.infrastructure.favorites.store import FavoritesStore
from aroma_catalog.utils.pagination import paginate

logger = get_logger(__name__)


class FavoritesService:
    """Favorite products per user, validated against the catalog."""

    def __init__(self, store: FavoritesStore, catalog: CatalogService):
        self.store = store
        self.catalog = catalog

    def list_favorites(
        self,
        user_id: str,
        page: int = 1,
        limit: int = 20,
        include_details: bool = False,
    ) -> Dict[str, Any]:
        """
        Page through a user's favorites.

        Without details the page holds product ids; with details it holds
        products, skipping ids no longer in the catalog.
        """
        favorite_ids = self.store.get_favorites(user_id)

        if not include_details:
            items, pagination = paginate(favorite_ids, page, limit)
            return {"items": items, "meta": {"pagination": pagination}}

        products = [
            product
            for product in (self.catalog.find_product(pid) for pid in favorite_ids)
            if product is not None
        ]
        items, pagination = paginate(products, page, limit)
        return {
            "items": items,
            "meta": {
                "pagination": pagination,
                "stats": {
                    "totalFavorites": len(products),
                    "totalAvailableProducts": len(self.catalog),
                },
            },
        }

    def add(self, user_id: str, product_id: str) -> Dict[str, Any]:
        """
        Raises:
            ProductNotFoundError: Unknown product
            AlreadyFavoritedError: Product already favorited
        """
        product = self.catalog.get_product(product_id)
        if not self.store.add(user_id, product_id):
            raise AlreadyFavoritedError(
                "Product is already in favorites",
                details={"productId": product_id},
            )
        logger.info("User %s favorited %s", user_id, product_id)
        return {
            "productId": product_id,
            "product": product.summary(),
            "totalFavorites": self.store.count(user_id),
        }

    def status(self, user_id: str, product_id: str) -> Dict[str, Any]:
        product = self.catalog.get_product(product_id)
        return {
            "productId": product_id,
            "isFavorited": self.store.is_favorited(user_id, product_id),
            "product": product.summary(),
            "favoriteCount": self.store.count(user_id),
        }

    def toggle(self, user_id: str, product_id: str) -> Dict[str, Any]:
        product = self.catalog.get_product(product_id)
        action, is_favorited = self.store.toggle(user_id, product_id)
        return {
            "productId": product_id,
            "action": action,
            "isFavorited": is_favorited,
            "product": product.summary(),
            "totalFavorites": self.store.count(user_id),
        }

    def remove(self, user_id: str, product_id: str) -> Dict[str, Any]:
        """
        Raises:
            FavoriteNotFoundError: Product not in favorites
        """
        if not self.store.remove(user_id, product_id):
            raise FavoriteNotFoundError("Product is not in favorites")

        product = self.catalog.find_product(product_id)
        return {
            "productId": product_id,
            "product": product.summary() if product else None,
            "totalFavorites": self.store.count(user_id),
        }

    def remove_many(self, user_id: str, product_ids: Iterable[str]) -> Dict[str, Any]:
        removed: List[str] = [
            pid for pid in product_ids if self.store.remove(user_id, pid)
        ]
        return {
            "removedIds": removed,
            "removedCount": len(removed),
            "totalFavorites": self.store.count(user_id),
        }

    def clear(self, user_id: str) -> Dict[str, int]:
        removed = self.store.clear(user_id)
        logger.info("Cleared %d favorites for user %s", removed, user_id)
        return {"removedCount": removed, "totalFavorites": 0}
