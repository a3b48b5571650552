"""Per-user favorite product storage."""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple


class FavoritesStore(ABC):
    """Storage interface for favorite product ids keyed by user id."""

    @abstractmethod
    def get_favorites(self, user_id: str) -> List[str]:
        """Favorite product ids in the order they were added."""

    @abstractmethod
    def is_favorited(self, user_id: str, product_id: str) -> bool:
        ...

    @abstractmethod
    def add(self, user_id: str, product_id: str) -> bool:
        """Add a favorite; False when it was already present."""

    @abstractmethod
    def remove(self, user_id: str, product_id: str) -> bool:
        """Remove a favorite; False when it was not present."""

    @abstractmethod
    def clear(self, user_id: str) -> int:
        """Remove all favorites and return how many were removed."""

    def toggle(self, user_id: str, product_id: str) -> Tuple[str, bool]:
        """
        Flip the favorite state of a product.

        Returns:
            (action, is_favorited) where action is "added" or "removed"
        """
        if self.remove(user_id, product_id):
            return "removed", False
        self.add(user_id, product_id)
        return "added", True

    def count(self, user_id: str) -> int:
        return len(self.get_favorites(user_id))


class InMemoryFavoritesStore(FavoritesStore):
    """Process-local store; contents are lost on restart."""

    def __init__(self):
        # dict values keep insertion order for listing
        self._favorites: Dict[str, Dict[str, None]] = {}
        self._lock = threading.Lock()

    def get_favorites(self, user_id: str) -> List[str]:
        with self._lock:
            return list(self._favorites.get(user_id, {}))

    def is_favorited(self, user_id: str, product_id: str) -> bool:
        with self._lock:
            return product_id in self._favorites.get(user_id, {})

    def add(self, user_id: str, product_id: str) -> bool:
        with self._lock:
            favorites = self._favorites.setdefault(user_id, {})
            if product_id in favorites:
                return False
            favorites[product_id] = None
            return True

    def remove(self, user_id: str, product_id: str) -> bool:
        with self._lock:
            favorites = self._favorites.get(user_id)
            if not favorites or product_id not in favorites:
                return False
            del favorites[product_id]
            return True

    def clear(self, user_id: str) -> int:
        with self._lock:
            return len(self._favorites.pop(user_id, {}))

    def toggle(self, user_id: str, product_id: str) -> Tuple[str, bool]:
        with self._lock:
            favorites = self._favorites.setdefault(user_id, {})
            if product_id in favorites:
                del favorites[product_id]
                return "removed", False
            favorites[product_id] = None
            return "added", True
