"""Unit tests for the favorites store and service."""

import threading

import pytest

from aroma_catalog.application.errors import (
    AlreadyFavoritedError,
    FavoriteNotFoundError,
    ProductNotFoundError,
)
from aroma_catalog.application.services.favorites_service import FavoritesService
from aroma_catalog.infrastructure.favorites.store import InMemoryFavoritesStore


@pytest.fixture
def store():
    return InMemoryFavoritesStore()


@pytest.fixture
def favorites(store, catalog_service):
    return FavoritesService(store, catalog_service)


@pytest.mark.unit
class TestInMemoryFavoritesStore:

    def test_add_keeps_insertion_order(self, store):
        assert store.add("u", "b")
        assert store.add("u", "a")
        assert not store.add("u", "b")

        assert store.get_favorites("u") == ["b", "a"]
        assert store.count("u") == 2

    def test_remove(self, store):
        store.add("u", "a")

        assert store.remove("u", "a")
        assert not store.remove("u", "a")
        assert not store.remove("other", "a")

    def test_toggle(self, store):
        assert store.toggle("u", "a") == ("added", True)
        assert store.is_favorited("u", "a")
        assert store.toggle("u", "a") == ("removed", False)
        assert not store.is_favorited("u", "a")

    def test_clear(self, store):
        store.add("u", "a")
        store.add("u", "b")

        assert store.clear("u") == 2
        assert store.clear("u") == 0
        assert store.get_favorites("u") == []

    def test_users_are_isolated(self, store):
        store.add("alice", "a")

        assert store.get_favorites("bob") == []
        assert not store.is_favorited("bob", "a")

    def test_concurrent_adds(self, store):
        def worker(offset):
            for i in range(100):
                store.add("u", f"p{offset + i}")

        threads = [threading.Thread(target=worker, args=(n * 100,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.count("u") == 400


@pytest.mark.unit
class TestFavoritesService:

    def test_add_unknown_product(self, favorites):
        with pytest.raises(ProductNotFoundError):
            favorites.add("u", "nope")

    def test_add_twice(self, favorites):
        data = favorites.add("u", "vetiver")

        assert data["totalFavorites"] == 1
        assert data["product"] == {
            "id": "vetiver",
            "name": "Vetiver",
            "imageUrl": "/images/vetiver.webp",
        }
        with pytest.raises(AlreadyFavoritedError) as exc:
            favorites.add("u", "vetiver")
        assert exc.value.details == {"productId": "vetiver"}

    def test_remove_not_favorited(self, favorites):
        with pytest.raises(FavoriteNotFoundError):
            favorites.remove("u", "vetiver")

    def test_list_ids_paginated(self, favorites):
        for pid in ["vetiver", "lavender-oil", "peppermint-oil"]:
            favorites.add("u", pid)

        page = favorites.list_favorites("u", page=2, limit=2)

        assert page["items"] == ["peppermint-oil"]
        assert page["meta"]["pagination"] == {
            "page": 2,
            "limit": 2,
            "total": 3,
            "totalPages": 2,
            "hasNext": False,
            "hasPrev": True,
        }

    def test_list_details_skips_missing_products(self, favorites, store):
        store.add("u", "retired-product")
        favorites.add("u", "vetiver")

        page = favorites.list_favorites("u", include_details=True)

        assert [p.id for p in page["items"]] == ["vetiver"]
        assert page["meta"]["stats"]["totalFavorites"] == 1

    def test_remove_many(self, favorites):
        favorites.add("u", "vetiver")
        favorites.add("u", "lavender-oil")

        data = favorites.remove_many("u", ["vetiver", "nope"])

        assert data == {"removedIds": ["vetiver"], "removedCount": 1, "totalFavorites": 1}
