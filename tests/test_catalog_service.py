"""Unit tests for catalog lookups."""

import pytest

from aroma_catalog.application.errors import (
    CollectionNotFoundError,
    DuplicateProductError,
    InvalidProductError,
    ProductNotFoundError,
)


@pytest.mark.unit
class TestProducts:

    def test_get_product(self, catalog_service):
        assert catalog_service.get_product("vetiver").name == "Vetiver"

    def test_unknown_product(self, catalog_service):
        with pytest.raises(ProductNotFoundError):
            catalog_service.get_product("nope")
        assert catalog_service.find_product("nope") is None

    def test_build_product_derives_id(self, catalog_service):
        product = catalog_service.build_product({
            "name": "Rose Absolute",
            "category": "single-oils",
            "imageUrl": "/images/rose.webp",
        })

        assert product.id == "rose-absolute"
        # not stored
        assert catalog_service.find_product("rose-absolute") is None

    @pytest.mark.parametrize("missing", ["name", "category", "imageUrl"])
    def test_build_product_requires_fields(self, catalog_service, missing):
        payload = {"name": "Rose", "category": "single-oils", "imageUrl": "/rose.webp"}
        payload[missing] = ""

        with pytest.raises(InvalidProductError) as exc:
            catalog_service.build_product(payload)
        assert exc.value.details == {"field": missing}

    def test_build_product_rejects_existing_name(self, catalog_service):
        with pytest.raises(DuplicateProductError):
            catalog_service.build_product({
                "name": "Lavender Oil",
                "category": "single-oils",
                "imageUrl": "/x.webp",
            })


@pytest.mark.unit
class TestCategories:

    def test_categories_sorted_by_label(self, catalog_service):
        categories = catalog_service.list_categories()

        assert [c["name"] for c in categories] == ["Blends", "Single Oils", "Skincare"]
        assert "count" not in categories[0]

    def test_categories_with_counts(self, catalog_service):
        counts = {c["id"]: c["count"] for c in catalog_service.list_categories(include_count=True)}

        assert counts == {"single-oils": 4, "proprietary-blends": 1, "skincare": 1}


@pytest.mark.unit
class TestCollections:

    def test_list_collections(self, catalog_service):
        collections = catalog_service.list_collections(include_count=True)
        by_id = {c["id"]: c for c in collections}

        assert by_id["deep-blue-collection"]["name"] == "Deep Blue"
        assert by_id["deep-blue-collection"]["productCount"] == 2
        # unlabelled collections fall back to their id
        assert by_id["herbal-collection"]["name"] == "herbal-collection"

    def test_list_collections_with_products(self, catalog_service):
        collections = catalog_service.list_collections(include_products=True)
        floral = next(c for c in collections if c["id"] == "floral-collection")

        assert [p["id"] for p in floral["products"]] == ["wild-lavender", "lavender-oil"]
        assert floral["products"][0]["retailPrice"] == 900

    def test_get_collection(self, catalog_service):
        collection = catalog_service.get_collection("deep-blue-collection")

        assert collection["productCount"] == 2
        assert collection["categories"] == [
            {"id": "proprietary-blends", "productCount": 1},
            {"id": "skincare", "productCount": 1},
        ]

    def test_labelled_collection_without_products(self, catalog_service):
        collection = catalog_service.get_collection("citrus-collection")

        assert collection["name"] == "Citrus"
        assert collection["productCount"] == 0

    def test_unknown_collection(self, catalog_service):
        with pytest.raises(CollectionNotFoundError):
            catalog_service.get_collection("nope-collection")
