"""Unit tests for catalog loading and id derivation."""

import json
from pathlib import Path

import pytest

from aroma_catalog.application.errors import CatalogDataError
from aroma_catalog.infrastructure.catalog.loader import (
    load_products,
    parse_products,
    slugify_product_id,
)


def write_catalog(tmp_path, data):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.mark.unit
class TestSlugify:

    @pytest.mark.parametrize("name,expected", [
        ("Wild Orange Oil", "wild-orange-oil"),
        ("  On Guard® Blend!  ", "on-guard-blend"),
        ("薰衣草 Lavender", "薰衣草-lavender"),
        ("Deep--Blue", "deep-blue"),
    ])
    def test_slugify(self, name, expected):
        assert slugify_product_id(name) == expected


@pytest.mark.unit
class TestLoadProducts:

    def test_loads_array_in_file_order(self, tmp_path):
        path = write_catalog(tmp_path, [
            {"id": "b", "name": "B"},
            {"id": "a", "name": "A"},
        ])

        assert [p.id for p in load_products(path)] == ["b", "a"]

    def test_loads_object_with_products_key(self, tmp_path):
        path = write_catalog(tmp_path, {"products": [{"name": "Rose Oil"}]})

        assert load_products(path)[0].id == "rose-oil"

    def test_missing_optional_fields_become_empty(self, tmp_path):
        path = write_catalog(tmp_path, [
            {"name": "Vetiver", "tags": None, "englishName": None},
        ])

        product = load_products(path)[0]

        assert product.tags == []
        assert product.collections == []
        assert product.main_benefits == []
        assert product.english_name == ""

    def test_camel_case_fields_are_read(self):
        product = parse_products([
            {"name": "Lemon", "englishName": "Lemon Oil", "mainBenefits": ["uplifting"]},
        ])[0]

        assert product.english_name == "Lemon Oil"
        assert product.main_benefits == ["uplifting"]

    def test_duplicate_ids_are_rejected(self, tmp_path):
        path = write_catalog(tmp_path, [
            {"name": "Rose Oil"},
            {"id": "rose-oil", "name": "Another Rose"},
        ])

        with pytest.raises(CatalogDataError, match="Duplicate product id 'rose-oil'"):
            load_products(path)

    def test_record_without_name_is_rejected(self):
        with pytest.raises(CatalogDataError):
            parse_products([{"id": "nameless"}])

    def test_non_object_record_is_rejected(self):
        with pytest.raises(CatalogDataError):
            parse_products(["not a product"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogDataError, match="not found"):
            load_products(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogDataError):
            load_products(str(path))

    def test_bundled_catalog_loads(self):
        products = load_products(str(Path(__file__).parent.parent / "data" / "products.json"))

        assert len(products) > 0
        assert len({p.id for p in products}) == len(products)
