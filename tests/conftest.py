"""
Shared test fixtures

A small English catalog so ranking and suggestion expectations stay
readable; API tests wire it into the app through init_services().
"""

import pytest
from fastapi.testclient import TestClient

from aroma_catalog.application.services.catalog_service import CatalogService
from aroma_catalog.application.services.product_search_service import (
    ProductSearchService,
    SearchServiceConfig,
)
from aroma_catalog.infrastructure.catalog.loader import parse_products
from aroma_catalog.infrastructure.favorites.store import InMemoryFavoritesStore

SAMPLE_RECORDS = [
    {
        "name": "Wild Lavender",
        "englishName": "Wild Lavender Oil",
        "description": "Gentle floral oil for evening diffusing.",
        "category": "single-oils",
        "collections": ["floral-collection"],
        "tags": ["relaxing", "floral"],
        "mainBenefits": ["calm mind"],
        "imageUrl": "/images/wild-lavender.webp",
        "retailPrice": 900,
    },
    {
        "name": "Lavender Oil",
        "description": "Classic relaxing oil.",
        "category": "single-oils",
        "collections": ["floral-collection", "serenity-collection"],
        "tags": ["relaxing", "sleep"],
        "mainBenefits": ["restful sleep", "soothing skin"],
        "imageUrl": "/images/lavender.webp",
    },
    {
        "name": "Peppermint Oil",
        "description": "Cooling mint for focus.",
        "category": "single-oils",
        "collections": ["herbal-collection"],
        "tags": ["energizing"],
        "mainBenefits": ["clear breathing"],
        "imageUrl": "/images/peppermint.webp",
    },
    {
        "name": "Deep Blue Blend Oil",
        "description": "Soothing blend for tired muscles after sport.",
        "category": "proprietary-blends",
        "collections": ["deep-blue-collection"],
        "tags": ["soothing", "sport"],
        "mainBenefits": ["muscle comfort"],
        "imageUrl": "/images/deep-blue.webp",
    },
    {
        "name": "Deep Blue Rub",
        "description": "Cream with soothing blend.",
        "category": "skincare",
        "collections": ["deep-blue-collection"],
        "tags": ["soothing"],
        "imageUrl": "/images/deep-blue-rub.webp",
    },
    {
        # no tags, benefits or collections
        "name": "Vetiver",
        "category": "single-oils",
        "imageUrl": "/images/vetiver.webp",
    },
]

POPULAR = ("lavender", "peppermint", "relax", "sleep", "focus")

CATEGORY_KEYWORDS = {
    "single-oils": ["single", "pure oil"],
    "proprietary-blends": ["blend", "mix"],
    "deep-blue": ["soothing", "deep blue", "sport"],
}

API_TOKENS = {"token-alice": "alice", "token-bob": "bob"}


@pytest.fixture
def sample_products():
    return parse_products(SAMPLE_RECORDS)


@pytest.fixture
def search_config():
    return SearchServiceConfig(
        popular_searches=POPULAR,
        category_keywords=CATEGORY_KEYWORDS,
    )


@pytest.fixture
def search_service(sample_products, search_config):
    return ProductSearchService(sample_products, config=search_config)


@pytest.fixture
def catalog_service(sample_products):
    return CatalogService(
        sample_products,
        category_labels={
            "single-oils": "Single Oils",
            "proprietary-blends": "Blends",
            "skincare": "Skincare",
        },
        collection_labels={
            "floral-collection": "Floral",
            "deep-blue-collection": "Deep Blue",
            "citrus-collection": "Citrus",
        },
    )


@pytest.fixture
def client(sample_products):
    """API client over the sample catalog with fresh favorites."""
    from app.main import app
    from aroma_catalog.interfaces.api.dependencies import init_services

    init_services(
        products=sample_products,
        favorites_store=InMemoryFavoritesStore(),
        api_tokens=API_TOKENS,
    )
    return TestClient(app)


@pytest.fixture
def alice_headers():
    return {"Authorization": "Bearer token-alice"}


@pytest.fixture
def bob_headers():
    return {"Authorization": "Bearer token-bob"}
