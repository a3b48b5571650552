"""Read-only catalog queries: products, categories and collections."""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from aroma_catalog.application.errors import (
    CollectionNotFoundError,
    DuplicateProductError,
    InvalidProductError,
    ProductNotFoundError,
)
from aroma_catalog.config.logging_config import get_logger
from aroma_catalog.config.settings import settings
from aroma_catalog.infrastructure.catalog.loader import slugify_product_id
from aroma_catalog.infrastructure.catalog.models import Product

logger = get_logger(__name__)

REQUIRED_PRODUCT_FIELDS = ("name", "category", "imageUrl")


class CatalogService:
    """Lookups over the static product collection."""

    def __init__(
        self,
        products: Sequence[Product],
        category_labels: Optional[Mapping[str, str]] = None,
        collection_labels: Optional[Mapping[str, str]] = None,
    ):
        self.products: List[Product] = list(products)
        self._by_id: Dict[str, Product] = {p.id: p for p in self.products}
        self.category_labels = dict(
            settings.category_labels if category_labels is None else category_labels
        )
        self.collection_labels = dict(
            settings.collection_labels if collection_labels is None else collection_labels
        )

    def __len__(self) -> int:
        return len(self.products)

    def list_products(self) -> List[Product]:
        return list(self.products)

    def find_product(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def get_product(self, product_id: str) -> Product:
        """
        Get a product by id.

        Raises:
            ProductNotFoundError: Unknown id
        """
        product = self._by_id.get(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product not found: {product_id}")
        return product

    def list_categories(self, include_count: bool = False) -> List[Dict[str, Any]]:
        """Unique categories present in the catalog, sorted by display name."""
        counts: Dict[str, int] = {}
        for product in self.products:
            counts[product.category] = counts.get(product.category, 0) + 1

        categories = []
        for category, count in counts.items():
            data: Dict[str, Any] = {
                "id": category,
                "name": self.category_labels.get(category, category),
                "slug": category,
            }
            if include_count:
                data["count"] = count
            categories.append(data)

        categories.sort(key=lambda c: c["name"])
        return categories

    def products_in_collection(self, collection_id: str) -> List[Product]:
        return [p for p in self.products if collection_id in p.collections]

    def list_collections(
        self,
        include_count: bool = False,
        include_products: bool = False,
    ) -> List[Dict[str, Any]]:
        """Unique collections present in the catalog, sorted by display name."""
        members: Dict[str, List[Product]] = {}
        for product in self.products:
            for collection_id in product.collections:
                members.setdefault(collection_id, []).append(product)

        collections = []
        for collection_id, products in members.items():
            data: Dict[str, Any] = {
                "id": collection_id,
                "name": self.collection_labels.get(collection_id, collection_id),
                "slug": collection_id,
            }
            if include_count:
                data["productCount"] = len(products)
            if include_products:
                data["products"] = [self._listing_fields(p) for p in products]
            collections.append(data)

        collections.sort(key=lambda c: c["name"])
        return collections

    def get_collection(self, collection_id: str) -> Dict[str, Any]:
        """
        Describe one collection and its member products.

        Raises:
            CollectionNotFoundError: No label and no member products
        """
        products = self.products_in_collection(collection_id)
        label = self.collection_labels.get(collection_id)
        if label is None and not products:
            raise CollectionNotFoundError(f"Collection not found: {collection_id}")

        by_category: Dict[str, int] = {}
        for product in products:
            key = product.category or "others"
            by_category[key] = by_category.get(key, 0) + 1

        return {
            "id": collection_id,
            "name": label or collection_id,
            "slug": collection_id,
            "productCount": len(products),
            "categories": [
                {"id": category, "productCount": count}
                for category, count in by_category.items()
            ],
            "products": products,
        }

    def build_product(self, payload: Mapping[str, Any]) -> Product:
        """
        Validate a new product payload without storing it.

        The catalog is read-only at runtime, so the product is only echoed
        back to the caller.

        Raises:
            InvalidProductError: Required field missing or payload invalid
            DuplicateProductError: Derived id already in the catalog
        """
        for field_name in REQUIRED_PRODUCT_FIELDS:
            if not payload.get(field_name):
                raise InvalidProductError(
                    f"{field_name} is required",
                    details={"field": field_name},
                )

        product_id = slugify_product_id(str(payload["name"]))
        if product_id in self._by_id:
            raise DuplicateProductError(
                "A product with this name already exists",
                details={"id": product_id},
            )

        try:
            product = Product.model_validate({**payload, "id": product_id})
        except ValidationError as e:
            raise InvalidProductError(str(e.errors()[0].get("msg"))) from e

        logger.info("Validated new product: %s", product.id)
        return product

    @staticmethod
    def _listing_fields(product: Product) -> Dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "englishName": product.english_name,
            "imageUrl": product.image_url,
            "category": product.category,
            "volume": product.volume,
            "retailPrice": product.retail_price,
            "memberPrice": product.member_price,
        }
