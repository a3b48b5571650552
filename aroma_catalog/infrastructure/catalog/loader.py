"""Load the static product catalog from JSON."""

import json
import os
import re
import time
from typing import Any, Iterable, List

from pydantic import ValidationError

from aroma_catalog.application.errors import CatalogDataError
from aroma_catalog.config.logging_config import get_logger
from aroma_catalog.infrastructure.catalog.models import Product

logger = get_logger(__name__)

# Anything that is not ascii alnum or a CJK ideograph becomes a separator
_ID_SEPARATOR = re.compile(r"[^a-z0-9\u4e00-\u9fff]+")


def slugify_product_id(name: str) -> str:
    """
    Derive a stable product id from its display name.

    Args:
        name: Product display name

    Returns:
        Lowercase id with '-' separators, e.g. "Wild Orange Oil" -> "wild-orange-oil"
    """
    return _ID_SEPARATOR.sub("-", name.lower()).strip("-")


def parse_products(records: Iterable[Any]) -> List[Product]:
    """
    Validate raw records into products with unique ids.

    Raises:
        CatalogDataError: A record is invalid or two records share an id
    """
    products: List[Product] = []
    seen = {}

    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise CatalogDataError(f"Record {position} is not an object")
        try:
            product = Product.model_validate(record)
        except ValidationError as e:
            raise CatalogDataError(
                f"Record {position} is invalid: {e.errors()[0].get('msg')}",
                details={"position": position},
            ) from e

        if not product.id:
            product.id = slugify_product_id(product.name)
        if not product.id:
            raise CatalogDataError(f"Record {position} has no usable id")

        if product.id in seen:
            raise CatalogDataError(
                f"Duplicate product id '{product.id}' at records {seen[product.id]} and {position}",
                details={"id": product.id},
            )
        seen[product.id] = position
        products.append(product)

    return products


def load_products(path: str) -> List[Product]:
    """
    Load the product catalog from a JSON file.

    The file holds either an array of products or an object with a
    "products" array.

    Args:
        path: Path to the catalog JSON file

    Returns:
        Products in file order

    Raises:
        CatalogDataError: File missing, unreadable or malformed
    """
    if not os.path.exists(path):
        raise CatalogDataError(f"Catalog file not found: {path}")

    logger.info("Loading catalog from path: %s", path)
    start_time = time.time()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogDataError(f"Catalog file is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("products")
    if not isinstance(data, list):
        raise CatalogDataError("Catalog must be a JSON array of products")

    products = parse_products(data)

    logger.info(
        "Catalog loaded in %.4f seconds. Total products: %d",
        time.time() - start_time,
        len(products)
    )
    return products
