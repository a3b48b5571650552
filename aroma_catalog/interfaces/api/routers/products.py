"""Product listing and lookup router."""

from fastapi import APIRouter, Depends

from aroma_catalog.application.errors import CatalogError
from aroma_catalog.application.services.catalog_service import CatalogService
from aroma_catalog.interfaces.api.dependencies import get_catalog_service
from aroma_catalog.interfaces.api.errors import to_http_exception
from aroma_catalog.interfaces.api.schemas.product import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
def list_products(
    catalog: CatalogService = Depends(get_catalog_service),
) -> ProductListResponse:
    """Return every product in catalog order."""
    products = catalog.list_products()
    return ProductListResponse(data=products, count=len(products))


@router.post("", response_model=ProductResponse, status_code=201)
def create_product(
    request: ProductCreateRequest,
    catalog: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """
    Validate a new product.

    The catalog is static, so the product is returned but not stored.
    """
    try:
        product = catalog.build_product(request.as_payload())
    except CatalogError as e:
        raise to_http_exception(e) from e
    return ProductResponse(message="Product created", data=product)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    try:
        product = catalog.get_product(product_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return ProductResponse(message="Product found", data=product)
