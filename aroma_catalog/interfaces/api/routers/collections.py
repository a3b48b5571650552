"""Product collection router."""

from fastapi import APIRouter, Depends, Query

from aroma_catalog.application.errors import CatalogError
from aroma_catalog.application.services.catalog_service import CatalogService
from aroma_catalog.interfaces.api.dependencies import get_catalog_service
from aroma_catalog.interfaces.api.errors import to_http_exception
from aroma_catalog.interfaces.api.schemas.category import (
    CollectionDetail,
    CollectionDetailResponse,
    CollectionResponse,
    CollectionsResponse,
)
from aroma_catalog.utils.pagination import paginate

router = APIRouter(prefix="/collections", tags=["collections"])


@router.get("", response_model=CollectionsResponse, response_model_exclude_none=True)
def list_collections(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    include_count: bool = Query(False, alias="includeCount"),
    include_products: bool = Query(False, alias="includeProducts"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> CollectionsResponse:
    """List collections present in the catalog, paginated."""
    collections = catalog.list_collections(
        include_count=include_count,
        include_products=include_products,
    )
    items, pagination = paginate(collections, page, limit)

    with_collections = sum(1 for p in catalog.products if p.collections)
    return CollectionsResponse(
        message="Collections loaded",
        data=[CollectionResponse(**c) for c in items],
        meta={
            **pagination,
            "stats": {
                "totalCollections": len(collections),
                "totalProductsWithCollections": with_collections,
                "totalProducts": len(catalog),
            },
        },
    )


@router.get(
    "/{collection_id}",
    response_model=CollectionDetailResponse,
    response_model_exclude_none=True,
)
def get_collection(
    collection_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    include_products: bool = Query(True, alias="includeProducts"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> CollectionDetailResponse:
    """One collection with its per-category counts and, optionally, a page of products."""
    try:
        collection = catalog.get_collection(collection_id)
    except CatalogError as e:
        raise to_http_exception(e) from e

    products = collection.pop("products")
    if not include_products:
        return CollectionDetailResponse(
            message="Collection loaded",
            data=CollectionDetail(**collection),
        )

    items, pagination = paginate(products, page, limit)
    return CollectionDetailResponse(
        message="Collection loaded",
        data=CollectionDetail(**collection, products=items),
        meta=pagination,
    )
