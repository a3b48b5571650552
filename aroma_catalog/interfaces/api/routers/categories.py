from fastapi import APIRouter, Depends, Query

from aroma_catalog.application.services.catalog_service import CatalogService
from aroma_catalog.interfaces.api.dependencies import get_catalog_service
from aroma_catalog.interfaces.api.schemas.category import CategoriesResponse, CategoryResponse

router = APIRouter(prefix="/products/categories", tags=["categories"])


@router.get("", response_model=CategoriesResponse, response_model_exclude_none=True)
def list_categories(
    include_count: bool = Query(False, alias="includeCount"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    categories = catalog.list_categories(include_count=include_count)
    return CategoriesResponse(
        message="Categories loaded",
        data=[CategoryResponse(**c) for c in categories],
        meta={
            "totalCategories": len(categories),
            "totalProducts": len(catalog),
        },
    )
