"""Category and collection schemas."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from aroma_catalog.infrastructure.catalog.models import Product
from aroma_catalog.interfaces.api.schemas.common import CamelModel


class CategoryResponse(BaseModel):
    """Category response schema."""
    id: str
    name: str
    slug: str
    count: Optional[int] = None


class CategoriesResponse(BaseModel):
    success: bool = True
    message: str
    data: List[CategoryResponse]
    meta: Dict[str, int] = Field(default_factory=dict)


class CollectionResponse(CamelModel):
    """Collection summary schema."""
    id: str
    name: str
    slug: str
    product_count: Optional[int] = None
    products: Optional[List[Dict[str, Any]]] = None


class CollectionsResponse(BaseModel):
    success: bool = True
    message: str
    data: List[CollectionResponse]
    meta: Dict[str, Any] = Field(default_factory=dict)


class CollectionCategoryCount(CamelModel):
    id: str
    product_count: int


class CollectionDetail(CamelModel):
    """One collection with its per-category breakdown."""
    id: str
    name: str
    slug: str
    product_count: int
    categories: List[CollectionCategoryCount] = Field(default_factory=list)
    products: Optional[List[Product]] = None


class CollectionDetailResponse(BaseModel):
    success: bool = True
    message: str
    data: CollectionDetail
    meta: Optional[Dict[str, Any]] = None
