"""Favorites schemas."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from aroma_catalog.interfaces.api.schemas.common import CamelModel


class FavoriteRequest(CamelModel):
    """Add one product to favorites."""
    product_id: Optional[str] = None


class FavoritesRemoveRequest(CamelModel):
    """Remove several products from favorites."""
    product_ids: Optional[List[str]] = None


class FavoritesResponse(BaseModel):
    """Favorites envelope; data shape depends on the operation."""
    success: bool = True
    message: str
    data: Any = None
    meta: Optional[Dict[str, Any]] = Field(default=None)
