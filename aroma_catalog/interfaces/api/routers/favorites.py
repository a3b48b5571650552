"""Router for per-user favorite products."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from aroma_catalog.application.errors import CatalogError
from aroma_catalog.application.services.favorites_service import FavoritesService
from aroma_catalog.interfaces.api.dependencies import (
    get_current_user_id,
    get_favorites_service,
)
from aroma_catalog.interfaces.api.errors import to_http_exception
from aroma_catalog.interfaces.api.schemas.favorite import (
    FavoriteRequest,
    FavoritesRemoveRequest,
    FavoritesResponse,
)

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=FavoritesResponse)
def list_favorites(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=50),
    include_details: bool = Query(False, alias="includeDetails"),
    user_id: str = Depends(get_current_user_id),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> FavoritesResponse:
    """List favorite product ids, or full products with includeDetails=true."""
    page_data = favorites.list_favorites(
        user_id, page=page, limit=limit, include_details=include_details
    )
    return FavoritesResponse(
        message="Favorites loaded",
        data=page_data["items"],
        meta=page_data["meta"],
    )


@router.post("", response_model=FavoritesResponse)
def add_favorite(
    request: FavoriteRequest,
    user_id: str = Depends(get_current_user_id),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> FavoritesResponse:
    if not request.product_id:
        raise HTTPException(status_code=400, detail="productId is required")
    try:
        data = favorites.add(user_id, request.product_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return FavoritesResponse(message="Product added to favorites", data=data)


@router.delete("", response_model=FavoritesResponse)
def remove_favorites(
    clear_all: bool = Query(False, alias="clearAll"),
    request: Optional[FavoritesRemoveRequest] = Body(None),
    user_id: str = Depends(get_current_user_id),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> FavoritesResponse:
    """Remove the listed products, or everything with clearAll=true."""
    if clear_all:
        return FavoritesResponse(
            message="All favorites cleared",
            data=favorites.clear(user_id),
        )

    if request is None or not request.product_ids:
        raise HTTPException(status_code=400, detail="productIds must be a non-empty list")

    data = favorites.remove_many(user_id, request.product_ids)
    return FavoritesResponse(
        message=f"Removed {data['removedCount']} favorites",
        data=data,
    )


@router.get("/{product_id}", response_model=FavoritesResponse)
def favorite_status(
    product_id: str,
    user_id: str = Depends(get_current_user_id),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> FavoritesResponse:
    try:
        data = favorites.status(user_id, product_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return FavoritesResponse(message="Favorite status loaded", data=data)


@router.put("/{product_id}", response_model=FavoritesResponse)
def toggle_favorite(
    product_id: str,
    user_id: str = Depends(get_current_user_id),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> FavoritesResponse:
    try:
        data = favorites.toggle(user_id, product_id)
    except CatalogError as e:
        raise to_http_exception(e) from e

    verb = "added to" if data["action"] == "added" else "removed from"
    return FavoritesResponse(message=f"Product {verb} favorites", data=data)


@router.delete("/{product_id}", response_model=FavoritesResponse)
def remove_favorite(
    product_id: str,
    user_id: str = Depends(get_current_user_id),
    favorites: FavoritesService = Depends(get_favorites_service),
) -> FavoritesResponse:
    try:
        data = favorites.remove(user_id, product_id)
    except CatalogError as e:
        raise to_http_exception(e) from e
    return FavoritesResponse(message="Product removed from favorites", data=data)
