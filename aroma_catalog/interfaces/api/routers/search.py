"""Search router for fuzzy product search and autosuggest."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from aroma_catalog.application.errors import InvalidQueryError
from aroma_catalog.application.services.product_search_service import ProductSearchService
from aroma_catalog.config.logging_config import get_logger
from aroma_catalog.interfaces.api.dependencies import get_product_search_service
from aroma_catalog.interfaces.api.schemas.search import (
    SearchData,
    SearchErrorResponse,
    SearchHit,
    SearchResponse,
    SuggestionData,
    SuggestionResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["search"])


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": SearchErrorResponse}},
)
def search(
    q: Optional[str] = Query(None, max_length=500, description="Search text"),
    category: Optional[str] = Query(None, description="Exact category, or 'all'"),
    collection: Optional[str] = Query(None, description="Collection id, or 'all'"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum results"),
    suggestions: bool = Query(True, description="Attach term suggestions"),
    search_service: ProductSearchService = Depends(get_product_search_service),
):
    """
    Fuzzy search over the catalog.

    Args:
        q: Search text; blank is rejected with 400
        category: Optional category filter
        collection: Optional collection filter
        limit: Result cap
        suggestions: Whether to include suggestions
        search_service: Product search service (injected)

    Returns:
        Ranked products, total after filters, suggestions and stats
    """
    try:
        result = search_service.search(
            q,
            category=category,
            collection=collection,
            limit=limit,
            include_suggestions=suggestions,
        )
    except InvalidQueryError as e:
        logger.info(f"Rejected search: {e.message}")
        body = SearchErrorResponse(error=e.message, query=(q or "").strip())
        return JSONResponse(status_code=400, content=body.model_dump())

    return SearchResponse(
        data=SearchData(
            results=[
                SearchHit(**ranked.product.model_dump(), score=round(ranked.score, 4))
                for ranked in result.results
            ],
            total=result.total,
            query=result.query,
            suggestions=result.suggestions,
            stats=result.stats,
            filters=result.filters,
        )
    )


@router.get("/suggestions", response_model=SuggestionResponse)
def suggestions(
    q: Optional[str] = Query(None, description="Partial input; may be empty"),
    limit: Optional[int] = Query(None, ge=0, description="Maximum suggestions, capped at 20"),
    categories: bool = Query(True, description="Include related categories"),
    search_service: ProductSearchService = Depends(get_product_search_service),
) -> SuggestionResponse:
    """Autosuggest completions for partial input."""
    result = search_service.suggest(q, limit=limit, include_categories=categories)
    return SuggestionResponse(
        data=SuggestionData(
            query=result.query,
            suggestions=result.suggestions,
            related_categories=result.related_categories,
            stats=result.stats,
        )
    )
