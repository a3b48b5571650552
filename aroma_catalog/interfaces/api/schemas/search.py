"""Search and suggestion response schemas."""

from typing import Any, Dict, List
from pydantic import BaseModel, Field

from aroma_catalog.infrastructure.catalog.models import Product
from aroma_catalog.interfaces.api.schemas.common import CamelModel


class SearchHit(Product):
    """A product with its relevance score (higher is better)."""
    score: float


class SearchData(CamelModel):
    """Ranked search results."""
    results: List[SearchHit] = Field(default_factory=list)
    total: int = 0
    query: str = ""
    suggestions: List[str] = Field(default_factory=list)
    stats: Dict[str, int] = Field(default_factory=dict)
    filters: Dict[str, str] = Field(default_factory=dict)


class SearchResponse(BaseModel):
    """Search response schema."""
    success: bool = True
    data: SearchData


class SearchErrorResponse(BaseModel):
    """Rejected search: always carries an empty result set."""
    success: bool = False
    error: str
    results: List[SearchHit] = Field(default_factory=list)
    total: int = 0
    query: str = ""
    suggestions: List[str] = Field(default_factory=list)


class SuggestionData(CamelModel):
    """Autosuggest entries and related categories."""
    query: str = ""
    suggestions: List[str] = Field(default_factory=list)
    related_categories: List[str] = Field(default_factory=list)
    stats: Dict[str, Any] = Field(default_factory=dict)


class SuggestionResponse(BaseModel):
    """Suggestion response schema."""
    success: bool = True
    data: SuggestionData
