"""Product search and autosuggest over the in-memory catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from aroma_catalog.application.errors import InvalidQueryError
from aroma_catalog.application.search.fuzzy_index import FieldWeight, FuzzyIndex
from aroma_catalog.config.logging_config import get_logger
from aroma_catalog.config.settings import Settings, settings
from aroma_catalog.infrastructure.catalog.models import Product

logger = get_logger(__name__)

ALL = "all"


@dataclass(frozen=True)
class SearchServiceConfig:
    field_weights: Tuple[FieldWeight, ...] = (
        FieldWeight("name", 3.0),
        FieldWeight("english_name", 2.0),
        FieldWeight("tags", 1.5),
        FieldWeight("main_benefits", 1.2),
        FieldWeight("collections", 1.0),
        FieldWeight("description", 1.0),
    )
    threshold: float = 0.6
    distance: int = 100
    default_limit: int = 20
    search_suggestion_limit: int = 5
    search_suggestion_min_length: int = 2
    suggest_default_limit: int = 8
    suggest_max_limit: int = 20
    popular_searches: Tuple[str, ...] = ()
    category_keywords: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, source: Settings = settings) -> "SearchServiceConfig":
        return cls(
            field_weights=tuple(
                FieldWeight(name, weight)
                for name, weight in source.search_field_weights.items()
            ),
            threshold=source.search_threshold,
            distance=source.search_distance,
            default_limit=source.search_default_limit,
            search_suggestion_limit=source.search_suggestion_limit,
            search_suggestion_min_length=source.search_suggestion_min_length,
            suggest_default_limit=source.suggest_default_limit,
            suggest_max_limit=source.suggest_max_limit,
            popular_searches=tuple(source.popular_searches),
            category_keywords=dict(source.category_keywords),
        )


@dataclass
class RankedProduct:
    product: Product
    score: float


@dataclass
class SearchResult:
    query: str
    results: List[RankedProduct]
    total: int
    suggestions: List[str]
    stats: Dict[str, int]
    filters: Dict[str, str]


@dataclass
class SuggestionResult:
    query: str
    suggestions: List[str]
    related_categories: List[str]
    stats: Dict[str, Any]


def _is_filter_active(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


class ProductSearchService:
    """Fuzzy product search and autosuggest.

    The index is built once from the product sequence and never mutated, so
    a single instance can serve concurrent requests.
    """

    def __init__(
        self,
        products: Sequence[Product],
        config: SearchServiceConfig | None = None,
    ):
        self.config = config or SearchServiceConfig.from_settings()
        self.products: Tuple[Product, ...] = tuple(products)

        self.index: FuzzyIndex[Product] = FuzzyIndex(
            self.config.field_weights,
            threshold=self.config.threshold,
            distance=self.config.distance,
        )
        self.index.index(self.products)

        logger.info(f"ProductSearchService initialized: {len(self.index)} products indexed")

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(
        self,
        query: Optional[str],
        *,
        category: Optional[str] = None,
        collection: Optional[str] = None,
        limit: Optional[int] = None,
        include_suggestions: bool = True,
    ) -> SearchResult:
        """
        Rank products against a query, then apply facet filters and the cap.

        Args:
            query: Search text; trimmed before use
            category: Exact category to keep; None or "all" disables it
            collection: Collection the product must belong to; None or "all" disables it
            limit: Maximum results returned (default from config)
            include_suggestions: Attach term suggestions for the query

        Returns:
            SearchResult with ranked products and statistics

        Raises:
            InvalidQueryError: Query is missing or blank
        """
        term = (query or "").strip()
        if not term:
            raise InvalidQueryError("Search query must not be empty")

        cap = self.config.default_limit if limit is None else max(0, limit)

        matches = self.index.query(term)
        ranked = [RankedProduct(m.item, m.score) for m in matches]

        if _is_filter_active(category):
            ranked = [r for r in ranked if r.product.category == category]

        if _is_filter_active(collection):
            ranked = [r for r in ranked if collection in r.product.collections]

        limited = ranked[:cap]
        suggestions = self.search_suggestions(term) if include_suggestions else []

        return SearchResult(
            query=term,
            results=limited,
            total=len(ranked),
            suggestions=suggestions,
            stats={
                "queryLength": len(term),
                "originalResults": len(matches),
                "filteredResults": len(ranked),
                "returnedResults": len(limited),
            },
            filters={
                "category": category or ALL,
                "collection": collection or ALL,
            },
        )

    def search_suggestions(self, query: str) -> List[str]:
        """Catalog terms containing the query, in catalog order."""
        if len(query) < self.config.search_suggestion_min_length:
            return []

        needle = query.casefold()
        found: Dict[str, None] = {}
        for product in self.products:
            for term in self._product_terms(product):
                if needle in term.casefold():
                    found.setdefault(term)

        return list(found)[: self.config.search_suggestion_limit]

    # ------------------------------------------------------------------
    # Autosuggest
    # ------------------------------------------------------------------

    def suggest(
        self,
        query: Optional[str],
        *,
        limit: Optional[int] = None,
        include_categories: bool = True,
    ) -> SuggestionResult:
        """
        Build an autosuggest list for partial input.

        Never raises: blank input yields the popular terms, anything else
        yields whatever candidates contain it.
        """
        term = (query or "").strip()
        suggestions = self.suggestions(term, limit)
        related = self.related_categories(term) if include_categories else []

        return SuggestionResult(
            query=term,
            suggestions=suggestions,
            related_categories=related,
            stats={
                "queryLength": len(term),
                "suggestionsCount": len(suggestions),
                "relatedCategoriesCount": len(related),
                "isPopularSearch": term in self.config.popular_searches,
            },
        )

    def suggestions(self, query: str, limit: Optional[int] = None) -> List[str]:
        """Candidate completions, prefix matches first, then shortest first."""
        cap = self._suggest_cap(limit)
        if not query:
            return list(self.config.popular_searches[:cap])

        needle = query.casefold()
        # dict keeps insertion order and deduplicates
        candidates: Dict[str, None] = {}

        for product in self.products:
            for name in (product.name, product.english_name):
                if name and needle in name.casefold():
                    candidates.setdefault(name)

        for product in self.products:
            for phrase in (*product.tags, *product.main_benefits):
                if phrase and needle in phrase.casefold():
                    candidates.setdefault(phrase)

        for keywords in self.config.category_keywords.values():
            for keyword in keywords:
                if self._related(needle, keyword):
                    candidates.setdefault(keyword)

        if len(candidates) < cap:
            for popular in self.config.popular_searches:
                if needle in popular.casefold():
                    candidates.setdefault(popular)

        ordered = sorted(
            candidates,
            key=lambda c: (not c.casefold().startswith(needle), len(c)),
        )
        return ordered[:cap]

    def related_categories(self, query: str) -> List[str]:
        """Category keys whose keywords relate to the query; blank input relates to all."""
        needle = (query or "").strip().casefold()
        return [
            category
            for category, keywords in self.config.category_keywords.items()
            if any(self._related(needle, keyword) for keyword in keywords)
        ]

    def _suggest_cap(self, limit: Optional[int]) -> int:
        requested = self.config.suggest_default_limit if limit is None else limit
        return max(0, min(requested, self.config.suggest_max_limit))

    @staticmethod
    def _related(needle: str, keyword: str) -> bool:
        keyword = keyword.casefold()
        return bool(keyword) and (needle in keyword or keyword in needle)

    @staticmethod
    def _product_terms(product: Product):
        yield product.name
        if product.english_name:
            yield product.english_name
        yield from product.tags
        yield from product.main_benefits
