"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Dict, List

from aroma_catalog.config.search_vocabulary import (
    CATEGORY_KEYWORDS,
    CATEGORY_LABELS,
    COLLECTION_LABELS,
    POPULAR_SEARCHES,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Catalog Configuration
    catalog_data_path: str = Field(
        default="./data/products.json",
        description="Path to the product catalog JSON file"
    )

    # Search Tuning
    search_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Maximum fuzzy-match error accepted (0 = exact only)"
    )
    search_distance: int = Field(
        default=100,
        gt=0,
        description="Characters after which a match position costs a full error"
    )
    search_field_weights: Dict[str, float] = Field(
        default={
            "name": 3.0,
            "english_name": 2.0,
            "tags": 1.5,
            "main_benefits": 1.2,
            "collections": 1.0,
            "description": 1.0,
        },
        description="Per-field weights of the search index"
    )
    search_default_limit: int = Field(
        default=20,
        description="Default number of search results"
    )
    search_suggestion_limit: int = Field(
        default=5,
        description="Suggestions attached to a search response"
    )
    search_suggestion_min_length: int = Field(
        default=2,
        description="Shortest query that produces search suggestions"
    )
    suggest_default_limit: int = Field(
        default=8,
        description="Default number of autosuggest entries"
    )
    suggest_max_limit: int = Field(
        default=20,
        description="Hard cap on autosuggest entries"
    )

    # Vocabularies
    popular_searches: List[str] = Field(
        default=POPULAR_SEARCHES,
        description="Terms offered for an empty autosuggest query"
    )
    category_keywords: Dict[str, List[str]] = Field(
        default=CATEGORY_KEYWORDS,
        description="Category key to related keywords"
    )
    category_labels: Dict[str, str] = Field(
        default=CATEGORY_LABELS,
        description="Display labels for categories"
    )
    collection_labels: Dict[str, str] = Field(
        default=COLLECTION_LABELS,
        description="Display labels for collections"
    )

    # Identity
    api_tokens: Dict[str, str] = Field(
        default={},
        description="Bearer token to user id mapping"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )

    # API Configuration
    api_title: str = Field(
        default="Aroma Catalog API",
        description="API title"
    )
    api_version: str = Field(
        default="1.0.0",
        description="API version"
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="CORS allowed origins"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "allow"  # Allow extra fields from .env that aren't defined


# Global settings instance
settings = Settings()
