"""Product schemas."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from aroma_catalog.infrastructure.catalog.models import Product


class ProductListResponse(BaseModel):
    """All products in catalog order."""
    success: bool = True
    data: List[Product]
    count: int


class ProductResponse(BaseModel):
    """Single product envelope."""
    success: bool = True
    message: str
    data: Product


class ProductCreateRequest(BaseModel):
    """New product payload; validated by the catalog service."""
    name: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    english_name: str = Field(default="", alias="englishName")
    description: str = ""
    benefits: List[str] = Field(default_factory=list)
    volume: str = ""
    usage_instructions: str = Field(default="", alias="usageInstructions")
    ingredients: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    def as_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
