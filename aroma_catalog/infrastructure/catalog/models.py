"""Catalog product model."""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """A catalog product as stored in the JSON data file."""
    id: str = ""
    name: str = Field(..., min_length=1)
    english_name: str = ""
    scientific_name: Optional[str] = None
    description: str = ""
    category: str = ""
    collections: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    main_benefits: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    volume: str = ""
    image_url: str = ""
    is_new: bool = False
    is_bestseller: bool = False
    usage_instructions: Optional[Union[str, List[str]]] = None
    cautions: Optional[Union[str, List[str]]] = None
    aroma_description: Optional[str] = None
    extraction_method: Optional[str] = None
    plant_part: Optional[str] = None
    main_ingredients: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    product_code: Optional[str] = None
    retail_price: Optional[float] = None
    member_price: Optional[float] = None
    pv_points: Optional[float] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"

    @field_validator(
        "collections", "tags", "main_benefits", "benefits", "main_ingredients",
        mode="before",
    )
    @classmethod
    def _none_to_empty_list(cls, value):
        return [] if value is None else value

    @field_validator(
        "english_name", "description", "category", "volume", "image_url",
        mode="before",
    )
    @classmethod
    def _none_to_empty_str(cls, value):
        return "" if value is None else value

    def summary(self) -> dict:
        """Minimal fields shown in favorite and collection listings."""
        return {
            "id": self.id,
            "name": self.name,
            "imageUrl": self.image_url,
        }
