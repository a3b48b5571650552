"""Common schemas used across the API."""

from typing import Any, Dict, Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class HealthCheck(BaseModel):
    """Result of one health probe."""
    status: str
    description: str
    product_count: Optional[int] = None


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str
    service: str
    version: str
    product_count: int = 0
    checks: Optional[Dict[str, HealthCheck]] = None


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    success: bool = False
    error: str
    details: Optional[Dict[str, Any]] = None
