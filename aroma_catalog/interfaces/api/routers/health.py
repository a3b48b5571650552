"""Health check router."""

from typing import Dict

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from aroma_catalog.config.settings import settings
from aroma_catalog.interfaces.api.schemas.common import HealthCheck, HealthResponse
from aroma_catalog.interfaces.api.dependencies import (
    get_catalog_service,
    get_favorites_service,
)

router = APIRouter(tags=["health"])


def _run_checks() -> Dict[str, HealthCheck]:
    checks: Dict[str, HealthCheck] = {}

    try:
        catalog = get_catalog_service()
    except RuntimeError as e:
        checks["catalog"] = HealthCheck(status="unhealthy", description=str(e))
    else:
        intact = all(p.id and p.name and p.image_url for p in catalog.products)
        checks["catalog"] = HealthCheck(
            status="healthy" if intact else "warning",
            description="Catalog loaded" if intact else "Products missing id, name or imageUrl",
            product_count=len(catalog),
        )

    try:
        get_favorites_service()
    except RuntimeError as e:
        checks["favorites"] = HealthCheck(status="unhealthy", description=str(e))
    else:
        checks["favorites"] = HealthCheck(status="healthy", description="Favorites store ready")

    return checks


@router.get("/health", response_model=HealthResponse)
async def health_check(detailed: bool = Query(False)):
    """
    Health check endpoint.

    Returns:
        Overall status (worst of the individual checks); 503 when unhealthy
    """
    checks = _run_checks()
    statuses = {check.status for check in checks.values()}
    if "unhealthy" in statuses:
        status = "unhealthy"
    elif "warning" in statuses:
        status = "warning"
    else:
        status = "healthy"

    catalog_check = checks["catalog"]
    response = HealthResponse(
        status=status,
        service=settings.api_title,
        version=settings.api_version,
        product_count=catalog_check.product_count or 0,
        checks=checks if detailed else None,
    )
    return JSONResponse(
        status_code=503 if status == "unhealthy" else 200,
        content=response.model_dump(exclude_none=True),
    )
