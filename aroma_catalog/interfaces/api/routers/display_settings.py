"""Router for product detail display settings."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body

from aroma_catalog.config.display_settings import DisplaySettings, merge_display_settings

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/display", response_model=DisplaySettings)
def default_display_settings() -> DisplaySettings:
    """Every display toggle with its default value."""
    return DisplaySettings()


@router.post("/display", response_model=DisplaySettings)
def normalize_display_settings(
    stored: Optional[Dict[str, Any]] = Body(None),
) -> DisplaySettings:
    """Merge a client's stored settings, of any older shape, onto the defaults."""
    return merge_display_settings(stored)
