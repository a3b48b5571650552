"""Product detail display toggles and their backward-compatible merge."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from aroma_catalog.config.logging_config import get_logger

logger = get_logger(__name__)


class DisplaySettings(BaseModel):
    """Which product detail sections a client shows."""
    show_product_code: bool = True
    show_pv_points: bool = True
    show_price: bool = True
    show_introduction: bool = True
    show_benefits: bool = True
    show_aroma: bool = True
    show_extraction: bool = True
    show_ingredients: bool = True
    show_usage: bool = True
    show_cautions: bool = True

    class Config:
        alias_generator = to_camel
        populate_by_name = True


def merge_display_settings(stored: Optional[Mapping[str, Any]]) -> DisplaySettings:
    """
    Merge a stored settings shape onto the defaults.

    Older clients persisted camelCase keys, newer ones snake_case; both are
    accepted. Unknown keys and non-boolean values are dropped so a stale or
    hand-edited shape can never break the detail view.

    Args:
        stored: Previously persisted settings, possibly partial or None

    Returns:
        DisplaySettings with every toggle populated
    """
    merged = DisplaySettings().model_dump()
    if not stored:
        return DisplaySettings(**merged)

    by_alias = {to_camel(name): name for name in DisplaySettings.model_fields}

    for key, value in stored.items():
        name = key if key in merged else by_alias.get(key)
        if name is None:
            logger.debug("Ignoring unknown display setting: %s", key)
            continue
        if not isinstance(value, bool):
            logger.warning("Ignoring non-boolean display setting %s=%r", key, value)
            continue
        merged[name] = value

    return DisplaySettings(**merged)
