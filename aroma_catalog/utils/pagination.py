"""Offset pagination helper shared by list endpoints."""

import math
from typing import Any, Dict, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, limit: int) -> Tuple[List[T], Dict[str, Any]]:
    """
    Slice a sequence into one page.

    Args:
        items: Full ordered sequence
        page: 1-based page number
        limit: Page size (must be positive)

    Returns:
        (page_items, pagination) where pagination holds page, limit, total,
        totalPages, hasNext and hasPrev
    """
    offset = (page - 1) * limit
    total = len(items)
    return list(items[offset:offset + limit]), {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": math.ceil(total / limit) if limit else 0,
        "hasNext": offset + limit < total,
        "hasPrev": page > 1,
    }
