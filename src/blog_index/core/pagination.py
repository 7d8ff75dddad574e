"""Slice ordered sequences into pages."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from blog_index.models.page import Page


def paginate(items: Sequence[Any], page: int, page_size: int) -> Page:
    """
    Return one page of ``items``.

    Pages are 1-based. A page past the end yields an empty page rather than
    an error, since page numbers usually come from query strings.

    Raises:
        ValueError: If ``page`` or ``page_size`` is below 1.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    if page < 1:
        raise ValueError(f"page must be at least 1, got {page}")

    total_items = len(items)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=math.ceil(total_items / page_size),
    )
