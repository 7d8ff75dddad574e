"""Pagination result model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Page(BaseModel):
    """One page of an ordered sequence."""

    model_config = ConfigDict(frozen=True)

    items: list[Any] = Field(default_factory=list, description="Items on this page")
    page: int = Field(..., ge=1, description="1-based page number")
    page_size: int = Field(..., ge=1)
    total_items: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def previous_page(self) -> int | None:
        """Previous page number, or None on the first page."""
        if not self.has_previous:
            return None
        # Past-the-end pages step back onto the last real page
        return min(self.page - 1, max(self.total_pages, 1))

    @property
    def next_page(self) -> int | None:
        """Next page number, or None on the last page."""
        return self.page + 1 if self.has_next else None

    def page_numbers(self, max_display: int = 5) -> list[int]:
        """
        Window of page numbers to show in a pagination bar.

        The window holds at most ``max_display`` numbers, starts two pages
        before the current one and shifts left when it would run past the
        last page.
        """
        if self.total_pages <= 1:
            return []
        start = max(1, self.page - 2)
        end = min(start + max_display - 1, self.total_pages)
        if end - start + 1 < max_display:
            start = max(1, end - max_display + 1)
        return list(range(start, end + 1))
