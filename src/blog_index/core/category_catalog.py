"""Static category catalog loaded once per process."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import ValidationError

from blog_index.errors import CatalogError, UnknownCategory
from blog_index.models.category import Category


DEFAULT_CATEGORIES = (
    {
        "slug": "design",
        "name": "Design",
        "description": "Interface design, typography and visual craft.",
    },
    {
        "slug": "performance",
        "name": "Performance",
        "description": "Making web applications fast and keeping them that way.",
    },
)


class CategoryCatalog:
    """Ordered, read-only set of categories."""

    def __init__(self, categories: Iterable[Category]):
        ordered = tuple(categories)
        by_slug: dict[str, Category] = {}
        for category in ordered:
            if category.slug in by_slug:
                raise ValueError(f"Duplicate category slug '{category.slug}'")
            by_slug[category.slug] = category
        self._categories = ordered
        self._by_slug = by_slug

    @classmethod
    def default(cls) -> "CategoryCatalog":
        """Built-in catalog used when no catalog file is configured."""
        return cls(Category(**data) for data in DEFAULT_CATEGORIES)

    @classmethod
    def from_file(cls, path: Path) -> "CategoryCatalog":
        """Load a catalog from a JSON list or a ``slug -> category`` mapping."""
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Cannot read category catalog {path}: {exc}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Invalid JSON in category catalog {path}: {exc}") from exc

        if isinstance(data, dict):
            items = [
                {"slug": slug, **item} if isinstance(item, dict) else item
                for slug, item in data.items()
            ]
        elif isinstance(data, list):
            items = data
        else:
            raise CatalogError(f"Category catalog {path} must be a JSON list or object")

        try:
            categories = [Category.model_validate(item) for item in items]
            return cls(categories)
        except (ValidationError, ValueError) as exc:
            raise CatalogError(f"Invalid category in {path}: {exc}") from exc

    def all(self) -> list[Category]:
        """Categories in declared order."""
        return list(self._categories)

    def get(self, slug: str) -> Category:
        if slug not in self._by_slug:
            raise UnknownCategory(slug)
        return self._by_slug[slug]

    def exists(self, slug: str) -> bool:
        return slug in self._by_slug

    def slugs(self) -> list[str]:
        return [c.slug for c in self._categories]

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)
