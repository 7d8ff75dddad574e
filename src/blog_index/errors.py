"""Error types raised by the indexing and retrieval layer."""

from __future__ import annotations

from pathlib import Path


class BlogIndexError(Exception):
    """Base error for blog_index."""


class CatalogError(BlogIndexError):
    """The category catalog could not be loaded."""


class ContentSourceError(BlogIndexError):
    """The content directory is missing or cannot be listed."""


class MalformedDocument(BlogIndexError):
    """A single source document could not be turned into a post."""

    def __init__(self, source: Path | str, reason: str):
        self.source = Path(source)
        self.reason = reason
        super().__init__(f"{self.source}: {reason}")


class CategoryIntegrityViolation(MalformedDocument):
    """A post references a category slug that is not in the catalog."""

    def __init__(self, source: Path | str, category: str):
        self.category = category
        super().__init__(source, f"unknown category '{category}'")


class UnknownCategory(BlogIndexError, LookupError):
    """Requested category slug is not in the catalog."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Category '{slug}' not found")


class PostNotFound(BlogIndexError, LookupError):
    """Requested post slug is not in the index."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Post '{slug}' not found")
