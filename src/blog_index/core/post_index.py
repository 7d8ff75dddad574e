"""In-memory, read-only index over one load cycle's posts."""

from __future__ import annotations

from collections.abc import Iterable

from blog_index.core.category_catalog import CategoryCatalog
from blog_index.errors import CategoryIntegrityViolation, PostNotFound, UnknownCategory
from blog_index.models.post import Post


class PostIndex:
    """
    Sorted lookups over a fixed set of posts.

    All tables are built in the constructor and never change afterwards, so
    an index can be shared by any number of concurrent readers. Rebuilding
    means constructing a new instance.

    Ordering is date descending; posts with the same date keep the order in
    which they were given.
    """

    def __init__(self, posts: Iterable[Post], catalog: CategoryCatalog):
        # sorted() is stable, including with reverse=True
        ordered = tuple(sorted(posts, key=lambda post: post.date, reverse=True))

        by_slug: dict[str, Post] = {}
        by_category: dict[str, list[Post]] = {slug: [] for slug in catalog.slugs()}
        for post in ordered:
            if post.slug in by_slug:
                raise ValueError(f"Duplicate post slug '{post.slug}'")
            if post.category not in by_category:
                raise CategoryIntegrityViolation(post.source_path or post.slug, post.category)
            by_slug[post.slug] = post
            by_category[post.category].append(post)

        self.catalog = catalog
        self._posts = ordered
        self._by_slug = by_slug
        self._by_category = {slug: tuple(items) for slug, items in by_category.items()}

    def all(self) -> list[Post]:
        """Every post, newest first."""
        return list(self._posts)

    def by_category(self, slug: str) -> list[Post]:
        """
        Posts in one category, newest first.

        Raises:
            UnknownCategory: If ``slug`` is not in the catalog. A known
                category without posts returns an empty list.
        """
        if slug not in self._by_category:
            raise UnknownCategory(slug)
        return list(self._by_category[slug])

    def by_slug(self, slug: str) -> Post:
        """Exact, case-sensitive slug lookup."""
        try:
            return self._by_slug[slug]
        except KeyError:
            raise PostNotFound(slug) from None

    def slugs(self) -> list[str]:
        return [post.slug for post in self._posts]

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __len__(self) -> int:
        return len(self._posts)
