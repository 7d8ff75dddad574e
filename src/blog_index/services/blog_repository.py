"""Query façade over the category catalog, post index and renderer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from blog_index.config import Settings, get_settings
from blog_index.core.category_catalog import CategoryCatalog
from blog_index.core.pagination import paginate
from blog_index.core.post_index import PostIndex
from blog_index.core.post_loader import PostLoader
from blog_index.errors import PostNotFound
from blog_index.models.category import Category
from blog_index.models.page import Page
from blog_index.models.post import LoadDiagnostic, Post, RenderedPost
from blog_index.services.markdown_renderer import MarkdownRenderer
from blog_index.utils.logging import get_logger

logger = get_logger(__name__)


class BlogRepository:
    """
    Stable entry point for page renderers and routers.

    One instance covers one load cycle. Instances are never mutated;
    ``reload()`` returns a fresh repository built from the same sources.
    """

    def __init__(
        self,
        index: PostIndex,
        renderer: MarkdownRenderer,
        *,
        loader: PostLoader | None = None,
        diagnostics: Sequence[LoadDiagnostic] = (),
        page_size: int = 10,
    ):
        self.index = index
        self.renderer = renderer
        self.loader = loader
        self.diagnostics = tuple(diagnostics)
        self.page_size = page_size

    @property
    def catalog(self) -> CategoryCatalog:
        return self.index.catalog

    @classmethod
    def load(
        cls,
        loader: PostLoader,
        renderer: MarkdownRenderer,
        *,
        page_size: int = 10,
    ) -> "BlogRepository":
        """Run one load cycle and publish the finished index."""
        result = loader.load_all()
        index = PostIndex(result.posts, loader.catalog)
        return cls(
            index,
            renderer,
            loader=loader,
            diagnostics=result.diagnostics,
            page_size=page_size,
        )

    def reload(self) -> "BlogRepository":
        """Build a new repository from a fresh load cycle."""
        if self.loader is None:
            raise RuntimeError("Repository was built without a loader and cannot reload")
        return type(self).load(self.loader, self.renderer, page_size=self.page_size)

    # --- Posts ---

    def get_post(self, slug: str) -> RenderedPost:
        """Single post with its body rendered to HTML."""
        return self.renderer.render_post(self.index.by_slug(slug))

    def get_post_in_category(self, category: str, slug: str) -> RenderedPost:
        """
        Single post addressed by ``(category, slug)``.

        Raises:
            UnknownCategory: If the category is not in the catalog.
            PostNotFound: If the slug is absent or belongs to another category.
        """
        self.catalog.get(category)
        post = self.index.by_slug(slug)
        if post.category != category:
            raise PostNotFound(slug)
        return self.renderer.render_post(post)

    def get_all(self) -> list[Post]:
        """All posts, newest first, bodies unrendered."""
        return self.index.all()

    def get_by_category(self, slug: str) -> list[Post]:
        return self.index.by_category(slug)

    # --- Categories ---

    def get_categories(self) -> list[Category]:
        """Catalog categories in declared order."""
        return self.catalog.all()

    def get_category(self, slug: str) -> Category:
        return self.catalog.get(slug)

    # --- Paging and static generation ---

    def paginate(self, items: Sequence[Any], page: int, page_size: int | None = None) -> Page:
        return paginate(items, page, self.page_size if page_size is None else page_size)

    def static_paths(self) -> list[tuple[str, str]]:
        """Every ``(category, slug)`` pair a static build must pre-render."""
        return [(post.category, post.slug) for post in self.index.all()]


def create_blog_repository(settings: Settings | None = None) -> BlogRepository:
    """Factory function wiring catalog, loader, index and renderer from settings."""
    settings = settings or get_settings()

    if settings.has_categories_file:
        catalog = CategoryCatalog.from_file(settings.categories_file)
    else:
        logger.info(
            "No category catalog at %s, using built-in categories", settings.categories_file
        )
        catalog = CategoryCatalog.default()

    loader = PostLoader(settings.posts_dir, catalog)
    renderer = MarkdownRenderer(
        extensions=settings.markdown_extensions,
        words_per_minute=settings.words_per_minute,
    )
    return BlogRepository.load(loader, renderer, page_size=settings.page_size)
