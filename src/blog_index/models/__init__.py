"""Pydantic data models."""

from blog_index.models.category import Category
from blog_index.models.post import Post, RenderedPost, LoadDiagnostic, LoadResult
from blog_index.models.page import Page

__all__ = [
    "Category",
    "Post",
    "RenderedPost",
    "LoadDiagnostic",
    "LoadResult",
    "Page",
]
