"""Post models for markdown content loaded from disk."""

from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from blog_index.models.category import SLUG_PATTERN
from blog_index.utils.text_utils import format_display_date

# Metadata strings are trimmed; the markdown body is kept byte for byte
Text = Annotated[str, StringConstraints(strip_whitespace=True)]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Slug = Annotated[str, StringConstraints(strip_whitespace=True, pattern=SLUG_PATTERN)]


class Post(BaseModel):
    """A blog post parsed from a markdown file with frontmatter."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    title: RequiredText = Field(..., description="Post title")
    subtitle: RequiredText = Field(..., description="Post subtitle")
    slug: Slug = Field(..., description="Unique lookup key")
    category: RequiredText = Field(..., description="Category slug")
    date: dt.date = Field(..., description="Publication date")
    excerpt: RequiredText = Field(..., description="Short summary")
    cover_image: Text | None = Field(default=None, alias="coverImage")
    seo_description: Text | None = Field(default=None, alias="seoDescription")
    raw_body: str = Field(default="", description="Unrendered markdown body")
    source_path: Path | None = Field(default=None, description="File the post was loaded from")

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_date(cls, value):
        # YAML already yields date/datetime objects for unquoted dates
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, (bool, int, float)):
            raise ValueError("date must be an ISO-8601 calendar date")
        if isinstance(value, str):
            try:
                return dt.date.fromisoformat(value.strip())
            except ValueError:
                raise ValueError(f"invalid ISO-8601 date '{value}'") from None
        return value

    @property
    def meta_description(self) -> str:
        """Description for SEO tags, falling back to the excerpt."""
        return self.seo_description or self.excerpt

    @property
    def url_path(self) -> str:
        """Site path of the post detail page."""
        return f"/blog/{self.category}/{self.slug}"

    @property
    def display_date(self) -> str:
        """Human-readable publication date."""
        return format_display_date(self.date)


class RenderedPost(Post):
    """A post with its body converted to HTML."""

    html_content: str = Field(default="", description="Rendered HTML body")
    reading_time_minutes: int = Field(default=0, ge=0, description="Estimated reading time")


class LoadDiagnostic(BaseModel):
    """A source document skipped during a load cycle."""

    model_config = ConfigDict(frozen=True)

    source: Path
    reason: str


class LoadResult(BaseModel):
    """Outcome of one load cycle."""

    model_config = ConfigDict(frozen=True)

    posts: list[Post] = Field(default_factory=list)
    diagnostics: list[LoadDiagnostic] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every document loaded."""
        return not self.diagnostics
