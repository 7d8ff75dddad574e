"""Category model for organizing blog content."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]*$"


class Category(BaseModel):
    """Represents a blog category from the static catalog."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    slug: str = Field(..., pattern=SLUG_PATTERN, description="Category slug (e.g., design)")
    name: str = Field(..., min_length=1, description="Human-friendly category name")
    description: str = Field(default="", description="Optional category description")
    cover_image: str | None = Field(
        default=None, alias="coverImage", description="Optional cover image URL"
    )

    @property
    def url_path(self) -> str:
        """Site path of the category listing."""
        return f"/blog/{self.slug}"
