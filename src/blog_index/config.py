"""Configuration management using pydantic-settings."""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Content source
    content_dir: Path = Field(
        default=Path("./content"), description="Directory holding posts/ and categories.json"
    )
    posts_subdir: str = Field(default="posts", description="Posts directory inside content_dir")
    categories_filename: str = Field(
        default="categories.json", description="Category catalog file inside content_dir"
    )

    # Queries and rendering
    page_size: int = Field(default=10, ge=1, description="Default number of posts per page")
    words_per_minute: int = Field(
        default=225, ge=1, description="Reading speed used for reading time estimates"
    )
    markdown_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS),
        description="Python-Markdown extensions enabled when rendering posts",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the blog_index logger")
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @property
    def posts_dir(self) -> Path:
        """Path to the markdown posts directory."""
        return self.content_dir / self.posts_subdir

    @property
    def categories_file(self) -> Path:
        """Path to the category catalog JSON file."""
        return self.content_dir / self.categories_filename

    @property
    def has_categories_file(self) -> bool:
        """Check if a category catalog file is present."""
        return self.categories_file.is_file()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
