"""Shared fixtures for content directories."""

import json

import pytest
import yaml

from blog_index.core.category_catalog import CategoryCatalog
from blog_index.models.category import Category


@pytest.fixture
def catalog():
    return CategoryCatalog([
        Category(slug="design", name="Design", description="Visual craft"),
        Category(slug="performance", name="Performance"),
        Category(slug="empty", name="Empty"),
    ])


@pytest.fixture
def content_dir(tmp_path):
    """Content directory with a posts/ folder and a category catalog."""
    (tmp_path / "posts").mkdir()
    (tmp_path / "categories.json").write_text(
        json.dumps([
            {"slug": "design", "name": "Design", "description": "Visual craft"},
            {"slug": "performance", "name": "Performance"},
            {"slug": "empty", "name": "Empty"},
        ]),
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def posts_dir(content_dir):
    return content_dir / "posts"


def build_document(body: str = "Hello world.", **fields) -> str:
    meta = {
        "title": "A Title",
        "subtitle": "A subtitle",
        "slug": "a-title",
        "category": "design",
        "date": "2024-01-01",
        "excerpt": "Short summary.",
    }
    meta.update(fields)
    meta = {key: value for key, value in meta.items() if value is not None}
    return f"---\n{yaml.safe_dump(meta, sort_keys=False)}---\n\n{body}\n"


@pytest.fixture
def write_post(posts_dir):
    """Write a markdown post; pass field=None to omit a frontmatter key."""

    def _write(filename: str, body: str = "Hello world.", **fields):
        path = posts_dir / filename
        path.write_text(build_document(body, **fields), encoding="utf-8")
        return path

    return _write
