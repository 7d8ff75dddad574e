"""Markdown to HTML conversion for post detail views."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

import markdown

from blog_index.config import DEFAULT_MARKDOWN_EXTENSIONS
from blog_index.models.post import Post, RenderedPost
from blog_index.utils.text_utils import DEFAULT_WORDS_PER_MINUTE, reading_time_minutes


class RenderResult(NamedTuple):
    html: str
    reading_time_minutes: int


class MarkdownRenderer:
    """
    Renders trusted, site-owner authored markdown.

    Output is not sanitized: raw HTML in a post body passes through. Do not
    feed it user-submitted content.
    """

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_MARKDOWN_EXTENSIONS,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ):
        if words_per_minute < 1:
            raise ValueError("words_per_minute must be at least 1")
        self.extensions = tuple(extensions)
        self.words_per_minute = words_per_minute

    def render(self, raw_body: str) -> RenderResult:
        """Convert a markdown body to HTML and estimate its reading time."""
        # markdown.markdown() builds a fresh converter, so calls share no state
        html = markdown.markdown(raw_body, extensions=list(self.extensions))
        return RenderResult(
            html=html,
            reading_time_minutes=reading_time_minutes(raw_body, self.words_per_minute),
        )

    def render_post(self, post: Post) -> RenderedPost:
        result = self.render(post.raw_body)
        return RenderedPost(
            **post.model_dump(),
            html_content=result.html,
            reading_time_minutes=result.reading_time_minutes,
        )
