"""Load markdown posts with YAML frontmatter from a content directory."""

from __future__ import annotations

from pathlib import Path

import frontmatter
import yaml
from pydantic import ValidationError

from blog_index.core.category_catalog import CategoryCatalog
from blog_index.errors import CategoryIntegrityViolation, ContentSourceError, MalformedDocument
from blog_index.models.post import LoadDiagnostic, LoadResult, Post
from blog_index.utils.logging import LoadCycleLog, get_logger

logger = get_logger(__name__)

_yaml_handler = frontmatter.YAMLHandler()


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "frontmatter"
        if error["type"] == "missing":
            problems.append(f"missing required field '{field}'")
        else:
            problems.append(f"{field}: {error['msg']}")
    return "; ".join(problems)


def split_frontmatter(text: str, source: Path) -> tuple[dict, str]:
    """
    Split a document into its YAML header and markdown body.

    Unlike `frontmatter.loads`, the body keeps its indentation and trailing
    whitespace; only the blank lines between the closing delimiter and the
    first line of content are dropped.
    """
    text = text.lstrip("\ufeff").lstrip()
    if not _yaml_handler.detect(text):
        raise MalformedDocument(source, "no frontmatter block")

    try:
        header, body = _yaml_handler.split(text)
    except ValueError:
        raise MalformedDocument(source, "unterminated frontmatter block") from None

    try:
        metadata = _yaml_handler.load(header)
    except (yaml.YAMLError, ValueError) as exc:
        # PyYAML raises ValueError for impossible unquoted dates such as 2024-13-45
        raise MalformedDocument(source, f"invalid frontmatter: {exc}") from exc

    if not isinstance(metadata, dict) or not metadata:
        raise MalformedDocument(source, "no frontmatter block")

    return metadata, body.lstrip("\r\n")


def parse_document(text: str, source: Path, catalog: CategoryCatalog) -> Post:
    """
    Parse one markdown document into a Post.

    Raises:
        MalformedDocument: If the frontmatter is invalid, incomplete, or
            references a category missing from the catalog.
    """
    metadata, body = split_frontmatter(text, source)

    try:
        post = Post.model_validate({**metadata, "raw_body": body, "source_path": source})
    except ValidationError as exc:
        raise MalformedDocument(source, _describe_validation_error(exc)) from exc

    if not catalog.exists(post.category):
        raise CategoryIntegrityViolation(source, post.category)

    return post


class PostLoader:
    """Scans a directory of markdown files and builds Post records."""

    def __init__(self, posts_dir: Path, catalog: CategoryCatalog, pattern: str = "*.md"):
        self.posts_dir = Path(posts_dir)
        self.catalog = catalog
        self.pattern = pattern

    def discover(self) -> list[Path]:
        """Source files in deterministic (file name) order."""
        if not self.posts_dir.is_dir():
            raise ContentSourceError(f"Posts directory not found: {self.posts_dir}")
        return sorted(
            (path for path in self.posts_dir.glob(self.pattern) if path.is_file()),
            key=lambda path: path.name,
        )

    def load_document(self, path: Path) -> Post:
        """Read and parse a single file."""
        try:
            # utf-8-sig drops the byte order mark some editors write
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise MalformedDocument(path, f"unreadable file: {exc}") from exc
        return parse_document(text, path, self.catalog)

    def load_all(self) -> LoadResult:
        """
        Load every document in the content directory.

        A bad document is skipped and reported as a diagnostic; it never stops
        the rest of the scan. When two documents declare the same slug the
        first one in file name order is kept.
        """
        posts: list[Post] = []
        diagnostics: list[LoadDiagnostic] = []
        seen: dict[str, Path] = {}

        with LoadCycleLog(logger, self.posts_dir) as cycle:
            for path in self.discover():
                try:
                    post = self.load_document(path)
                    if post.slug in seen:
                        raise MalformedDocument(
                            path, f"duplicate slug '{post.slug}' (already defined in {seen[post.slug].name})"
                        )
                except MalformedDocument as exc:
                    cycle.document_skipped(exc.source, exc.reason)
                    diagnostics.append(LoadDiagnostic(source=exc.source, reason=exc.reason))
                    continue

                seen[post.slug] = path
                posts.append(post)
                cycle.post_loaded(post.slug)

        return LoadResult(posts=posts, diagnostics=diagnostics)
