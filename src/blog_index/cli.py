"""Operator CLI for inspecting blog content using Typer."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blog_index.config import Settings, get_settings
from blog_index.errors import BlogIndexError, PostNotFound, UnknownCategory
from blog_index.services.blog_repository import BlogRepository, create_blog_repository
from blog_index.utils.logging import setup_logging
from blog_index.utils.text_utils import truncate_text


app = typer.Typer(
    name="blog-index",
    help="Inspect and validate markdown blog content",
    no_args_is_help=True,
)

console = Console()

_state: dict[str, Optional[Path]] = {"content_dir": None}


@app.callback()
def configure(
    content_dir: Optional[Path] = typer.Option(
        None, "--content-dir", "-c", help="Content directory (posts/ and categories.json)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Configure content location and logging."""
    _state["content_dir"] = content_dir
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level.upper(), settings.log_file)


def _settings() -> Settings:
    settings = get_settings()
    if _state["content_dir"] is not None:
        settings = settings.model_copy(update={"content_dir": _state["content_dir"]})
    return settings


def _repository() -> BlogRepository:
    try:
        return create_blog_repository(_settings())
    except BlogIndexError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)


# --- Check Command ---


@app.command()
def check():
    """Load all posts and report documents that were skipped."""
    repo = _repository()
    total = len(repo.get_all())

    if not repo.diagnostics:
        console.print(f"[green]All {total} posts loaded[/green]")
        return

    table = Table(title="Skipped documents")
    table.add_column("File", style="cyan")
    table.add_column("Problem", style="red")
    for diagnostic in repo.diagnostics:
        table.add_row(escape(diagnostic.source.name), escape(diagnostic.reason))
    console.print(table)
    console.print(f"[yellow]{total} posts loaded, {len(repo.diagnostics)} skipped[/yellow]")
    raise typer.Exit(1)


# --- Listing Commands ---


@app.command()
def posts(
    category: Optional[str] = typer.Option(None, "--category", help="Only posts in this category"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Posts per page"),
):
    """List posts, newest first."""
    repo = _repository()

    if category:
        try:
            items = repo.get_by_category(category)
        except UnknownCategory as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(1)
    else:
        items = repo.get_all()

    result = repo.paginate(items, page, page_size)
    if not result.items:
        console.print("[yellow]No posts on this page[/yellow]")
        return

    table = Table(title=f"Posts (page {result.page} of {result.total_pages})")
    table.add_column("Date")
    table.add_column("Category", style="magenta")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    for post in result.items:
        table.add_row(
            post.date.isoformat(),
            post.category,
            post.slug,
            escape(truncate_text(post.title, 60)),
        )
    console.print(table)


@app.command()
def categories():
    """List categories with their post counts."""
    repo = _repository()

    table = Table(title="Categories")
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    table.add_column("Posts", justify="right")
    table.add_column("Description", style="dim")
    for cat in repo.get_categories():
        table.add_row(
            cat.slug,
            cat.name,
            str(len(repo.get_by_category(cat.slug))),
            escape(truncate_text(cat.description, 50)),
        )
    console.print(table)


@app.command()
def show(
    slug: str = typer.Argument(..., help="Post slug"),
    html: bool = typer.Option(False, "--html", help="Print the rendered HTML body"),
):
    """Show one post's metadata and reading time."""
    repo = _repository()

    try:
        post = repo.get_post(slug)
    except PostNotFound as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    category = repo.get_category(post.category)
    console.print(f"[bold]{escape(post.title)}[/bold]")
    console.print(f"[dim]{escape(post.subtitle)}[/dim]")
    console.print(f"  Category: {escape(category.name)}")
    console.print(f"  Date: {post.display_date}")
    console.print(f"  Reading time: {post.reading_time_minutes} min read")
    console.print(f"  Path: {post.url_path}")
    console.print(f"  Description: {escape(post.meta_description)}")

    if html:
        console.print()
        console.print(post.html_content, markup=False, highlight=False)


# --- Entry Point ---


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
