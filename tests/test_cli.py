"""Tests for the operator CLI."""

import pytest
from typer.testing import CliRunner

from blog_index.cli import app

runner = CliRunner()


@pytest.fixture
def populated(content_dir, write_post):
    write_post("a.md", slug="alpha", title="Alpha", date="2024-01-01")
    write_post("b.md", slug="beta", title="Beta", date="2024-06-01", category="performance",
               body="## Beta\n\nBody text.")
    return content_dir


def invoke(content_dir, *args):
    return runner.invoke(app, ["--content-dir", str(content_dir), *args])


class TestCli:
    def test_check_clean(self, populated):
        result = invoke(populated, "check")
        assert result.exit_code == 0
        assert "All 2 posts loaded" in result.output

    def test_check_reports_skipped(self, populated, write_post):
        write_post("bad.md", slug="bad", date="whenever")
        result = invoke(populated, "check")
        assert result.exit_code == 1
        assert "bad.md" in result.output

    def test_posts_listing(self, populated):
        result = invoke(populated, "posts")
        assert result.exit_code == 0
        assert result.output.index("beta") < result.output.index("alpha")

    def test_posts_by_category(self, populated):
        result = invoke(populated, "posts", "--category", "performance")
        assert result.exit_code == 0
        assert "beta" in result.output
        assert "alpha" not in result.output

    def test_posts_unknown_category(self, populated):
        result = invoke(populated, "posts", "--category", "cooking")
        assert result.exit_code == 1
        assert "cooking" in result.output

    def test_posts_past_last_page(self, populated):
        result = invoke(populated, "posts", "--page", "9")
        assert result.exit_code == 0
        assert "No posts on this page" in result.output

    def test_categories(self, populated):
        result = invoke(populated, "categories")
        assert result.exit_code == 0
        assert "design" in result.output
        assert "empty" in result.output

    def test_show(self, populated):
        result = invoke(populated, "show", "beta", "--html")
        assert result.exit_code == 0
        assert "Reading time: 1 min read" in result.output
        assert "<h2>Beta</h2>" in result.output

    def test_show_missing(self, populated):
        result = invoke(populated, "show", "gamma")
        assert result.exit_code == 1
        assert "gamma" in result.output

    def test_missing_content_dir(self, tmp_path):
        result = invoke(tmp_path / "nothing", "check")
        assert result.exit_code == 1
