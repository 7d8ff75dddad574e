"""Tests for Pydantic models."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from blog_index.models.category import Category
from blog_index.models.page import Page
from blog_index.models.post import Post, RenderedPost


def make_post(**overrides) -> Post:
    data = {
        "title": "Test Post",
        "subtitle": "Subtitle",
        "slug": "test-post",
        "category": "design",
        "date": "2024-06-01",
        "excerpt": "Excerpt",
    }
    data.update(overrides)
    return Post.model_validate(data)


class TestCategory:
    def test_create_category(self):
        cat = Category(slug="design", name="Design")
        assert cat.description == ""
        assert cat.cover_image is None
        assert cat.url_path == "/blog/design"

    def test_cover_image_alias(self):
        cat = Category.model_validate(
            {"slug": "design", "name": "Design", "coverImage": "/img/design.jpg"}
        )
        assert cat.cover_image == "/img/design.jpg"

    def test_rejects_unsafe_slug(self):
        with pytest.raises(ValidationError):
            Category(slug="not a slug", name="Bad")

    def test_is_frozen(self):
        cat = Category(slug="design", name="Design")
        with pytest.raises(ValidationError):
            cat.name = "Other"


class TestPost:
    def test_parses_iso_string_date(self):
        assert make_post().date == date(2024, 6, 1)

    def test_accepts_date_object(self):
        assert make_post(date=date(2024, 1, 2)).date == date(2024, 1, 2)

    def test_truncates_datetime(self):
        assert make_post(date=datetime(2024, 1, 2, 15, 30)).date == date(2024, 1, 2)

    @pytest.mark.parametrize("value", ["June 1st", "2024-13-01", "", 20240601, True])
    def test_rejects_invalid_date(self, value):
        with pytest.raises(ValidationError):
            make_post(date=value)

    @pytest.mark.parametrize("field", ["title", "subtitle", "slug", "category", "excerpt"])
    def test_required_fields_must_be_non_empty(self, field):
        with pytest.raises(ValidationError):
            make_post(**{field: "   "})

    def test_missing_field(self):
        data = make_post().model_dump()
        del data["excerpt"]
        with pytest.raises(ValidationError):
            Post.model_validate(data)

    def test_optional_aliases(self):
        post = make_post(coverImage="/img/cover.jpg", seoDescription="SEO text")
        assert post.cover_image == "/img/cover.jpg"
        assert post.seo_description == "SEO text"

    def test_meta_description_falls_back_to_excerpt(self):
        assert make_post().meta_description == "Excerpt"
        assert make_post(seoDescription="SEO").meta_description == "SEO"

    def test_derived_fields(self):
        post = make_post()
        assert post.url_path == "/blog/design/test-post"
        assert post.display_date == "June 1, 2024"

    def test_raw_body_kept_verbatim(self):
        body = "    code()\n\nx  \n"
        assert make_post(raw_body=body).raw_body == body

    def test_metadata_strings_are_trimmed(self):
        post = make_post(title="  Spaced  ", slug=" test-post ", coverImage=" /img/a.jpg ")
        assert post.title == "Spaced"
        assert post.slug == "test-post"
        assert post.cover_image == "/img/a.jpg"

    def test_unknown_keys_ignored(self):
        post = make_post(tags=["a", "b"])
        assert not hasattr(post, "tags")

    def test_rendered_post_carries_post_fields(self):
        post = make_post(coverImage="/img/cover.jpg")
        rendered = RenderedPost(
            **post.model_dump(), html_content="<p>x</p>", reading_time_minutes=1
        )
        assert rendered.slug == post.slug
        assert rendered.cover_image == "/img/cover.jpg"
        assert rendered.html_content == "<p>x</p>"


class TestPage:
    def make_page(self, page: int, total_pages: int) -> Page:
        return Page(items=[], page=page, page_size=10, total_items=total_pages * 10,
                    total_pages=total_pages)

    def test_navigation_flags(self):
        first = self.make_page(1, 3)
        assert not first.has_previous and first.has_next
        assert first.previous_page is None and first.next_page == 2

        last = self.make_page(3, 3)
        assert last.has_previous and not last.has_next
        assert last.previous_page == 2 and last.next_page is None

    def test_single_page_has_no_numbers(self):
        assert self.make_page(1, 1).page_numbers() == []

    def test_window_centred_on_current_page(self):
        assert self.make_page(5, 10).page_numbers() == [3, 4, 5, 6, 7]

    def test_window_at_start(self):
        assert self.make_page(1, 10).page_numbers() == [1, 2, 3, 4, 5]

    def test_window_shifts_near_end(self):
        assert self.make_page(10, 10).page_numbers() == [6, 7, 8, 9, 10]

    def test_window_with_few_pages(self):
        assert self.make_page(2, 3).page_numbers() == [1, 2, 3]

    def test_past_the_end_steps_back_to_last_page(self):
        page = self.make_page(7, 3)
        assert page.previous_page == 3
        assert page.next_page is None
