"""Tests for view helpers: dates, categories, images, share links."""

from urllib.parse import parse_qs, urlparse

import pytest

from blogfront.models.wp import Term, WPPost
from blogfront.services.presentation import (
    build_share_links,
    format_date,
    get_comment_count,
    get_featured_image,
    post_detail,
    post_summary,
    slugify_category,
)


def _embedded(**overrides) -> dict:
    embedded = {
        "wp:featuredmedia": [
            {"source_url": "https://wp.test/cover.jpg", "alt_text": "A cover"}
        ],
        "wp:term": [
            [
                {"name": "News &amp; Notes", "slug": "news"},
                {"name": "Travel", "slug": ""},
                {"name": "Food", "slug": "food"},
                {"name": "Extra", "slug": "extra"},
            ],
            [{"name": "a-tag", "slug": "a-tag"}],
        ],
        "replies": [[{"id": 1}, {"id": 2}]],
    }
    embedded.update(overrides)
    return embedded


class TestFormatDate:
    @pytest.mark.parametrize(
        ("iso", "expected"),
        [
            ("2025-01-05T10:00:00", "Jan 5, 2025"),
            ("2024-12-31T23:59:59Z", "Dec 31, 2024"),
            ("2023-07-14", "Jul 14, 2023"),
        ],
    )
    def test_formats(self, iso, expected):
        assert format_date(iso) == expected

    def test_unparseable_is_returned_unchanged(self):
        assert format_date("yesterday") == "yesterday"


class TestSlugifyCategory:
    def test_prefers_slug(self):
        assert slugify_category(Term(name="Anything", slug="given")) == "given"

    def test_derives_from_name(self):
        assert slugify_category(Term(name="Travel & Food!", slug="")) == "travel-food"

    def test_none(self):
        assert slugify_category(None) == ""
        assert slugify_category(Term()) == ""


def test_share_links_are_url_encoded():
    links = build_share_links("https://wp.test/a b/?x=1", "Fish & Chips")

    assert set(links) == {"twitter", "facebook", "linkedin"}
    twitter = parse_qs(urlparse(links["twitter"]).query)
    assert twitter["url"] == ["https://wp.test/a b/?x=1"]
    assert twitter["text"] == ["Fish & Chips"]
    assert "%26" in links["twitter"]
    assert links["facebook"].startswith("https://www.facebook.com/sharer/sharer.php?u=")
    assert "https%3A%2F%2Fwp.test" in links["linkedin"]


class TestPostViews:
    def test_summary(self, make_post):
        post = WPPost.model_validate(make_post(_embedded=_embedded()))
        view = post_summary(post)

        assert view["title"] == "Hello & Welcome"
        assert view["excerpt"] == "Short “excerpt”"
        assert view["date_display"] == "Jan 5, 2025"
        assert view["image"] == {"src": "https://wp.test/cover.jpg", "alt": "A cover"}
        assert view["categories"] == [
            {"name": "News & Notes", "slug": "news"},
            {"name": "Travel", "slug": "travel"},
            {"name": "Food", "slug": "food"},
        ]
        assert view["comment_count"] == 2

    def test_summary_without_embeds(self, make_post):
        view = post_summary(WPPost.model_validate(make_post()))
        assert view["image"] is None
        assert view["categories"] == []
        assert view["comment_count"] is None

    def test_image_alt_falls_back_to_title(self, make_post):
        post = WPPost.model_validate(
            make_post(
                _embedded=_embedded(
                    **{"wp:featuredmedia": [{"source_url": "https://wp.test/x.png"}]}
                )
            )
        )
        assert get_featured_image(post)["alt"] == "Hello & Welcome"

    def test_comment_count_needs_replies(self, make_post):
        post = WPPost.model_validate(make_post(_embedded={"replies": []}))
        assert get_comment_count(post) is None

    def test_detail(self, make_post):
        post = WPPost.model_validate(
            make_post(
                content='<section><p style="x:y">Body</p></section>',
                _embedded=_embedded(),
            )
        )
        view = post_detail(post, post_url="https://wp.test/posts/hello-world")

        assert view["content_html"] == "<div><p>Body</p></div>"
        assert view["primary_category"] == {"name": "News & Notes", "slug": "news"}
        assert view["link"] == "https://wp.test/hello-world/"
        assert "hello-world" in view["share"]["facebook"]

    def test_detail_without_categories(self, make_post):
        view = post_detail(
            WPPost.model_validate(make_post()), post_url="https://wp.test/p"
        )
        assert view["primary_category"] is None
