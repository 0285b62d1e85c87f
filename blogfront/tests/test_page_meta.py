"""Tests for the per-page metadata resolvers."""

from unittest.mock import AsyncMock

import pytest

from blogfront.config import Settings
from blogfront.services.page_meta import (
    about_metadata,
    category_metadata,
    home_metadata,
    post_metadata,
)
from blogfront.services.wordpress import WordPressClient, WordPressUnavailable


@pytest.fixture
def settings():
    return Settings(
        wordpress_api_url="https://wp.test/wp-json/wp/v2",
        site_name="Test Blog",
        default_author="Tester",
        google_site_verification="verify-token",
    )


def _wp(result=None, side_effect=None) -> WordPressClient:
    wp = WordPressClient("https://wp.test/wp-json/wp/v2")
    wp.get_yoast_fields = AsyncMock(return_value=result, side_effect=side_effect)
    return wp


async def test_home_uses_yoast_from_home_page(settings):
    wp = _wp({"yoast_head_json": {"title": "Welcome", "description": "Hi"}})

    meta = await home_metadata(wp, settings)

    assert meta.title == "Welcome"
    assert meta.description == "Hi"
    assert meta.open_graph.type == "website"
    assert meta.google_site_verification == "verify-token"
    wp.get_yoast_fields.assert_awaited_once_with("pages", "home", "yoast_head_json")


async def test_home_falls_back_to_site_identity(settings):
    meta = await home_metadata(_wp(None), settings)

    assert meta.title == "Test Blog"
    assert meta.description == "WordPress-powered blog"
    assert meta.canonical == "https://wp.test"


async def test_post_without_yoast_uses_post_fields(settings):
    wp = _wp(
        {
            "title": {"rendered": "Fish &amp; Chips"},
            "excerpt": {"rendered": "<p>A short   excerpt</p>"},
            "date": "2025-01-05T10:00:00",
            "modified": "2025-01-06T10:00:00",
        }
    )

    meta = await post_metadata(wp, settings, "fish")

    assert meta.title == "Fish & Chips"
    assert meta.description == "A short excerpt"
    assert meta.canonical == "https://wp.test/posts/fish"
    assert meta.open_graph.type == "article"
    assert meta.published_time == "2025-01-05T10:00:00"
    assert meta.modified_time == "2025-01-06T10:00:00"
    assert [a.name for a in meta.authors] == ["Tester"]
    fields = wp.get_yoast_fields.await_args.args[2]
    assert fields == "yoast_head_json,title,excerpt,date,modified"


async def test_post_yoast_wins(settings):
    wp = _wp(
        {
            "yoast_head_json": {
                "title": "SEO title",
                "canonical": "https://wp.test/canonical/",
                "author": "Writer",
            },
            "title": {"rendered": "Plain title"},
        }
    )

    meta = await post_metadata(wp, settings, "x")

    assert meta.title == "SEO title"
    assert meta.canonical == "https://wp.test/canonical/"
    assert meta.twitter.creator == "Writer"


async def test_missing_post_uses_generic_fallback(settings):
    meta = await post_metadata(_wp(None), settings, "gone")
    assert meta.title == "Post"
    assert meta.canonical == "https://wp.test/posts/gone"


async def test_lookup_failure_never_raises(settings):
    wp = _wp(side_effect=WordPressUnavailable())

    meta = await category_metadata(wp, settings, "news")

    assert meta.title == "Category: news"
    assert meta.canonical == "https://wp.test/category/news"


async def test_unconfigured_client_skips_lookup():
    settings = Settings(wordpress_api_url="", site_name="Test Blog")
    wp = WordPressClient("")
    wp.get_yoast_fields = AsyncMock()

    meta = await about_metadata(wp, settings)

    wp.get_yoast_fields.assert_not_awaited()
    assert meta.title == f"About · {settings.default_author}"
    assert meta.canonical is None


async def test_category_uses_name(settings):
    wp = _wp({"name": "News &amp; Notes", "slug": "news"})
    meta = await category_metadata(wp, settings, "news")
    assert meta.title == "Category: News & Notes"


async def test_about_page_fields(settings):
    wp = _wp(
        {
            "title": {"rendered": "About me"},
            "excerpt": {"rendered": "<p>Who I am</p>"},
        }
    )
    meta = await about_metadata(wp, settings)

    assert meta.title == "About me"
    assert meta.description == "Who I am"
    assert meta.canonical == "https://wp.test/about"
