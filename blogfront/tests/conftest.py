"""Shared fixtures for blogfront tests."""

import pytest

API_BASE = "https://wp.test/wp-json/wp/v2"


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from blogfront.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import blogfront.services.http_client as http_mod

    http_mod._client = None

    # 3. App response cache
    from blogfront.main import app

    app.state.response_cache.clear()


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from blogfront.config import Settings, get_settings

    test_settings = Settings(
        wordpress_api_url=API_BASE + "/",
        wpform_id="7",
        wordpress_basic_auth_user="editor",
        wordpress_basic_auth_password="app-pass",
        site_name="Test Blog",
        publisher_name="Test.xyz",
        default_author="Tester",
        google_site_verification="verify-token",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("blogfront.config.get_settings", lambda: test_settings)

    # Patch get_settings in every module that imports it directly
    # (from blogfront.config import get_settings creates a local binding
    # that the blogfront.config monkeypatch above does not affect)
    for mod_path in [
        "blogfront.main",
        "blogfront.dependencies",
        "blogfront.routers.posts",
        "blogfront.routers.categories",
        "blogfront.routers.pages",
        "blogfront.routers.forms",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def make_post():
    """Factory for WordPress post payloads as the REST API returns them."""
    return _make_post


def _make_post(
    post_id: int = 1,
    slug: str = "hello-world",
    title: str = "Hello &amp; Welcome",
    content: str = "<p>Body</p>",
    **extra,
) -> dict:
    post = {
        "id": post_id,
        "slug": slug,
        "date": "2025-01-05T10:00:00",
        "link": f"https://wp.test/{slug}/",
        "title": {"rendered": title},
        "excerpt": {"rendered": "<p>Short &#8220;excerpt&#8221;</p>"},
        "content": {"rendered": content},
    }
    post.update(extra)
    return post
