"""WordPress REST API fetchers.

Each lookup is a single GET against the configured API base. Failures are
reported as exceptions (configuration or transport); a slug lookup with no
match returns None so callers can answer 404.
"""

import logging
import re
from typing import Any

import httpx
from pydantic import ValidationError
from readability import Document

from blogfront.models.wp import PostPage, WPCategory, WPComment, WPPost
from blogfront.services.cache import TTLCache, make_key
from blogfront.services.http_client import get_shared_client

logger = logging.getLogger(__name__)

MISSING_CONFIG_MESSAGE = "Set WORDPRESS_API_URL in .env"
UNREACHABLE_MESSAGE = "Unable to reach WordPress. Check the API URL."

DEFAULT_PER_PAGE = 6
COMMENTS_PER_PAGE = 100

_READ_MORE_RE = re.compile(r"more-link|elementor-widget-read-more", re.IGNORECASE)
_ENTRY_CONTENT_RE = re.compile(
    r'<div class="entry-content[^"]*"[^>]*>([\s\S]*?)</div>\s*</article>',
    re.IGNORECASE,
)


class WordPressError(Exception):
    """Base class for WordPress access failures."""


class ConfigurationError(WordPressError):
    """Required configuration (the API base URL) is missing."""

    def __init__(self, message: str = MISSING_CONFIG_MESSAGE) -> None:
        super().__init__(message)


class WordPressUnavailable(WordPressError):
    """The API could not be reached or answered with a non-success status."""

    def __init__(self, message: str = UNREACHABLE_MESSAGE) -> None:
        super().__init__(message)


def parse_total_pages(headers: httpx.Headers | dict[str, str]) -> int:
    """Read ``X-WP-TotalPages``; default to 1 when absent or malformed."""
    raw = headers.get("X-WP-TotalPages") or headers.get("x-wp-totalpages")
    try:
        return max(int(raw), 1) if raw is not None else 1
    except ValueError:
        return 1


def needs_full_content(post: WPPost) -> bool:
    """True when the rendered content was cut at a "read more" marker."""
    if not post.link or not post.content or not post.content.rendered:
        return False
    return bool(_READ_MORE_RE.search(post.content.rendered))


def extract_entry_content(html: str) -> str | None:
    """Pull the article body out of a rendered WordPress page.

    Tries the theme's ``entry-content`` wrapper first and falls back to
    readability's main-content detection.
    """
    match = _ENTRY_CONTENT_RE.search(html)
    if match and match.group(1).strip():
        return match.group(1)
    summary = Document(html).summary(html_partial=True)
    return summary or None


class WordPressClient:
    """Read-only access to a WordPress REST API.

    ``cache`` is optional; when given, successful GET responses are kept
    for its TTL keyed by URL and query parameters.
    """

    def __init__(
        self,
        api_base: str,
        *,
        cache: TTLCache | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_base = (api_base or "").rstrip("/")
        self._cache = cache
        self._http = http

    @property
    def configured(self) -> bool:
        return bool(self.api_base)

    def _client(self) -> httpx.AsyncClient:
        return self._http or get_shared_client()

    async def _get(
        self,
        path: str,
        params: dict[str, str] | None = None,
        *,
        use_cache: bool = True,
    ) -> tuple[Any, dict[str, str]]:
        """GET ``{api_base}/{path}`` and return (json, headers)."""
        if not self.api_base:
            raise ConfigurationError()

        url = f"{self.api_base}/{path}"
        key = make_key(url, params)
        if use_cache and self._cache is not None:
            hit = self._cache.get(key)
            if hit is not None:
                return hit

        try:
            resp = await self._client().get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("WordPress request failed for %s: %s", url, exc)
            raise WordPressUnavailable() from exc

        if not resp.is_success:
            logger.warning("WordPress API %d for %s", resp.status_code, url)
            raise WordPressUnavailable()

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("WordPress API returned non-JSON body for %s", url)
            raise WordPressUnavailable() from exc

        result = (data, dict(resp.headers))
        if use_cache and self._cache is not None:
            self._cache.set(key, result)
        return result

    async def _first_by_slug(self, resource: str, slug: str) -> dict[str, Any] | None:
        data, _ = await self._get(resource, {"slug": slug, "_embed": ""})
        if not isinstance(data, list) or not data:
            return None
        return data[0]

    async def list_posts(
        self,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        category_id: int | None = None,
        search: str | None = None,
    ) -> PostPage:
        """Fetch one page of posts with embeds, plus the total page count."""
        params = {"_embed": "", "per_page": str(per_page), "page": str(page)}
        if category_id:
            params["categories"] = str(category_id)
        if search:
            params["search"] = search
        data, headers = await self._get("posts", params)
        items = data if isinstance(data, list) else []
        posts = [WPPost.model_validate(item) for item in items]
        return PostPage(posts=posts, total_pages=parse_total_pages(headers))

    async def get_post_by_slug(self, slug: str) -> WPPost | None:
        item = await self._first_by_slug("posts", slug)
        return WPPost.model_validate(item) if item else None

    async def get_page_by_slug(self, slug: str) -> WPPost | None:
        item = await self._first_by_slug("pages", slug)
        return WPPost.model_validate(item) if item else None

    async def get_category_by_slug(self, slug: str) -> WPCategory | None:
        item = await self._first_by_slug("categories", slug)
        return WPCategory.model_validate(item) if item else None

    async def get_comments(self, post_id: int) -> list[WPComment]:
        """Fetch a post's comments as a flat list.

        Best effort: comments never block a post render, so any failure
        yields an empty list. Not cached, so new comments show up at once.
        """
        if not self.api_base:
            return []
        params = {"post": str(post_id), "per_page": str(COMMENTS_PER_PAGE)}
        try:
            data, _ = await self._get("comments", params, use_cache=False)
        except WordPressError:
            return []
        if not isinstance(data, list):
            logger.warning("Unexpected comments payload for post %s", post_id)
            return []
        try:
            return [WPComment.model_validate(item) for item in data]
        except ValidationError as e:
            logger.warning("Malformed comments for post %s: %s", post_id, e)
            return []

    async def get_yoast_fields(
        self, resource: str, slug: str, fields: str
    ) -> dict[str, Any] | None:
        """Fetch the first ``resource`` matching ``slug`` limited to ``fields``.

        Used by metadata resolvers, which only need ``yoast_head_json`` and
        a couple of display fields.
        """
        data, _ = await self._get(resource, {"slug": slug, "_fields": fields})
        if not isinstance(data, list) or not data:
            return None
        return data[0]

    async def fetch_full_content(self, link: str) -> str | None:
        """Fetch a post's public page and extract its full body.

        Used when the REST content was truncated at a read-more marker.
        Returns None on any failure.
        """
        try:
            resp = await self._client().get(link, follow_redirects=True)
            if not resp.is_success:
                logger.debug(
                    "HTTP %d fetching full content %s", resp.status_code, link
                )
                return None
            return extract_entry_content(resp.text)
        except httpx.HTTPError as e:
            logger.debug("Full content fetch failed for %s: %s", link, e)
            return None
        except Exception as e:
            logger.debug("Full content extraction failed for %s: %s", link, e)
            return None
