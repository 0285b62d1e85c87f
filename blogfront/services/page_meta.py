"""Per-page metadata resolvers.

Each resolver fetches the page's ``yoast_head_json`` (restricted with
``_fields``), derives a fallback from the object itself, and merges the
two. Metadata never breaks a render: on any WordPress failure the
fallback alone is used.
"""

import logging
from typing import Any

from blogfront.config import Settings
from blogfront.models.seo import FallbackMeta, SeoMetadata
from blogfront.services.content import plain_text
from blogfront.services.seo import build_metadata_from_yoast
from blogfront.services.wordpress import WordPressClient, WordPressError

logger = logging.getLogger(__name__)

_PAGE_FIELDS = "yoast_head_json,title,excerpt"


def _build(
    yoast: dict[str, Any] | None, fallback: FallbackMeta, settings: Settings
) -> SeoMetadata:
    return build_metadata_from_yoast(
        yoast,
        fallback,
        default_author=settings.default_author,
        google_site_verification=settings.google_site_verification,
    )


def _site_url(settings: Settings, path: str = "") -> str | None:
    base = settings.site_base
    return f"{base}{path}" if base else None


async def _lookup(
    wp: WordPressClient, resource: str, slug: str, fields: str
) -> dict[str, Any] | None:
    if not wp.configured:
        return None
    try:
        return await wp.get_yoast_fields(resource, slug, fields)
    except WordPressError as e:
        logger.warning("Metadata lookup failed for %s/%s: %s", resource, slug, e)
        return None


def _with_item(fallback: FallbackMeta, item: dict[str, Any]) -> FallbackMeta:
    """Refine a fallback with the title/excerpt of a fetched post or page."""
    yoast = item.get("yoast_head_json") or {}
    title = (item.get("title") or {}).get("rendered", "")
    excerpt = (item.get("excerpt") or {}).get("rendered", "")
    return fallback.model_copy(
        update={
            "title": yoast.get("title") or plain_text(title) or fallback.title,
            "description": yoast.get("description") or plain_text(excerpt),
            "url": yoast.get("canonical") or fallback.url,
        }
    )


async def home_metadata(wp: WordPressClient, settings: Settings) -> SeoMetadata:
    fallback = FallbackMeta(
        title=settings.site_name,
        description="WordPress-powered blog",
        url=_site_url(settings),
        site_name=settings.site_name,
    )
    item = await _lookup(wp, "pages", "home", "yoast_head_json")
    yoast = item.get("yoast_head_json") if item else None
    return _build(yoast, fallback, settings)


async def post_metadata(
    wp: WordPressClient, settings: Settings, slug: str
) -> SeoMetadata:
    fallback = FallbackMeta(
        title="Post",
        url=_site_url(settings, f"/posts/{slug}"),
        site_name=settings.site_name,
        type="article",
    )
    item = await _lookup(wp, "posts", slug, _PAGE_FIELDS + ",date,modified")
    if not item:
        return _build(None, fallback, settings)
    fallback = _with_item(fallback, item).model_copy(
        update={
            "published_time": item.get("date"),
            "modified_time": item.get("modified"),
        }
    )
    return _build(item.get("yoast_head_json"), fallback, settings)


async def category_metadata(
    wp: WordPressClient, settings: Settings, slug: str
) -> SeoMetadata:
    fallback = FallbackMeta(
        title=f"Category: {slug}",
        url=_site_url(settings, f"/category/{slug}"),
        site_name=settings.site_name,
    )
    item = await _lookup(wp, "categories", slug, "yoast_head_json,name,slug")
    if not item:
        return _build(None, fallback, settings)
    yoast = item.get("yoast_head_json") or {}
    name = plain_text(item.get("name")) or slug
    fallback = fallback.model_copy(
        update={
            "title": yoast.get("title") or f"Category: {name}",
            "description": yoast.get("description"),
            "url": yoast.get("canonical") or fallback.url,
        }
    )
    return _build(item.get("yoast_head_json"), fallback, settings)


async def about_metadata(wp: WordPressClient, settings: Settings) -> SeoMetadata:
    fallback = FallbackMeta(
        title=f"About · {settings.default_author}",
        description="About this site",
        url=_site_url(settings, "/about"),
        site_name=settings.site_name,
    )
    item = await _lookup(wp, "pages", "about", _PAGE_FIELDS)
    if not item:
        return _build(None, fallback, settings)
    return _build(item.get("yoast_head_json"), _with_item(fallback, item), settings)
