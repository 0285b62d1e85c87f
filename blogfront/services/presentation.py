"""View helpers that turn WordPress objects into render-ready dicts."""

import re
from datetime import datetime
from typing import Any
from urllib.parse import quote

from blogfront.models.wp import Term, WPPost
from blogfront.services.content import normalize_content, plain_text

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def format_date(iso: str) -> str:
    """Format an ISO timestamp as e.g. ``Jan 5, 2025``.

    Unparseable input is returned unchanged.
    """
    try:
        dt = datetime.fromisoformat(iso.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return iso
    return f"{dt:%b} {dt.day}, {dt.year}"


def slugify_category(category: Term | None) -> str:
    """Prefer the term's slug; otherwise derive one from its name."""
    if category is None:
        return ""
    if category.slug:
        return category.slug
    if not category.name:
        return ""
    return _NON_SLUG_RE.sub("-", category.name.lower()).strip("-")


def build_share_links(url: str, title: str) -> dict[str, str]:
    encoded_url = quote(url, safe="")
    encoded_title = quote(title, safe="")
    return {
        "twitter": f"https://twitter.com/intent/tweet?url={encoded_url}&text={encoded_title}",
        "facebook": f"https://www.facebook.com/sharer/sharer.php?u={encoded_url}",
        "linkedin": f"https://www.linkedin.com/sharing/share-offsite/?url={encoded_url}",
    }


def get_categories(post: WPPost) -> list[Term]:
    """The post's first embedded term list (its categories)."""
    if post.embedded and post.embedded.terms:
        return post.embedded.terms[0]
    return []


def get_featured_image(post: WPPost) -> dict[str, str] | None:
    if not post.embedded or not post.embedded.featured_media:
        return None
    media = post.embedded.featured_media[0]
    return {
        "src": media.source_url or "",
        "alt": plain_text(media.alt_text or post.title.rendered),
    }


def get_comment_count(post: WPPost) -> int | None:
    if not post.embedded or not post.embedded.replies:
        return None
    replies = post.embedded.replies[0]
    return len(replies) if isinstance(replies, list) else None


def _category_view(category: Term) -> dict[str, str]:
    return {
        "name": plain_text(category.name),
        "slug": slugify_category(category),
    }


def post_summary(post: WPPost) -> dict[str, Any]:
    """Card view of a post for listings."""
    return {
        "id": post.id,
        "slug": post.slug,
        "title": plain_text(post.title.rendered),
        "excerpt": plain_text(post.excerpt.rendered),
        "date": post.date,
        "date_display": format_date(post.date),
        "image": get_featured_image(post),
        "categories": [_category_view(c) for c in get_categories(post)[:3]],
        "comment_count": get_comment_count(post),
    }


def post_detail(post: WPPost, *, post_url: str) -> dict[str, Any]:
    """Full view of a post: normalized body, breadcrumb category, share links."""
    title = plain_text(post.title.rendered)
    categories = get_categories(post)
    primary = categories[0] if categories else None
    return {
        **post_summary(post),
        "link": post.link,
        "content_html": normalize_content(post.content.rendered if post.content else ""),
        "primary_category": _category_view(primary) if primary else None,
        "share": build_share_links(post.link or post_url, title),
    }
