"""SEO metadata: Yoast-first resolution, JSON-LD, and head tag rendering."""

import html
import json
import logging
from typing import Any

from pydantic import ValidationError

from blogfront.models.seo import (
    Author,
    FallbackMeta,
    OgImage,
    OpenGraph,
    SeoMetadata,
    TwitterCard,
    TwitterMeta,
    YoastHead,
)

logger = logging.getLogger(__name__)

ALLOWED_TWITTER_CARDS: tuple[TwitterCard, ...] = (
    "summary",
    "summary_large_image",
    "player",
    "app",
)

def _first(*values: Any) -> Any:
    """First truthy value, or None."""
    for value in values:
        if value:
            return value
    return None


def _coerce_yoast(yoast: YoastHead | dict[str, Any] | None) -> YoastHead | None:
    if yoast is None or isinstance(yoast, YoastHead):
        return yoast
    try:
        return YoastHead.model_validate(yoast)
    except ValidationError:
        logger.warning("Ignoring malformed yoast_head_json", exc_info=True)
        return None


def pick_twitter_card(raw: str | None, has_image: bool) -> TwitterCard:
    """Keep a valid Yoast card type, else choose by image presence."""
    if raw in ALLOWED_TWITTER_CARDS:
        return raw  # type: ignore[return-value]
    return "summary_large_image" if has_image else "summary"


def build_metadata_from_yoast(
    yoast: YoastHead | dict[str, Any] | None,
    fallback: FallbackMeta,
    *,
    default_author: str | None = None,
    google_site_verification: str | None = None,
) -> SeoMetadata:
    """Merge a Yoast block over locally derived fallback values.

    Every field takes the Yoast value when it is non-empty and the fallback
    otherwise. Article-only fields (authors, published/modified times) are
    filled only when ``fallback.type`` is ``"article"``.
    """
    y = _coerce_yoast(yoast) or YoastHead()

    title = _first(y.title, fallback.title) or fallback.title
    description = _first(y.description, fallback.description)
    canonical = _first(y.canonical, fallback.url)

    images: list[OgImage] | None = None
    if y.og_image:
        images = [
            OgImage(
                url=img.url or "",
                width=img.width,
                height=img.height,
                type=img.type,
                alt=img.alt,
            )
            for img in y.og_image
        ]
    elif fallback.image:
        images = [OgImage(url=fallback.image)]

    is_article = fallback.type == "article"
    author = _first(y.author, fallback.author)
    published = _first(y.published_time, fallback.published_time)
    modified = _first(y.modified_time, fallback.modified_time)

    article: dict[str, Any] = {}
    if is_article:
        article = {
            "published_time": published,
            "modified_time": modified,
        }

    open_graph = OpenGraph(
        type=fallback.type,
        title=_first(y.og_title, title) or title,
        description=_first(y.og_description, description),
        url=_first(y.og_url, canonical),
        site_name=_first(y.og_site_name, fallback.site_name, fallback.title),
        images=images,
        authors=[author] if is_article and author else None,
        **article,
    )
    twitter = TwitterMeta(
        card=pick_twitter_card(y.twitter_card, bool(images)),
        title=title,
        description=description,
        images=[img.url for img in images] if images else None,
        creator=author if is_article else None,
    )
    return SeoMetadata(
        title=title,
        description=description,
        canonical=canonical,
        open_graph=open_graph,
        twitter=twitter,
        authors=(
            [Author(name=author or default_author)]
            if is_article and (author or default_author)
            else None
        ),
        google_site_verification=google_site_verification,
        **article,
    )


def _compact(value: Any) -> Any:
    """Drop None entries, as JSON.stringify drops undefined."""
    if isinstance(value, dict):
        return {k: _compact(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_compact(v) for v in value]
    return value


def generate_json_ld(data: dict[str, Any]) -> dict[str, Any]:
    return _compact({"@context": "https://schema.org", **data})


def _publisher(name: str) -> dict[str, Any]:
    return {
        "@type": "Organization",
        "name": name,
        "logo": {"@type": "ImageObject", "url": "/logo.png"},
    }


def generate_article_json_ld(
    *,
    title: str,
    publisher: str,
    description: str | None = None,
    url: str | None = None,
    image_url: str | None = None,
    author: str | None = None,
    published_time: str | None = None,
    modified_time: str | None = None,
) -> dict[str, Any]:
    return generate_json_ld(
        {
            "@type": "Article",
            "headline": title,
            "description": description,
            "url": url,
            "image": [image_url] if image_url else None,
            "datePublished": published_time,
            "dateModified": modified_time or published_time,
            "author": {"@type": "Person", "name": author} if author else None,
            "publisher": _publisher(publisher),
            "mainEntityOfPage": {"@type": "WebPage", "@id": url},
        }
    )


def generate_blog_json_ld(
    *,
    publisher: str,
    url: str | None = None,
    description: str = "WordPress-powered blog",
) -> dict[str, Any]:
    return generate_json_ld(
        {
            "@type": "Blog",
            "url": url,
            "name": f"{publisher} Blog",
            "description": description,
            "publisher": _publisher(publisher),
        }
    )


def generate_breadcrumb_json_ld(breadcrumbs: list[dict[str, str]]) -> dict[str, Any]:
    return generate_json_ld(
        {
            "@type": "BreadcrumbList",
            "itemListElement": [
                {
                    "@type": "ListItem",
                    "position": index,
                    "name": crumb["name"],
                    "item": crumb["url"],
                }
                for index, crumb in enumerate(breadcrumbs, start=1)
            ],
        }
    )


def _meta(attr: str, key: str, value: str | None) -> str:
    if not value:
        return ""
    return f'<meta {attr}="{key}" content="{html.escape(value)}" />\n'


def render_head_tags(
    meta: SeoMetadata, json_ld: list[dict[str, Any]] | None = None
) -> str:
    """Render a metadata record as ``<head>`` markup for crawlers."""
    og = meta.open_graph
    tw = meta.twitter
    parts = [f"<title>{html.escape(meta.title)}</title>\n"]
    parts.append(_meta("name", "description", meta.description))
    if meta.canonical:
        canonical = html.escape(meta.canonical)
        parts.append(f'<link rel="canonical" href="{canonical}" />\n')
    parts.append('<meta name="robots" content="index, follow" />\n')
    parts.append(
        _meta("name", "google-site-verification", meta.google_site_verification)
    )

    parts.append(_meta("property", "og:type", og.type))
    parts.append(_meta("property", "og:title", og.title))
    parts.append(_meta("property", "og:description", og.description))
    parts.append(_meta("property", "og:url", og.url))
    parts.append(_meta("property", "og:site_name", og.site_name))
    for img in og.images or []:
        parts.append(_meta("property", "og:image", img.url))
        if img.width:
            parts.append(_meta("property", "og:image:width", str(img.width)))
        if img.height:
            parts.append(_meta("property", "og:image:height", str(img.height)))
        parts.append(_meta("property", "og:image:alt", img.alt))
    parts.append(_meta("property", "article:published_time", og.published_time))
    parts.append(_meta("property", "article:modified_time", og.modified_time))
    for author in og.authors or []:
        parts.append(_meta("property", "article:author", author))

    parts.append(_meta("name", "twitter:card", tw.card))
    parts.append(_meta("name", "twitter:title", tw.title))
    parts.append(_meta("name", "twitter:description", tw.description))
    for url in tw.images or []:
        parts.append(_meta("name", "twitter:image", url))
    parts.append(_meta("name", "twitter:creator", tw.creator))

    for block in json_ld or []:
        # "</" inside a script body would end it early
        payload = json.dumps(block).replace("</", "<\\/")
        parts.append(f'<script type="application/ld+json">{payload}</script>\n')
    return "".join(parts)
