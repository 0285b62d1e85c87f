"""Post listing and post detail endpoints."""

import asyncio
import html
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from fastapi.responses import HTMLResponse

from blogfront.config import get_settings
from blogfront.dependencies import get_wordpress, wordpress_http_error
from blogfront.models.wp import Rendered, WPPost
from blogfront.services.comments import build_comment_tree, render_comment_thread
from blogfront.services.content import plain_text
from blogfront.services.page_meta import post_metadata
from blogfront.services.presentation import post_detail, post_summary
from blogfront.services.seo import (
    generate_article_json_ld,
    generate_breadcrumb_json_ld,
    render_head_tags,
)
from blogfront.services.wordpress import (
    DEFAULT_PER_PAGE,
    WordPressClient,
    WordPressError,
    needs_full_content,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


async def _load_post(wp: WordPressClient, slug: str) -> WPPost:
    try:
        post = await wp.get_post_by_slug(slug)
    except WordPressError as exc:
        raise wordpress_http_error(exc) from exc
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


async def _full_content(wp: WordPressClient, post: WPPost) -> str | None:
    if not needs_full_content(post):
        return None
    return await wp.fetch_full_content(post.link)


@router.get("")
async def list_posts(
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=DEFAULT_PER_PAGE, ge=1, le=100),
    category: int | None = Query(default=None, ge=1),
    search: str | None = Query(default=None, max_length=200),
    wp: WordPressClient = Depends(get_wordpress),
):
    """One page of post cards, with the total page count for pagination."""
    try:
        result = await wp.list_posts(
            page=page, per_page=per_page, category_id=category, search=search
        )
    except WordPressError as exc:
        raise wordpress_http_error(exc) from exc
    return {
        "posts": [post_summary(p) for p in result.posts],
        "page": page,
        "total_pages": result.total_pages,
        "has_more": page < result.total_pages,
    }


@router.get("/{slug}")
async def get_post(
    slug: str = Path(..., max_length=200),
    wp: WordPressClient = Depends(get_wordpress),
) -> dict[str, Any]:
    """Full post view: normalized body, threaded comments, and metadata."""
    settings = get_settings()
    post = await _load_post(wp, slug)

    comments, full_html, meta = await asyncio.gather(
        wp.get_comments(post.id),
        _full_content(wp, post),
        post_metadata(wp, settings, slug),
    )
    if full_html:
        post = post.model_copy(update={"content": Rendered(rendered=full_html)})

    post_url = f"{settings.site_base}/posts/{slug}"
    view = post_detail(post, post_url=post_url)
    view["comment_count"] = len(comments)
    view["comments"] = render_comment_thread(build_comment_tree(comments))

    crumbs = [{"name": "Home", "url": settings.site_base or "/"}]
    if view["primary_category"]:
        category = view["primary_category"]
        crumbs.append(
            {
                "name": category["name"],
                "url": f"{settings.site_base}/category/{category['slug']}",
            }
        )
    crumbs.append({"name": view["title"], "url": post_url})

    image = view["image"]
    view["metadata"] = meta
    view["json_ld"] = [
        generate_article_json_ld(
            title=view["title"],
            publisher=settings.publisher_name,
            description=meta.description,
            url=meta.canonical or post_url,
            image_url=image["src"] if image else None,
            author=meta.authors[0].name if meta.authors else None,
            published_time=meta.published_time or post.date,
            modified_time=meta.modified_time,
        ),
        generate_breadcrumb_json_ld(crumbs),
    ]
    return view


@router.get("/{slug}/head")
async def get_post_head(
    slug: str = Path(..., max_length=200),
    wp: WordPressClient = Depends(get_wordpress),
):
    """Serve a minimal HTML document carrying the post's meta tags.

    Social crawlers don't execute JavaScript, so they get the resolved
    Open Graph / Twitter tags from here.
    """
    settings = get_settings()
    post = await _load_post(wp, slug)
    meta = await post_metadata(wp, settings, slug)
    title = plain_text(post.title.rendered)
    href = html.escape(meta.canonical or f"{settings.site_base}/posts/{slug}")

    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
{render_head_tags(meta)}</head>
<body>
<p><a href="{href}">{html.escape(title)}</a></p>
</body>
</html>"""
    return HTMLResponse(content=page)
