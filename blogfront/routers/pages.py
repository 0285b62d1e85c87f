"""Home and about page endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from blogfront.config import get_settings
from blogfront.dependencies import get_wordpress, wordpress_http_error
from blogfront.services.content import normalize_content, plain_text
from blogfront.services.page_meta import about_metadata, home_metadata
from blogfront.services.presentation import post_summary
from blogfront.services.seo import generate_blog_json_ld
from blogfront.services.wordpress import WordPressClient, WordPressError

router = APIRouter(tags=["pages"])


@router.get("/home")
async def get_home(wp: WordPressClient = Depends(get_wordpress)):
    """First page of the feed plus site-level metadata."""
    settings = get_settings()
    try:
        result = await wp.list_posts()
    except WordPressError as exc:
        raise wordpress_http_error(exc) from exc
    return {
        "posts": [post_summary(p) for p in result.posts],
        "page": 1,
        "total_pages": result.total_pages,
        "has_more": result.total_pages > 1,
        "metadata": await home_metadata(wp, settings),
        "json_ld": [
            generate_blog_json_ld(
                publisher=settings.publisher_name, url=settings.site_base or None
            )
        ],
    }


@router.get("/pages/about")
async def get_about(wp: WordPressClient = Depends(get_wordpress)):
    """The WordPress page with slug ``about``."""
    settings = get_settings()
    try:
        page = await wp.get_page_by_slug("about")
    except WordPressError as exc:
        raise wordpress_http_error(exc) from exc
    if page is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return {
        "id": page.id,
        "slug": page.slug,
        "title": plain_text(page.title.rendered),
        "content_html": normalize_content(
            page.content.rendered if page.content else ""
        ),
        "metadata": await about_metadata(wp, settings),
    }
