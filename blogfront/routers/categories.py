"""Category archive endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from blogfront.config import get_settings
from blogfront.dependencies import get_wordpress, wordpress_http_error
from blogfront.services.content import plain_text
from blogfront.services.page_meta import category_metadata
from blogfront.services.presentation import post_summary
from blogfront.services.wordpress import (
    DEFAULT_PER_PAGE,
    WordPressClient,
    WordPressError,
)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/{slug}")
async def get_category(
    slug: str = Path(..., max_length=200),
    page: int = Query(default=1, ge=1),
    wp: WordPressClient = Depends(get_wordpress),
):
    """A category with one page of its posts and the category metadata."""
    settings = get_settings()
    try:
        category = await wp.get_category_by_slug(slug)
        if category is None:
            raise HTTPException(status_code=404, detail="Category not found")
        result = await wp.list_posts(
            page=page, per_page=DEFAULT_PER_PAGE, category_id=category.id
        )
    except WordPressError as exc:
        raise wordpress_http_error(exc) from exc

    return {
        "category": {
            "id": category.id,
            "name": plain_text(category.name),
            "slug": category.slug,
            "description": plain_text(category.description),
        },
        "posts": [post_summary(p) for p in result.posts],
        "page": page,
        "total_pages": result.total_pages,
        "has_more": page < result.total_pages,
        "metadata": await category_metadata(wp, settings, slug),
    }
