"""Walk the blog feed page by page from the command line.

Usage:
    python -m scripts.crawl_feed                     # every post, newest first
    python -m scripts.crawl_feed --search fastapi    # search results only
    python -m scripts.crawl_feed --category news     # one category

Prints one JSON line per post (the same card view the API serves).
"""

import argparse
import asyncio
import json
import logging
import sys

from blogfront.config import get_settings
from blogfront.services.cache import TTLCache
from blogfront.services.feed import FeedPager
from blogfront.services.http_client import close_shared_client
from blogfront.services.presentation import post_summary
from blogfront.services.wordpress import WordPressClient, WordPressError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--search", default="", help="search term")
    parser.add_argument("--category", default="", help="category slug")
    parser.add_argument("--per-page", type=int, default=10)
    return parser.parse_args(argv)


async def crawl(wp: WordPressClient, args: argparse.Namespace) -> int:
    category_id = None
    if args.category:
        category = await wp.get_category_by_slug(args.category)
        if category is None:
            print(f"ERROR: category {args.category!r} not found", file=sys.stderr)
            return 1
        category_id = category.id

    pager = FeedPager(wp, category_id=category_id, per_page=args.per_page)
    await pager.search(args.search)
    emitted = 0
    while True:
        if pager.error:
            print(f"ERROR: {pager.error}", file=sys.stderr)
            return 1
        for post in pager.posts[emitted:]:
            print(json.dumps(post_summary(post), ensure_ascii=False))
        emitted = len(pager.posts)
        if not await pager.load_more():
            break

    print(f"\n{emitted} posts across {pager.total_pages} pages", file=sys.stderr)
    return 0


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    settings = get_settings()
    wp = WordPressClient(settings.api_base, cache=TTLCache(ttl=settings.cache_ttl))
    try:
        return await crawl(wp, args)
    except WordPressError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        await close_shared_client()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
