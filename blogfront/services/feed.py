"""Incremental post feed: the "load more" / infinite scroll loader."""

import logging

from blogfront.models.wp import WPPost
from blogfront.services.wordpress import (
    DEFAULT_PER_PAGE,
    WordPressClient,
    WordPressError,
)

logger = logging.getLogger(__name__)


class FeedPager:
    """Accumulates pages of posts for one listing (home, category, search).

    ``load_more`` is meant to be fired whenever the reader nears the end of
    the list. A trigger that arrives while a fetch is in flight, or after
    the last page, does nothing.

    A search supersedes any load still in flight; the stale page is
    dropped when it arrives.
    """

    def __init__(
        self,
        wp: WordPressClient,
        *,
        category_id: int | None = None,
        per_page: int = DEFAULT_PER_PAGE,
        posts: list[WPPost] | None = None,
        total_pages: int = 1,
    ) -> None:
        self._wp = wp
        self.category_id = category_id
        self.per_page = per_page
        self.posts: list[WPPost] = list(posts or [])
        self.page = 1
        self.total_pages = total_pages
        self.query = ""
        self.loading = False
        self.error: str | None = None
        self._generation = 0

    @property
    def has_more(self) -> bool:
        return self.page < self.total_pages

    async def _fetch(self, page: int, search: str, replace: bool) -> None:
        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = None
        try:
            result = await self._wp.list_posts(
                page=page,
                per_page=self.per_page,
                category_id=self.category_id,
                search=search or None,
            )
        except WordPressError as e:
            if generation == self._generation:
                logger.warning("Feed page %d failed: %s", page, e)
                self.error = str(e)
            return
        finally:
            if generation == self._generation:
                self.loading = False

        # A newer fetch (a search) started meanwhile; its results win.
        if generation != self._generation:
            logger.debug("Dropping superseded feed page %d", page)
            return
        self.total_pages = result.total_pages
        self.page = page
        self.posts = result.posts if replace else self.posts + result.posts

    async def load_more(self) -> bool:
        """Fetch the next page; returns False when the trigger was ignored."""
        if self.loading or not self.has_more:
            return False
        await self._fetch(self.page + 1, self.query, replace=False)
        return True

    async def search(self, term: str) -> None:
        """Restart the feed from page 1 with a new search term."""
        self.query = term
        await self._fetch(1, term, replace=True)
