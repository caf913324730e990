"""Page registry: one entry per page, kept densely indexed."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence

from .errors import DuplicateURLError, MalformedInputError, PageNotFoundError
from .types import Page

logger = logging.getLogger(__name__)


class PageRegistry:
    """Ordered collection of pages keyed by url.

    Pages are stored in index order, so ``self._pages[i].index == i`` holds
    after every operation.
    """

    def __init__(self) -> None:
        self._pages: List[Page] = []
        self._by_url: Dict[str, Page] = {}

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __contains__(self, url: object) -> bool:
        return url in self._by_url

    def add(self, url: str, keywords: Sequence[str]) -> Page:
        """Append a page at the next free index and return it."""

        if not url:
            raise DuplicateURLError("A page url must not be empty.")
        if keywords is None or isinstance(keywords, str):
            raise MalformedInputError(f"Keywords for {url} must be a sequence of strings.")
        if url in self._by_url:
            raise DuplicateURLError(f"{url} already exists in the WebGraph.")

        page = Page(url=url, index=len(self._pages), keywords=list(keywords))
        self._pages.append(page)
        self._by_url[url] = page
        logger.debug("Registered %s at index %d", url, page.index)
        return page

    def remove(self, url: str) -> int:
        """Remove the page and close the gap; return the index it held."""

        page = self._by_url.get(url)
        if page is None:
            raise PageNotFoundError(f"{url} does not exist in the WebGraph.")

        removed_index = page.index
        for later in self._pages[removed_index + 1:]:
            later.index -= 1
        del self._pages[removed_index]
        del self._by_url[url]
        logger.debug("Removed %s from index %d", url, removed_index)
        return removed_index

    def find_by_url(self, url: str) -> Optional[Page]:
        return self._by_url.get(url)

    def at(self, index: int) -> Page:
        return self._pages[index]
