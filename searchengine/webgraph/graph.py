"""Graph engine coordinating the page registry and the link matrix.

Every mutating operation validates its inputs first, mutates the registry
and matrix together, and then recomputes all ranks from scratch. A rank is
the number of pages linking into a page; there is no damping or iteration.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from . import render as render_module
from .config import EngineConfig, load_config
from .errors import (
    CapacityExceededError,
    EndpointNotFoundError,
    MalformedInputError,
    PageNotFoundError,
)
from .matrix import LinkMatrix
from .ordering import OrderBy, sort_pages
from .registry import PageRegistry
from .types import LinkEntry, Page, PageEntry

logger = logging.getLogger(__name__)


class WebGraph:
    """Directed graph of pages with in-degree ranks and keyword search."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or load_config(None)
        self._registry = PageRegistry()
        self._matrix = LinkMatrix()

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, url: object) -> bool:
        return url in self._registry

    # Mutations

    def add_page(self, url: str, keywords: Sequence[str]) -> Page:
        limit = self.config.max_pages
        if limit is not None and len(self._registry) >= limit:
            raise CapacityExceededError(f"The WebGraph already holds the maximum of {limit} pages.")

        page = self._registry.add(url, keywords)
        self._matrix.grow()
        self.recompute_ranks()
        logger.debug("Added page %s", url)
        return page.snapshot()

    def remove_page(self, url: str) -> None:
        removed_index = self._registry.remove(url)
        self._matrix.compact(removed_index)
        self.recompute_ranks()
        logger.debug("Removed page %s (index %d)", url, removed_index)

    def add_link(self, source: str, destination: str) -> None:
        source_index, destination_index = self._resolve_endpoints(source, destination)
        self._matrix.add_link(source_index, destination_index)
        self.recompute_ranks()
        logger.debug("Added link %s -> %s", source, destination)

    def remove_link(self, source: str, destination: str) -> None:
        """Remove a link; removing a link that does not exist is a no-op."""

        source_index, destination_index = self._resolve_endpoints(source, destination)
        self._matrix.remove_link(source_index, destination_index)
        self.recompute_ranks()
        logger.debug("Removed link %s -> %s", source, destination)

    def recompute_ranks(self) -> None:
        for page in self._registry:
            page.rank = self._matrix.in_degree(page.index)

    def _resolve_endpoints(self, source: str, destination: str) -> Tuple[int, int]:
        source_page = self._registry.find_by_url(source)
        if source_page is None:
            raise EndpointNotFoundError(source)
        destination_page = self._registry.find_by_url(destination)
        if destination_page is None:
            raise EndpointNotFoundError(destination)
        return source_page.index, destination_page.index

    # Queries

    def get_page(self, url: str) -> Page:
        page = self._registry.find_by_url(url)
        if page is None:
            raise PageNotFoundError(f"{url} does not exist in the WebGraph.")
        return page.snapshot()

    def find_by_url(self, url: str) -> Optional[Page]:
        page = self._registry.find_by_url(url)
        return page.snapshot() if page is not None else None

    def urls(self) -> List[str]:
        return [page.url for page in self._registry]

    def has_link(self, source: str, destination: str) -> bool:
        source_index, destination_index = self._resolve_endpoints(source, destination)
        return self._matrix.has_link(source_index, destination_index)

    def links(self) -> List[LinkEntry]:
        """Return every link by url, ordered by source then destination index."""

        result: List[LinkEntry] = []
        for page in self._registry:
            for destination in self._matrix.outgoing(page.index):
                result.append(LinkEntry(page.url, self._registry.at(destination).url))
        return result

    def list_pages(self, order_by: OrderBy = OrderBy.INDEX) -> List[Page]:
        return sort_pages((page.snapshot() for page in self._registry), order_by)

    def search(self, keyword: str) -> List[Page]:
        """Return pages carrying ``keyword`` exactly, highest rank first."""

        if not keyword:
            return []
        matches = [page.snapshot() for page in self._registry if keyword in page.keywords]
        return sort_pages(matches, OrderBy.RANK)

    def adjacency(self) -> List[List[bool]]:
        return self._matrix.rows()

    # Rendering

    def table(self, order_by: OrderBy = OrderBy.INDEX) -> List[Tuple[Page, List[int]]]:
        """Pair each page, in display order, with the indices it links to."""

        return [(page, self._matrix.outgoing(page.index)) for page in self.list_pages(order_by)]

    def render(self, order_by: OrderBy = OrderBy.INDEX) -> str:
        rows = self.table(order_by)
        return render_module.render_table([page for page, _ in rows], [links for _, links in rows])

    def render_matrix(self) -> str:
        return render_module.render_matrix(self._matrix.rows())

    def render_search(self, keyword: str) -> str:
        return render_module.render_search(self.search(keyword))


def build_graph(
    page_entries: Iterable[Tuple[str, Sequence[str]]],
    link_entries: Iterable[Tuple[str, str]],
    config: EngineConfig | None = None,
) -> WebGraph:
    """Construct a graph from parsed page and link entries.

    Pages are added before links, each in input order. Any failure
    propagates and no graph is returned.
    """

    graph = WebGraph(config)
    for position, entry in enumerate(page_entries, start=1):
        url, keywords = _coerce_page_entry(entry, position)
        graph.add_page(url, keywords)
    for position, entry in enumerate(link_entries, start=1):
        source, destination = _coerce_link_entry(entry, position)
        graph.add_link(source, destination)

    logger.info("Built WebGraph with %d pages and %d links", len(graph), len(graph.links()))
    return graph


def _coerce_page_entry(entry: object, position: int) -> PageEntry:
    try:
        url, keywords = entry  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"Page entry {position} must be a (url, keywords) pair.") from exc
    if not isinstance(url, str) or not url:
        raise MalformedInputError(f"Page entry {position} has an empty or invalid url.")
    message = f"Page entry {position} keywords must be a sequence of strings."
    if isinstance(keywords, str) or keywords is None:
        raise MalformedInputError(message)
    try:
        keywords = list(keywords)
    except TypeError as exc:
        raise MalformedInputError(message) from exc
    if not all(isinstance(keyword, str) for keyword in keywords):
        raise MalformedInputError(message)
    return PageEntry(url, keywords)


def _coerce_link_entry(entry: object, position: int) -> LinkEntry:
    try:
        source, destination = entry  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"Link entry {position} must be a (source, destination) pair.") from exc
    if not isinstance(source, str) or not isinstance(destination, str) or not source or not destination:
        raise MalformedInputError(f"Link entry {position} must name two urls.")
    return LinkEntry(source, destination)
