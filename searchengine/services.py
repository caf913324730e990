"""Service layer sharing one web graph between concurrent requests.

The graph engine assumes that nothing else touches the graph while an
operation is running: a page removal renumbers indices and compacts the
link matrix before ranks are recomputed. :class:`GraphService` wraps a
single :class:`~searchengine.webgraph.WebGraph` and runs every operation,
reads included, under one lock. Readers receive snapshots, never live
pages.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Sequence, Tuple

from django.conf import settings

from .webgraph import LinkEntry, OrderBy, Page, WebGraph, load_config, load_graph

logger = logging.getLogger(__name__)


class GraphService:
    """Serialises access to a single web graph."""

    def __init__(self, graph: WebGraph) -> None:
        self._graph = graph
        self._lock = threading.Lock()

    def add_page(self, url: str, keywords: Sequence[str]) -> Page:
        with self._lock:
            return self._graph.add_page(url, keywords)

    def remove_page(self, url: str) -> None:
        with self._lock:
            self._graph.remove_page(url)

    def add_link(self, source: str, destination: str) -> None:
        with self._lock:
            self._graph.add_link(source, destination)

    def remove_link(self, source: str, destination: str) -> None:
        with self._lock:
            self._graph.remove_link(source, destination)

    def list_pages(self, order_by: OrderBy = OrderBy.INDEX) -> List[Page]:
        with self._lock:
            return self._graph.list_pages(order_by)

    def search(self, keyword: str) -> List[Page]:
        with self._lock:
            return self._graph.search(keyword)

    def links(self) -> List[LinkEntry]:
        with self._lock:
            return self._graph.links()

    def table(self, order_by: OrderBy = OrderBy.INDEX) -> List[Tuple[Page, List[int]]]:
        with self._lock:
            return self._graph.table(order_by)

    def render(self, order_by: OrderBy = OrderBy.INDEX) -> str:
        with self._lock:
            return self._graph.render(order_by)

    def render_matrix(self) -> str:
        with self._lock:
            return self._graph.render_matrix()


def load_service_from_settings() -> GraphService:
    """Build a service from the ``SEARCHENGINE_*`` settings.

    Missing data files yield an empty graph so the site can start before
    any data has been provided; a malformed file is still an error.
    """

    config = load_config(getattr(settings, 'SEARCHENGINE_CONFIG', None))
    pages_file = Path(getattr(settings, 'SEARCHENGINE_PAGES_FILE', config.pages_file))
    links_file = Path(getattr(settings, 'SEARCHENGINE_LINKS_FILE', config.links_file))

    if pages_file.exists() and links_file.exists():
        graph = load_graph(pages_file, links_file, config)
    else:
        logger.warning('Data files %s / %s not found; starting with an empty WebGraph.', pages_file, links_file)
        graph = WebGraph(config)
    return GraphService(graph)
