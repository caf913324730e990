"""Shared fixtures for web graph tests."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple

import pytest

from searchengine.webgraph.config import load_config
from searchengine.webgraph.graph import WebGraph, build_graph


@pytest.fixture()
def engine_config():
    """Provide a mutable copy of the default engine configuration."""

    return load_config(None)


def make_graph(
    pages: Dict[str, Sequence[str]] | Iterable[Tuple[str, Sequence[str]]],
    links: Iterable[Tuple[str, str]] = (),
    *,
    config=None,
) -> WebGraph:
    entries = list(pages.items()) if isinstance(pages, dict) else list(pages)
    return build_graph(entries, list(links), config)


def assert_dense_indices(graph: WebGraph) -> None:
    indices = [page.index for page in graph.list_pages()]
    assert indices == list(range(len(graph)))


def assert_ranks_match_in_degree(graph: WebGraph) -> None:
    incoming = {url: 0 for url in graph.urls()}
    for link in graph.links():
        incoming[link.destination] += 1
    assert {page.url: page.rank for page in graph.list_pages()} == incoming


@pytest.fixture()
def sample_graph():
    """Five pages with a handful of links, mirroring a small data file."""

    return make_graph(
        {
            "a.com": ["news", "sports"],
            "b.com": ["news"],
            "c.com": ["weather", "news"],
            "d.com": ["sports"],
            "e.com": [],
        },
        [
            ("a.com", "b.com"),
            ("a.com", "c.com"),
            ("b.com", "c.com"),
            ("c.com", "a.com"),
            ("d.com", "c.com"),
            ("e.com", "d.com"),
        ],
    )
