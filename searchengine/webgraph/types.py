"""Typed data structures used by the web graph engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, NamedTuple


@dataclass
class Page:
    """A single web page tracked by the graph.

    ``index`` and ``rank`` are owned by the graph: the index is renumbered
    when an earlier page is removed and the rank is overwritten on every
    recompute. Callers outside the registry only ever see copies.
    """

    url: str
    index: int
    keywords: List[str] = field(default_factory=list)
    rank: int = 0

    def snapshot(self) -> "Page":
        return replace(self, keywords=list(self.keywords))


class PageEntry(NamedTuple):
    """Parsed line of the pages file."""

    url: str
    keywords: List[str]


class LinkEntry(NamedTuple):
    """Parsed line of the links file."""

    source: str
    destination: str
