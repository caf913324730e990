"""Plain-text renderings of the graph state."""

from __future__ import annotations

from typing import List, Sequence

from .types import Page

TABLE_HEADER = "Index     URL               PageRank  Links               Keywords"
TABLE_RULE = "-" * 99
SEARCH_HEADER = "Rank   PageRank    URL"
SEARCH_RULE = "-" * 45


def format_links(destinations: Sequence[int]) -> str:
    return ", ".join(str(index) for index in destinations)


def format_row(page: Page, destinations: Sequence[int]) -> str:
    """Format one table row: index, url, rank, outgoing indices, keywords."""

    return "  {index:<3d} | {url:<19s}|    {rank:d}    | {links:<18s}| {keywords}".format(
        index=page.index,
        url=page.url,
        rank=page.rank,
        links=format_links(destinations),
        keywords=", ".join(page.keywords),
    )


def render_table(pages: Sequence[Page], outgoing: Sequence[Sequence[int]]) -> str:
    """Render pages in the given order; ``outgoing[k]`` belongs to ``pages[k]``."""

    lines = [TABLE_HEADER, TABLE_RULE]
    for page, destinations in zip(pages, outgoing):
        lines.append(format_row(page, destinations))
    return "\n".join(lines)


def render_matrix(rows: Sequence[Sequence[bool]]) -> str:
    """Render the raw adjacency matrix with 0/1 cells."""

    header = "  _" + "".join(f"{index}_" for index in range(len(rows)))
    lines: List[str] = [header]
    for index, row in enumerate(rows):
        cells = " ".join("1" if linked else "0" for linked in row)
        lines.append(f"{index}| {cells}".rstrip())
    return "\n".join(lines)


def render_search(results: Sequence[Page]) -> str:
    """Render ranked search results, numbered from 1."""

    lines = [SEARCH_HEADER, SEARCH_RULE]
    for position, page in enumerate(results, start=1):
        lines.append(f"  {position:<3d}|{page.rank:>4d}    | {page.url}")
    return "\n".join(lines)
