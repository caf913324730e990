"""Parsing of the pages and links files into graph entries.

Pages file: one page per line, the url followed by zero or more keywords.
Links file: one link per line, a source url and a destination url.
Tokens are separated by any run of whitespace and blank lines are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .config import EngineConfig, load_config
from .errors import MalformedInputError
from .graph import WebGraph, build_graph
from .types import LinkEntry, PageEntry

logger = logging.getLogger(__name__)


def parse_pages(lines: Iterable[str], source: str = "pages") -> List[PageEntry]:
    entries: List[PageEntry] = []
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        entries.append(PageEntry(tokens[0], tokens[1:]))
    logger.debug("Parsed %d page entries from %s", len(entries), source)
    return entries


def parse_links(lines: Iterable[str], source: str = "links") -> List[LinkEntry]:
    entries: List[LinkEntry] = []
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) != 2:
            raise MalformedInputError(
                f"{source} line {number} must contain a source and a destination url, got {len(tokens)} tokens."
            )
        entries.append(LinkEntry(tokens[0], tokens[1]))
    logger.debug("Parsed %d link entries from %s", len(entries), source)
    return entries


def _read_lines(path: str | Path) -> List[str]:
    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8") as stream:
            return stream.read().splitlines()
    except OSError as exc:
        raise MalformedInputError(f"{file_path} could not be read: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"{file_path} is not valid UTF-8 text: {exc.reason}") from exc


def load_graph(
    pages_path: str | Path | None = None,
    links_path: str | Path | None = None,
    config: EngineConfig | None = None,
) -> WebGraph:
    """Read both files and build a graph; paths default to the configured ones."""

    engine_config = config or load_config(None)
    pages_file = Path(pages_path or engine_config.pages_file)
    links_file = Path(links_path or engine_config.links_file)

    page_entries = parse_pages(_read_lines(pages_file), source=str(pages_file))
    link_entries = parse_links(_read_lines(links_file), source=str(links_file))
    logger.info("Loading WebGraph from %s and %s", pages_file, links_file)
    return build_graph(page_entries, link_entries, engine_config)
