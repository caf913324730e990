"""In-memory web graph with in-degree ranks and keyword search."""

from .config import EngineConfig, load_config
from .errors import (
    CapacityExceededError,
    DuplicateLinkError,
    DuplicateURLError,
    EndpointNotFoundError,
    MalformedInputError,
    PageNotFoundError,
    WebGraphError,
)
from .graph import WebGraph, build_graph
from .loader import load_graph
from .ordering import OrderBy, sort_pages
from .types import LinkEntry, Page, PageEntry

__all__ = [
    "CapacityExceededError",
    "DuplicateLinkError",
    "DuplicateURLError",
    "EndpointNotFoundError",
    "EngineConfig",
    "LinkEntry",
    "MalformedInputError",
    "OrderBy",
    "Page",
    "PageEntry",
    "PageNotFoundError",
    "WebGraph",
    "WebGraphError",
    "build_graph",
    "load_config",
    "load_graph",
    "sort_pages",
]
