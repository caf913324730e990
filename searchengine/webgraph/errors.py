"""Exceptions raised by the web graph engine.

Every error is recoverable: the engine leaves the graph untouched when it
raises, and callers decide how to report the failure.
"""

from __future__ import annotations


class WebGraphError(Exception):
    """Base class for all graph errors."""


class DuplicateURLError(WebGraphError):
    """A page with the url already exists, or the url is empty."""


class PageNotFoundError(WebGraphError):
    """No page with the requested url exists."""


class EndpointNotFoundError(WebGraphError):
    """One end of a link does not resolve to a page."""

    def __init__(self, url: str) -> None:
        super().__init__(f"{url} could not be found")
        self.url = url


class DuplicateLinkError(WebGraphError):
    """The directed link is already established."""


class CapacityExceededError(WebGraphError):
    """The graph already holds the configured maximum number of pages."""


class MalformedInputError(WebGraphError):
    """Construction input could not be parsed into pages or links."""
