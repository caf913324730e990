"""Ordering policies for listing and ranking pages."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, List

from .types import Page


class OrderBy(Enum):
    """Stateless total orderings over pages.

    Each member carries the single-letter code used by the menu.
    """

    INDEX = "i"
    URL = "u"
    RANK = "r"

    @property
    def key(self) -> Callable[[Page], Any]:
        return _KEYS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_code(cls, code: str) -> "OrderBy":
        """Resolve a menu letter (``i``/``u``/``r``) or member name."""

        normalized = (code or "").strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown ordering: {code!r}")


_KEYS = {
    OrderBy.INDEX: lambda page: page.index,
    OrderBy.URL: lambda page: page.url,
    OrderBy.RANK: lambda page: -page.rank,
}

_LABELS = {
    OrderBy.INDEX: "Sort based on index (ASC)",
    OrderBy.URL: "Sort based on URL (ASC)",
    OrderBy.RANK: "Sort based on rank (DSC)",
}


def sort_pages(pages: Iterable[Page], order_by: OrderBy = OrderBy.INDEX) -> List[Page]:
    """Return a new list of pages ordered by the policy.

    ``sorted`` is stable, so pages that compare equal (same rank) keep the
    relative order they had in ``pages``.
    """

    return sorted(pages, key=order_by.key)
