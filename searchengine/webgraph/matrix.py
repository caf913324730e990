"""Square boolean adjacency matrix addressed by page index."""

from __future__ import annotations

from typing import List

from .errors import DuplicateLinkError


class LinkMatrix:
    """Directed adjacency matrix that grows and shrinks with the page count.

    Cell ``(i, j)`` is ``True`` when page ``i`` links to page ``j``. The
    matrix never shifts cells in place: :meth:`compact` builds a fresh
    buffer and swaps it in.
    """

    def __init__(self, size: int = 0) -> None:
        self._cells: List[List[bool]] = [[False] * size for _ in range(size)]

    def __len__(self) -> int:
        return len(self._cells)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"page index {index} out of range for {len(self._cells)} pages")

    def grow(self) -> None:
        """Add an empty row and column for a newly registered page."""

        for row in self._cells:
            row.append(False)
        self._cells.append([False] * (len(self._cells) + 1))

    def has_link(self, source: int, destination: int) -> bool:
        self._check(source)
        self._check(destination)
        return self._cells[source][destination]

    def add_link(self, source: int, destination: int) -> None:
        if self.has_link(source, destination):
            raise DuplicateLinkError("Link was already established.")
        self._cells[source][destination] = True

    def remove_link(self, source: int, destination: int) -> None:
        """Clear the cell; a missing link is not an error."""

        self._check(source)
        self._check(destination)
        self._cells[source][destination] = False

    def in_degree(self, destination: int) -> int:
        self._check(destination)
        return sum(1 for row in self._cells if row[destination])

    def outgoing(self, source: int) -> List[int]:
        self._check(source)
        return [index for index, linked in enumerate(self._cells[source]) if linked]

    def rows(self) -> List[List[bool]]:
        """Return a copy of the full matrix."""

        return [list(row) for row in self._cells]

    def compact(self, removed_index: int) -> None:
        """Drop row and column ``removed_index`` and renumber the rest down by one."""

        self._check(removed_index)
        compacted = [
            [linked for column, linked in enumerate(row) if column != removed_index]
            for index, row in enumerate(self._cells)
            if index != removed_index
        ]
        self._cells = compacted
