"""A first-in, first-out queue of packages."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from repartovan.package import Package


class QueueEmptyError(Exception):
    """Raised when taking from an empty queue."""


class Queue:
    """An unbounded FIFO queue of packages."""

    def __init__(self) -> None:
        self._items: deque[Package] = deque()

    def insert(self, package: Package) -> None:
        self._items.append(package)

    def remove(self) -> Package:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Package:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Package]:
        return iter(self._items)

    def describe(self) -> str:
        """Return every label from front to back, followed by a blank line."""
        return "".join(f"{p.label_text()}\n\n" for p in self) + "\n"