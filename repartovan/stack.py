"""A bounded stack of packages: the load of one delivery van."""

from __future__ import annotations

from collections.abc import Iterator

from repartovan.package import Package

CAPACITY = 5


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(Exception):
    """Raised when popping from an empty stack."""


class Stack:
    """A last-in, first-out container with a fixed capacity."""

    def __init__(self, capacity: int = CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[Package] = []

    def push(self, package: Package) -> None:
        if self.is_full():
            raise StackFullError("No es posible meter un paquete. LLENO")
        self._items.append(package)

    def pop(self) -> Package:
        if self.is_empty():
            raise StackEmptyError("No hay ningun paquete a extraer.")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Package]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def describe(self) -> str:
        """Return the labels from top to bottom, or a note that it is empty."""
        if self.is_empty():
            return "La pila esta vacia\n"
        return "".join(f"{p.label_text()}\n\n" for p in self) + "\n"