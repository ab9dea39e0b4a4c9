"""A growable integer vector with explicit capacity tracking."""

from __future__ import annotations

import argparse
import bisect
from collections.abc import Iterator


class IntVector:
    """A vector of integers whose capacity doubles as it grows."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def _ensure_capacity(self, new_size: int) -> None:
        if new_size > self.capacity:
            self.capacity = max(self.capacity * 2, new_size)

    def push_back(self, element: int) -> None:
        self._ensure_capacity(len(self._items) + 1)
        self._items.append(element)

    def pop_back(self) -> int:
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def back(self) -> int:
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def clear(self) -> None:
        """Remove all elements, keeping the capacity."""
        self._items.clear()

    def at(self, pos: int) -> int:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")
        return self._items[pos]

    def insert(self, index: int, element: int) -> None:
        """Insert ``element`` before position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._ensure_capacity(len(self._items) + 1)
        self._items.insert(index, element)

    def erase(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items.pop(index)

    def lower_bound(self, value: int) -> int:
        """Index of the first element not less than ``value`` in a sorted vector."""
        return bisect.bisect_left(self._items, value)

    def render(self) -> str:
        """Return the elements followed by the size and capacity."""
        items = "".join(f"{item} " for item in self._items)
        return f"{items}     ({len(self._items)} {self.capacity})"


def main(argv: list[str] | None = None) -> int:
    """Exercise the vector and print its states."""
    argparse.ArgumentParser(description="Demonstrate the integer vector.").parse_args(argv)

    vector = IntVector()
    for value in (1, 2, 3):
        vector.push_back(value)
    print(vector.render())

    vector.pop_back()
    print(vector.render())

    vector.insert(1, 99)
    vector.insert(1, 98)
    print(vector.render())

    vector.erase(1)
    print(vector.render())

    vector.clear()
    for value in (1, 2, 8, 9):
        vector.push_back(value)
    for probe in (0, 2, 3):
        print(vector.lower_bound(probe))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())