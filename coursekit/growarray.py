"""A growable integer array pre-filled with its own indices."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


class GrowArray:
    """An integer array that starts as ``0 .. size-1`` and grows on demand."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("array size must not be negative")
        self._items: list[int] = list(range(size))
        self.capacity = size

    def push(self, element: int) -> None:
        """Append an element, doubling the capacity when it runs out."""
        new_size = len(self._items) + 1
        if new_size > self.capacity:
            self.capacity = max(self.capacity * 2, new_size)
        self._items.append(element)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def render(self) -> str:
        """Return the elements, each followed by a space."""
        return "".join(f"{item} " for item in self._items)


def main(argv: list[str] | None = None) -> int:
    """Ask for a size, build the array, push 99 and print it."""
    argparse.ArgumentParser(
        description="Build an index-filled array and append 99 to it."
    ).parse_args(argv)

    print("What is the size of an array I should create?")
    tokens = sys.stdin.read().split()
    try:
        size = int(tokens[0])
    except (IndexError, ValueError):
        size = -1

    if size <= 0:
        print("Invalid input")
        return 1

    array = GrowArray(size)
    array.push(99)
    print(array.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())