"""A sorted vector with a caller-supplied three-way ordering."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a binary search: where the value is, or where it would go."""

    index: int
    found: bool


def binary_search_by(items: Sequence[T], order: Callable[[T], int]) -> SearchResult:
    """Binary-search ``items`` with ``order`` giving an element's position
    relative to the target: negative if it comes before, positive if after."""
    size = len(items)
    left = 0
    right = size
    while left < right:
        mid = left + size // 2
        cmp = order(items[mid])
        if cmp < 0:
            left = mid + 1
        elif cmp > 0:
            right = mid
        else:
            return SearchResult(mid, True)
        size = right - left
    return SearchResult(left, False)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison using ``<`` and ``>``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _order_for_range_start(extract: Callable[[Any], Any], key: Any, element: Any) -> int:
    # Never reports equality, so the search ends at the first element with key >= target.
    if extract(element) < key:
        return -1
    return 1


def _order_for_range_end(extract: Callable[[Any], Any], key: Any, element: Any) -> int:
    # Never reports equality, so the search ends at the first element with key > target.
    if extract(element) > key:
        return 1
    return -1


class SortedVec(Generic[T]):
    """A list kept sorted by a three-way ordering, without duplicates."""

    def __init__(self, order: Callable[[T, T], int] = compare_values) -> None:
        self._order = order
        self._data: list[T] = []

    def _order_against(self, value: T, element: T) -> int:
        return self._order(element, value)

    def find(self, value: T) -> SearchResult:
        """Locate ``value``, or the position where it would be inserted."""
        return binary_search_by(self._data, partial(self._order_against, value))

    def insert_at(self, position: SearchResult, value: T) -> None:
        """Insert ``value`` at a position from :meth:`find`, unless it was found."""
        if not position.found:
            self._data.insert(position.index, value)

    def insert(self, value: T) -> bool:
        """Insert ``value``; return False if an equal element is already present."""
        position = self.find(value)
        self.insert_at(position, value)
        return not position.found

    def remove(self, value: T) -> T:
        """Remove and return the element equal to ``value``; raise KeyError if absent."""
        position = self.find(value)
        if not position.found:
            raise KeyError(value)
        return self._data.pop(position.index)

    def find_range_by_key(self, key: K, extract: Callable[[T], K]) -> range:
        """Indices of the elements whose extracted key equals ``key``.

        The vector must be sorted so that extracted keys are non-decreasing.
        """
        start = binary_search_by(self._data, partial(_order_for_range_start, extract, key))
        end = binary_search_by(self._data, partial(_order_for_range_end, extract, key))
        return range(start.index, end.index)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)