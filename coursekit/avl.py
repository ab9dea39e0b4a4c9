"""A self-balancing AVL search tree with a three-way comparison."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

Compare = Callable[[Any, Any], int]


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(y: _Node) -> _Node:
    x = y.right
    y.right = x.left
    x.left = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rebalance(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) == -1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) == 1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class AvlTree:
    """An ordered set of keys kept balanced on every insert and removal."""

    def __init__(self, compare: Compare | None = None) -> None:
        self._compare = compare or _default_compare
        self._root: _Node | None = None
        self._size = 0

    def _insert(self, node: _Node | None, key: Any) -> tuple[_Node, bool]:
        if node is None:
            return _Node(key), True
        ordering = self._compare(key, node.key)
        if ordering < 0:
            node.left, added = self._insert(node.left, key)
        elif ordering > 0:
            node.right, added = self._insert(node.right, key)
        else:
            node.key = key
            return node, False
        return _rebalance(node), added

    def insert(self, key: Any) -> None:
        """Add ``key``, replacing an equal key if one is present."""
        self._root, added = self._insert(self._root, key)
        if added:
            self._size += 1

    def _remove(self, node: _Node | None, key: Any) -> tuple[_Node | None, bool]:
        if node is None:
            return None, False
        ordering = self._compare(key, node.key)
        if ordering < 0:
            node.left, removed = self._remove(node.left, key)
        elif ordering > 0:
            node.right, removed = self._remove(node.right, key)
        elif node.left is not None and node.right is not None:
            successor = _leftmost(node.right)
            node.key = successor.key
            node.right, removed = self._remove(node.right, successor.key)
        else:
            return (node.left if node.left is not None else node.right), True
        return _rebalance(node), removed

    def remove(self, key: Any) -> None:
        """Remove the key equal to ``key``; do nothing if there is none."""
        self._root, removed = self._remove(self._root, key)
        if removed:
            self._size -= 1

    def find(self, key: Any) -> Any:
        """Return the stored key equal to ``key``; raise KeyError if absent."""
        node = self._root
        while node is not None:
            ordering = self._compare(key, node.key)
            if ordering < 0:
                node = node.left
            elif ordering > 0:
                node = node.right
            else:
                return node.key
        raise KeyError(key)

    def __contains__(self, key: Any) -> bool:
        try:
            self.find(key)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.key
            current = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def render(self) -> str:
        """Pre-order listing, one key per line, indented by depth."""
        lines: list[str] = []
        stack: list[tuple[_Node, int]] = []
        if self._root is not None:
            stack.append((self._root, 0))
        while stack:
            node, depth = stack.pop()
            lines.append(f"{' ' * depth}{node.key}\n")
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))
        return "".join(lines)


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def make_value(i: int) -> int:
    """Deterministic sample key in ``-63 .. 63`` (32-bit, truncating remainder)."""
    value = _to_int32(_to_int32(i * i * 127) + ~i)
    remainder = abs(value) % 64
    return -remainder if value < 0 else remainder