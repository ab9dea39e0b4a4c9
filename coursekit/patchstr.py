"""A rope-style string whose edits share unchanged pieces."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class _Leaf:
    buffer: str
    offset: int
    size: int

    def text(self) -> str:
        return self.buffer[self.offset : self.offset + self.size]

    def left_part(self, at: int) -> _Leaf:
        return _Leaf(self.buffer, self.offset, at)

    def right_part(self, at: int) -> _Leaf:
        return _Leaf(self.buffer, self.offset + at, self.size - at)


@dataclass(frozen=True)
class _Branch:
    left: _Node
    right: _Node
    size: int


_Node = Union[_Leaf, _Branch]


def _concat(left: _Node | None, right: _Node | None) -> _Node | None:
    if left is None:
        return right
    if right is None:
        return left
    return _Branch(left, right, left.size + right.size)


def _split(node: _Node, at: int, keep_left: bool) -> _Node | None:
    """Return the part of ``node`` before ``at`` (keep_left) or from ``at`` on."""
    if isinstance(node, _Leaf):
        if keep_left:
            return node.left_part(at) if at > 0 else None
        return node.right_part(at) if at < node.size else None

    left_size = node.left.size
    if at < left_size:
        child = _split(node.left, at, keep_left)
        return child if keep_left else _concat(child, node.right)
    child = _split(node.right, at - left_size, keep_left)
    return _concat(node.left, child) if keep_left else child


def _insert(node: _Node, at: int, what: _Node | None) -> _Node | None:
    if isinstance(node, _Leaf):
        left = node.left_part(at) if at > 0 else None
        right = node.right_part(at) if at < node.size else None
        return _concat(_concat(left, what), right)

    left_size = node.left.size
    if at < left_size:
        return _concat(_insert(node.left, at, what), node.right)
    return _concat(node.left, _insert(node.right, at - left_size, what))


def _leaves(node: _Node | None) -> Iterator[_Leaf]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        if isinstance(current, _Leaf):
            if current.size:
                yield current
        else:
            stack.append(current.right)
            stack.append(current.left)


def _debug_lines(node: _Node | None, level: int) -> Iterator[str]:
    pad = " " * level
    if node is None:
        yield f"{pad}null"
    elif isinstance(node, _Leaf):
        yield f"{pad}'{node.text()}'"
    else:
        yield f"{pad}left:"
        yield from _debug_lines(node.left, level + 2)
        yield f"{pad}right:"
        yield from _debug_lines(node.right, level + 2)


class PatchStr:
    """A mutable string built from shared, immutable pieces.

    Copies, substrings and insertions reuse the existing pieces instead of
    copying characters.
    """

    def __init__(self, text: str | PatchStr = "") -> None:
        if isinstance(text, PatchStr):
            self._root: _Node | None = text._root
        elif text:
            self._root = _Leaf(text, 0, len(text))
        else:
            self._root = None

    @classmethod
    def _from_node(cls, node: _Node | None) -> PatchStr:
        result = cls()
        result._root = node
        return result

    @staticmethod
    def _coerce(other: str | PatchStr) -> PatchStr:
        return other if isinstance(other, PatchStr) else PatchStr(other)

    def __len__(self) -> int:
        return 0 if self._root is None else self._root.size

    def __str__(self) -> str:
        return "".join(leaf.text() for leaf in _leaves(self._root))

    def __repr__(self) -> str:
        return f"PatchStr({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PatchStr):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def _check_range(self, start: int, length: int) -> None:
        if start < 0 or length < 0 or start + length > len(self):
            raise IndexError(
                f"range {start}+{length} out of bounds for length {len(self)}"
            )

    def sub_str(self, start: int, length: int) -> PatchStr:
        """Return ``length`` characters starting at ``start``."""
        self._check_range(start, length)
        if length == 0:
            return PatchStr()
        tail = _split(self._root, start, False)
        return self._from_node(_split(tail, length, True))

    def append(self, other: str | PatchStr) -> PatchStr:
        """Append ``other`` in place and return self."""
        addition = self._coerce(other)._root
        self._root = _concat(self._root, addition)
        return self

    def insert(self, pos: int, other: str | PatchStr) -> PatchStr:
        """Insert ``other`` before position ``pos`` in place and return self."""
        if pos < 0 or pos > len(self):
            raise IndexError(f"position {pos} out of bounds for length {len(self)}")
        addition = self._coerce(other)._root
        if self._root is None:
            self._root = addition
        else:
            self._root = _insert(self._root, pos, addition)
        return self

    def remove(self, start: int, length: int) -> PatchStr:
        """Delete ``length`` characters starting at ``start`` and return self."""
        self._check_range(start, length)
        if length == 0:
            return self
        left = _split(self._root, start, True)
        right = _split(self._root, start + length, False)
        self._root = _concat(left, right)
        return self

    def debug(self) -> str:
        """Return an indented outline of the internal piece tree."""
        return "".join(f"{line}\n" for line in _debug_lines(self._root, 0))