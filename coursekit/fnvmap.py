"""FNV-1a hashing and an open-addressing hash map built on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
_MASK32 = 0xFFFFFFFF


class FnvHasher:
    """Incremental 32-bit FNV-1a hasher over signed bytes."""

    def __init__(self) -> None:
        self.state = OFFSET_BASIS

    def hash_char(self, c: int | str) -> None:
        """Mix one byte (or one-character string) into the state."""
        value = ord(c) if isinstance(c, str) else c
        if value >= 128:
            value -= 256
        self.state = ((self.state ^ (value & _MASK32)) * FNV_PRIME) & _MASK32

    def hash_int(self, value: int) -> None:
        """Mix the four little-endian bytes of a 32-bit integer."""
        for byte in (value & _MASK32).to_bytes(4, "little"):
            self.hash_char(byte)

    def hash_str(self, text: str | bytes) -> None:
        """Mix a string followed by its length, so adjacent strings stay distinct."""
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        for byte in data:
            self.hash_char(byte)
        self.hash_int(len(data))

    def finish(self) -> int:
        return self.state


def _hash_key(key: Any) -> int:
    hasher = FnvHasher()
    if isinstance(key, (str, bytes)):
        hasher.hash_str(key)
    elif isinstance(key, int):
        hasher.hash_int(key)
    elif callable(getattr(key, "hash", None)):
        key.hash(hasher)
    else:
        raise TypeError(f"cannot hash key of type {type(key).__name__}")
    return hasher.finish()


@dataclass(slots=True)
class _Entry:
    hash: int
    key: Any
    value: Any


class FnvMap:
    """Linear-probing hash map with a power-of-two table."""

    def __init__(self) -> None:
        self._entries: list[_Entry | None] = []
        self._occupied = 0

    def _find_slot(self, key: Any, key_hash: int) -> int | None:
        size = len(self._entries)
        if size == 0:
            return None
        mask = size - 1
        start = key_hash & mask
        for step in range(size):
            slot = (start + step) & mask
            entry = self._entries[slot]
            if entry is None or (entry.hash == key_hash and entry.key == key):
                return slot
        return None

    def _resize(self, new_capacity: int) -> None:
        old = self._entries
        self._entries = [None] * new_capacity
        for entry in old:
            if entry is not None:
                slot = self._find_slot(entry.key, entry.hash)
                self._entries[slot] = entry

    def insert(self, key: Any, value: Any) -> bool:
        """Store ``value`` under ``key``; return True if the key was present."""
        size = len(self._entries)
        if size == 0:
            self._resize(8)
        elif self._occupied > size // 2:
            self._resize(size * 2)

        key_hash = _hash_key(key)
        slot = self._find_slot(key, key_hash)
        contained = self._entries[slot] is not None
        if not contained:
            self._occupied += 1
        self._entries[slot] = _Entry(key_hash, key, value)
        return contained

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        key_hash = _hash_key(key)
        slot = self._find_slot(key, key_hash)
        if slot is None or self._entries[slot] is None:
            raise KeyError(key)
        removed = self._entries[slot].value
        self._entries[slot] = None
        self._occupied -= 1

        mask = len(self._entries) - 1
        hole = slot
        probe = slot
        while True:
            probe = (probe + 1) & mask
            entry = self._entries[probe]
            if entry is None:
                break
            home = entry.hash & mask
            if (probe > hole and (home <= hole or home > probe)) or (
                probe < hole and home <= hole and home > probe
            ):
                self._entries[hole] = entry
                self._entries[probe] = None
                hole = probe
        return removed

    def get(self, key: Any, default: Any = None) -> Any:
        slot = self._find_slot(key, _hash_key(key))
        if slot is None or self._entries[slot] is None:
            return default
        return self._entries[slot].value

    def __contains__(self, key: Any) -> bool:
        slot = self._find_slot(key, _hash_key(key))
        return slot is not None and self._entries[slot] is not None

    def __len__(self) -> int:
        return self._occupied

    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._entries)