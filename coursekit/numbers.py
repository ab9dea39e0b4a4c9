"""Sort integers read from input and store them as text or binary."""

from __future__ import annotations

import argparse
import os
import struct
import sys
from collections.abc import Iterable


def _is_text_path(path: str | os.PathLike[str]) -> bool:
    return os.fspath(path).endswith(".txt")


def write_numbers(path: str | os.PathLike[str], numbers: Iterable[int]) -> list[int]:
    """Sort the numbers and write them to ``path``.

    A path ending in ``.txt`` gets one decimal number per line; any other
    path gets the numbers as native 32-bit integers. Returns the sorted list.
    """
    ordered = sorted(numbers)
    if _is_text_path(path):
        with open(path, "w", encoding="ascii") as handle:
            handle.writelines(f"{number}\n" for number in ordered)
    else:
        with open(path, "wb") as handle:
            handle.write(struct.pack(f"={len(ordered)}i", *ordered))
    return ordered


def _read_numbers(tokens: list[str], count: int) -> list[int]:
    numbers: list[int] = []
    failed = False
    for position in range(count):
        value = 0
        if not failed:
            try:
                value = int(tokens[position])
            except (IndexError, ValueError):
                failed = True
                value = 0
        numbers.append(value)
    return numbers


def main(argv: list[str] | None = None) -> int:
    """Read a file name, a count and that many numbers, then write them sorted."""
    argparse.ArgumentParser(
        description="Read a file name, a count and numbers from standard input."
    ).parse_args(argv)

    tokens = sys.stdin.read().split()
    name = tokens[0] if tokens else ""
    try:
        count = int(tokens[1])
    except (IndexError, ValueError):
        count = -1

    if count < 0 or not name:
        print("Neplatny vstup")
        return 1

    numbers = _read_numbers(tokens[2:], count)

    if _is_text_path(name):
        print("Writing text file")
    else:
        print("Writing binary file")
    write_numbers(name, numbers)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())