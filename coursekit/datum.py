"""Dates, genders and people with normalised names."""

from __future__ import annotations

import argparse
import enum
import functools
import re
from dataclasses import dataclass

_DATE_PATTERN = re.compile(
    r"\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)"
)


@functools.total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar date, ordered by year, month and day."""

    day: int
    month: int
    year: int

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse ``day<sep>month<sep>year`` with any one-character separators."""
        match = _DATE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"invalid date: {text!r}")
        day, _, month, _, year = match.groups()
        return cls(int(day), int(month), int(year))

    def compare(self, other: Date) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after ``other``."""
        mine = (self.year, self.month, self.day)
        theirs = (other.year, other.month, other.day)
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) < 0

    def __str__(self) -> str:
        return f"{self.day}.{self.month}.{self.year}"


class Gender(enum.Enum):
    MALE = "male"
    FEMALE = "female"

    def __str__(self) -> str:
        return self.value


def normalize_words(text: str) -> str:
    """Capitalise the first letter of each word and lower-case the rest."""
    result = []
    at_boundary = True
    for char in text:
        if char.isascii() and char.isalpha():
            result.append(char.upper() if at_boundary else char.lower())
            at_boundary = False
        else:
            result.append(char)
            at_boundary = True
    return "".join(result)


@dataclass
class Person:
    """A person; the name is normalised on creation."""

    name: str
    birth: Date
    gender: Gender

    def __post_init__(self) -> None:
        self.name = normalize_words(self.name)

    def __str__(self) -> str:
        return f"{self.name}, {self.birth}, {self.gender}"


def main(argv: list[str] | None = None) -> int:
    """Print a sample person."""
    argparse.ArgumentParser(description="Print a sample person.").parse_args(argv)
    person = Person("fiLIp grEgoR", Date(1, 1, 1), Gender.FEMALE)
    print(person)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())