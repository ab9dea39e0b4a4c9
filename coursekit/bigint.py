"""Arbitrary-precision signed integers stored as 32-bit limbs."""

from __future__ import annotations

from typing import Union

DIGIT_BITS = 32
DIGIT_MASK = (1 << DIGIT_BITS) - 1
_DECIMAL_CHUNK = 9
_DECIMAL_BASE = 10**_DECIMAL_CHUNK
_HEX_CHUNK = DIGIT_BITS // 4
_DECIMAL_CHARS = frozenset("0123456789")
_HEX_CHARS = frozenset("0123456789abcdef")

Operand = Union["BigInt", int, str]


def _trim(limbs: list[int]) -> list[int]:
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _limbs_from_int(value: int) -> list[int]:
    limbs = []
    while value:
        limbs.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
    return limbs


def _cmp_mag(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add_mag(a: tuple[int, ...], b: tuple[int, ...]) -> list[int]:
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i, x in enumerate(a):
        total = x + (b[i] if i < len(b) else 0) + carry
        result.append(total & DIGIT_MASK)
        carry = total >> DIGIT_BITS
    if carry:
        result.append(carry)
    return result


def _sub_mag(a: tuple[int, ...], b: tuple[int, ...]) -> list[int]:
    """Return ``a - b``; ``a`` must not be smaller than ``b``."""
    result = []
    borrow = 0
    for i, x in enumerate(a):
        diff = x - (b[i] if i < len(b) else 0) - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff & DIGIT_MASK)
    return _trim(result)


def _mul_mag(a: tuple[int, ...], b: tuple[int, ...]) -> list[int]:
    if not a or not b:
        return []
    out = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            total = out[i + j] + x * y + carry
            out[i + j] = total & DIGIT_MASK
            carry = total >> DIGIT_BITS
        k = i + len(b)
        while carry:
            total = out[k] + carry
            out[k] = total & DIGIT_MASK
            carry = total >> DIGIT_BITS
            k += 1
    return _trim(out)


def _mul_add_small(limbs: list[int], factor: int, addend: int) -> list[int]:
    result = []
    carry = addend
    for x in limbs:
        total = x * factor + carry
        result.append(total & DIGIT_MASK)
        carry = total >> DIGIT_BITS
    if carry:
        result.append(carry)
    return result


def _div_rem_small(limbs: list[int], divisor: int) -> tuple[list[int], int]:
    quotient = [0] * len(limbs)
    rem = 0
    for i in reversed(range(len(limbs))):
        wide = (rem << DIGIT_BITS) | limbs[i]
        quotient[i], rem = divmod(wide, divisor)
    return _trim(quotient), rem


class BigInt:
    """An immutable signed integer of unbounded size."""

    __slots__ = ("_negative", "_limbs")

    def __init__(self, value: Operand = 0) -> None:
        if isinstance(value, BigInt):
            negative, limbs = value._negative, value._limbs
        elif isinstance(value, str):
            parsed = BigInt.parse(value)
            negative, limbs = parsed._negative, parsed._limbs
        elif isinstance(value, int) and not isinstance(value, bool):
            negative, limbs = value < 0, tuple(_limbs_from_int(abs(value)))
        else:
            raise TypeError(f"cannot make a BigInt from {type(value).__name__}")
        self._negative = negative and bool(limbs)
        self._limbs = limbs

    @classmethod
    def _from_parts(cls, negative: bool, limbs: list[int]) -> BigInt:
        result = cls.__new__(cls)
        trimmed = tuple(_trim(list(limbs)))
        result._negative = negative and bool(trimmed)
        result._limbs = trimmed
        return result

    @classmethod
    def parse(cls, text: str) -> BigInt:
        """Parse an optionally signed decimal or ``0x``-prefixed lowercase hex number."""
        if not text:
            raise ValueError("Empty")
        negative = False
        view = text
        if view[0] == "-":
            negative = True
            view = view[1:]
        elif view[0] == "+":
            view = view[1:]

        is_hex = len(view) >= 2 and view.startswith("0x")
        if is_hex:
            view = view[2:]
        if not view:
            raise ValueError("Empty")

        if is_hex:
            if not set(view) <= _HEX_CHARS:
                raise ValueError("Not 0-9a-f")
            limbs = []
            end = len(view)
            while end > 0:
                start = max(0, end - _HEX_CHUNK)
                limbs.append(int(view[start:end], 16))
                end = start
        else:
            if not set(view) <= _DECIMAL_CHARS:
                raise ValueError("Not 0-9")
            head = len(view) % _DECIMAL_CHUNK
            limbs = [int(view[:head])] if head else [0]
            for start in range(head, len(view), _DECIMAL_CHUNK):
                chunk = int(view[start:start + _DECIMAL_CHUNK])
                limbs = _mul_add_small(limbs, _DECIMAL_BASE, chunk)
        return cls._from_parts(negative, limbs)

    @classmethod
    def read(cls, text: str) -> tuple[BigInt, str]:
        """Read a number from the start of ``text`` the way a stream would.

        Leading spaces are skipped, then an optional sign, an optional ``0x``
        and decimal digits are consumed. Returns the number and the unread
        rest of the text; raises ValueError if nothing valid was read.
        """
        pos = 0
        while pos < len(text) and text[pos] == " ":
            pos += 1
        start = pos
        if pos < len(text) and text[pos] in "+-":
            pos += 1
        if pos < len(text) and text[pos] == "0":
            pos += 1
            if pos < len(text) and text[pos] == "x":
                pos += 1
        while pos < len(text) and text[pos] in _DECIMAL_CHARS:
            pos += 1
        return cls.parse(text[start:pos]), text[pos:]

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, (int, str)) and not isinstance(other, bool):
            return BigInt(other)
        return None

    def _to_int(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = (value << DIGIT_BITS) | limb
        return -value if self._negative else value

    def cmp(self, other: Operand) -> int:
        """Three-way comparison: -1, 0 or 1."""
        rhs = BigInt(other)
        if not self._limbs and not rhs._limbs:
            return 0
        if self._negative and not rhs._negative:
            return -1
        if not self._negative and rhs._negative:
            return 1
        result = self.cmp_absolute(rhs)
        return -result if self._negative else result

    def cmp_absolute(self, other: Operand) -> int:
        """Three-way comparison of the magnitudes."""
        return _cmp_mag(self._limbs, BigInt(other)._limbs)

    def _add(self, rhs: BigInt) -> BigInt:
        if self._negative == rhs._negative:
            return BigInt._from_parts(self._negative, _add_mag(self._limbs, rhs._limbs))
        if _cmp_mag(self._limbs, rhs._limbs) >= 0:
            return BigInt._from_parts(self._negative, _sub_mag(self._limbs, rhs._limbs))
        return BigInt._from_parts(rhs._negative, _sub_mag(rhs._limbs, self._limbs))

    def __add__(self, other: Operand) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(rhs)

    def __radd__(self, other: Operand) -> BigInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(self)

    def __sub__(self, other: Operand) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(-rhs)

    def __rsub__(self, other: Operand) -> BigInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(-self)

    def _mul(self, rhs: BigInt) -> BigInt:
        negative = self._negative != rhs._negative
        return BigInt._from_parts(negative, _mul_mag(self._limbs, rhs._limbs))

    def __mul__(self, other: Operand) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._mul(rhs)

    def __rmul__(self, other: Operand) -> BigInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._mul(self)

    def __neg__(self) -> BigInt:
        return BigInt._from_parts(not self._negative, list(self._limbs))

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) == 0

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) < 0

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) <= 0

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) > 0

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) >= 0

    def __hash__(self) -> int:
        return hash(self._to_int())

    def __str__(self) -> str:
        if not self._limbs:
            return "0"
        chunks = []
        limbs = list(self._limbs)
        while limbs:
            limbs, rem = _div_rem_small(limbs, _DECIMAL_BASE)
            chunks.append(rem)
        parts = [str(chunks[-1])]
        parts.extend(str(chunk).zfill(_DECIMAL_CHUNK) for chunk in reversed(chunks[:-1]))
        sign = "-" if self._negative else ""
        return sign + "".join(parts)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __format__(self, spec: str) -> str:
        if spec.endswith("x"):
            return format(self.to_hex(), spec[:-1])
        if spec.endswith("d"):
            spec = spec[:-1]
        return format(str(self), spec)

    def to_hex(self) -> str:
        """Lowercase hexadecimal digits without a prefix, signed with ``-``."""
        if not self._limbs:
            return "0"
        parts = [format(self._limbs[-1], "x")]
        parts.extend(format(limb, f"0{_HEX_CHUNK}x") for limb in reversed(self._limbs[:-1]))
        sign = "-" if self._negative else ""
        return sign + "".join(parts)