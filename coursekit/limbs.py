"""Arithmetic on little-endian sequences of 32-bit limbs.

A number is held as a mutable sequence of ints in ``0 .. 2**32 - 1``, least
significant limb first. Functions that take a mutable sequence update it in
place and return the carry (or borrow) that did not fit.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

DIGIT_BITS = 32
DIGIT_MASK = (1 << DIGIT_BITS) - 1
KARATSUBA_THRESHOLD = 64

_HEX_VALUES = {char: value for value, char in enumerate("0123456789abcdef")}


def add_carry(a: int, b: int, carry: int) -> tuple[int, int]:
    """Return ``(low limb of a + b + carry, carry out)``."""
    total = a + b + carry
    return total & DIGIT_MASK, total >> DIGIT_BITS


def sub_carry(a: int, b: int, carry: int) -> tuple[int, int]:
    """Return ``(low limb of a - b - carry, borrow out)``."""
    difference = a - b - carry
    return difference & DIGIT_MASK, 1 if difference < 0 else 0


def mac_carry(a: int, b: int, c: int, acc: int) -> tuple[int, int]:
    """Return ``(low limb, high limb)`` of ``acc + a + b * c``."""
    total = acc + a + b * c
    return total & DIGIT_MASK, total >> DIGIT_BITS


def _propagate_add(a: MutableSequence[int], carry: int, start: int, stop: int) -> int:
    for i in range(start, stop):
        if not carry:
            break
        a[i], carry = add_carry(a[i], 0, carry)
    return carry


def _propagate_sub(a: MutableSequence[int], borrow: int, start: int, stop: int) -> int:
    for i in range(start, stop):
        if not borrow:
            break
        a[i], borrow = sub_carry(a[i], 0, borrow)
    return borrow


def _add_into(
    a: MutableSequence[int], b: Sequence[int], offset: int = 0, stop: int | None = None
) -> int:
    stop = len(a) if stop is None else stop
    if offset + len(b) > stop:
        raise ValueError("addend is longer than the target")
    carry = 0
    for i, digit in enumerate(b, offset):
        a[i], carry = add_carry(a[i], digit, carry)
    return _propagate_add(a, carry, offset + len(b), stop)


def _mac_into(a: MutableSequence[int], b: Sequence[int], c: int, offset: int = 0) -> int:
    if c == 0:
        return 0
    if offset + len(b) > len(a):
        raise ValueError("multiplicand is longer than the target")
    carry = 0
    for i, digit in enumerate(b, offset):
        a[i], carry = mac_carry(a[i], digit, c, carry)
    return _propagate_add(a, carry, offset + len(b), len(a))


def add2(a: MutableSequence[int], b: Sequence[int]) -> int:
    """``a += b``; ``a`` must be at least as long as ``b``. Returns the carry."""
    return _add_into(a, b)


def sub2(a: MutableSequence[int], b: Sequence[int]) -> int:
    """``a -= b`` over the limbs of ``a``. Returns the borrow."""
    common = min(len(a), len(b))
    borrow = 0
    for i, digit in enumerate(b[:common]):
        a[i], borrow = sub_carry(a[i], digit, borrow)
    return _propagate_sub(a, borrow, common, len(a))


def twos_complement(a: MutableSequence[int]) -> None:
    """Negate ``a`` modulo ``2**(32*len(a))``: invert every bit and add one."""
    carry = 1
    for i, digit in enumerate(a):
        a[i], carry = add_carry(~digit & DIGIT_MASK, 0, carry)


def add_digit(a: MutableSequence[int], b: int) -> int:
    """``a += b`` for a single limb ``b``. Returns the carry."""
    return _propagate_add(a, b, 0, len(a))


def sub_digit(a: MutableSequence[int], b: int) -> int:
    """``a -= b`` for a single limb ``b``. Returns the borrow."""
    return _propagate_sub(a, b, 0, len(a))


def mul_digit(a: MutableSequence[int], b: int) -> int:
    """``a *= b`` for a single limb ``b``. Returns the overflow limb."""
    carry = 0
    for i, digit in enumerate(a):
        a[i], carry = mac_carry(0, digit, b, carry)
    return carry


def mac_digit(a: MutableSequence[int], b: Sequence[int], c: int) -> int:
    """``a += b * c`` for a single limb ``c``. Returns the overflow."""
    return _mac_into(a, b, c)


def div_rem_digit(a: MutableSequence[int], divisor: int) -> int:
    """Divide ``a`` in place by a single limb and return the remainder."""
    if divisor == 0:
        raise ZeroDivisionError("division by a zero limb")
    remainder = 0
    for i in reversed(range(len(a))):
        a[i], remainder = divmod((remainder << DIGIT_BITS) | a[i], divisor)
    return remainder


def parse_digit_decimal(text: str) -> int:
    """Read decimal characters into one limb (wrapping at 32 bits)."""
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            raise ValueError(f"not a decimal digit: {char!r}")
        value = (value * 10 + ord(char) - ord("0")) & DIGIT_MASK
    return value


def parse_digit_hexadecimal(text: str) -> int:
    """Read lower-case hexadecimal characters into one limb (wrapping at 32 bits)."""
    value = 0
    for char in text:
        if char not in _HEX_VALUES:
            raise ValueError(f"not a hexadecimal digit: {char!r}")
        value = (value * 16 + _HEX_VALUES[char]) & DIGIT_MASK
    return value


def normalized(digits: Sequence[int]) -> list[int]:
    """Return the limbs without the high zero limbs."""
    end = len(digits)
    while end and digits[end - 1] == 0:
        end -= 1
    return list(digits[:end])


def _sum(a: Sequence[int], b: Sequence[int]) -> list[int]:
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    total = [*longer, 0]
    add2(total, shorter)
    return total


def _multiply(x: Sequence[int], y: Sequence[int]) -> list[int]:
    x = normalized(x)
    y = normalized(y)
    if len(x) > len(y):
        x, y = y, x
    result = [0] * (len(x) + len(y))

    if len(x) <= KARATSUBA_THRESHOLD:
        for i, digit in enumerate(x):
            _mac_into(result, y, digit, i)
        return result

    # Karatsuba: x*y = z0 + (z3 - z2 - z0) << half + z2 << 2*half
    half = len(x) // 2
    x0, x1 = x[:half], x[half:]
    y0, y1 = y[:half], y[half:]
    z0 = _multiply(x0, y0)
    z2 = _multiply(x1, y1)
    z3 = _multiply(_sum(x0, x1), _sum(y0, y1))
    sub2(z3, z2)
    sub2(z3, z0)

    _add_into(result, normalized(z0))
    _add_into(result, normalized(z2), 2 * half)
    _add_into(result, normalized(z3), half)
    return result


def mac3(out: MutableSequence[int], x: Sequence[int], y: Sequence[int]) -> None:
    """``out += x * y``, using Karatsuba multiplication for long operands.

    Only the low ``len(x) + len(y)`` limbs of ``out`` (after dropping high zero
    limbs of the operands) take part; raises OverflowError if the result
    does not fit there.
    """
    x = normalized(x)
    y = normalized(y)
    width = min(len(out), len(x) + len(y))
    product = normalized(_multiply(x, y))
    if len(product) > width or _add_into(out, product, 0, width):
        raise OverflowError("product does not fit in the output limbs")