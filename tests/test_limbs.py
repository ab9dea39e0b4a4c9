import random

import pytest

from coursekit import limbs

MASK = 0xFFFFFFFF


def to_limbs(value, width=None):
    digits = []
    while value:
        digits.append(value & MASK)
        value >>= 32
    if width is not None:
        digits.extend([0] * (width - len(digits)))
    return digits


def to_int(digits):
    return sum(digit << (32 * i) for i, digit in enumerate(digits))


def test_add_carry_overflows_into_carry():
    assert limbs.add_carry(MASK, 1, 0) == (0, 1)
    assert limbs.add_carry(MASK, MASK, 1) == (MASK, 1)
    assert limbs.add_carry(2, 3, 1) == (6, 0)


def test_sub_carry_borrows():
    assert limbs.sub_carry(0, 1, 0) == (MASK, 1)
    assert limbs.sub_carry(5, 3, 1) == (1, 0)


def test_mac_carry_splits_double_limb():
    low, high = limbs.mac_carry(MASK, MASK, MASK, MASK)
    assert low + (high << 32) == MASK + MASK + MASK * MASK
    assert 0 <= low <= MASK and 0 <= high <= MASK


def test_add2_matches_integer_sum():
    a_value = 2**100 - 1
    b_value = 2**64 + 12345
    a = to_limbs(a_value, 5)
    carry = limbs.add2(a, to_limbs(b_value))
    assert carry == 0
    assert to_int(a) == a_value + b_value


def test_add2_returns_carry_out():
    a = [MASK, MASK]
    assert limbs.add2(a, [1]) == 1
    assert a == [0, 0]


def test_add2_rejects_longer_addend():
    with pytest.raises(ValueError):
        limbs.add2([1], [1, 2])


def test_sub2_and_borrow():
    a = to_limbs(2**64, 3)
    assert limbs.sub2(a, [1]) == 0
    assert to_int(a) == 2**64 - 1
    b = [0, 0]
    assert limbs.sub2(b, [1]) == 1
    assert b == [MASK, MASK]


def test_twos_complement_negates_modulo_width():
    original = to_limbs(123456789123456789, 3)
    negated = list(original)
    limbs.twos_complement(negated)
    assert (to_int(original) + to_int(negated)) % 2**96 == 0


def test_add_and_sub_digit_round_trip():
    a = [MASK, 7]
    assert limbs.add_digit(a, 1) == 0
    assert to_int(a) == MASK + 7 * 2**32 + 1
    assert limbs.sub_digit(a, 1) == 0
    assert a == [MASK, 7]


def test_sub_digit_underflow_reports_borrow():
    a = [0]
    assert limbs.sub_digit(a, 1) == 1
    assert a == [MASK]


def test_mul_digit_matches_integer_product():
    value = 2**90 + 987654321
    a = to_limbs(value)
    carry = limbs.mul_digit(a, 1_000_000_000)
    assert to_int(a) + (carry << (32 * len(a))) == value * 1_000_000_000


def test_mac_digit_accumulates():
    a = to_limbs(5, 4)
    b = to_limbs(2**70 + 3)
    assert limbs.mac_digit(a, b, 9) == 0
    assert to_int(a) == 5 + (2**70 + 3) * 9


def test_mac_digit_zero_multiplier_leaves_target():
    a = [1, 2]
    assert limbs.mac_digit(a, [MASK, MASK], 0) == 0
    assert a == [1, 2]


def test_div_rem_digit_invariant():
    value = int("15818899999165008224")
    a = to_limbs(value)
    remainder = limbs.div_rem_digit(a, 1_000_000_000)
    assert to_int(a) * 1_000_000_000 + remainder == value
    assert 0 <= remainder < 1_000_000_000


def test_div_rem_digit_by_zero():
    with pytest.raises(ZeroDivisionError):
        limbs.div_rem_digit([1], 0)


def test_parse_digits():
    assert limbs.parse_digit_decimal("123456789") == 123456789
    assert limbs.parse_digit_decimal("") == 0
    assert limbs.parse_digit_hexadecimal("ffffffff") == MASK
    assert limbs.parse_digit_hexadecimal("f") == 15


def test_parse_digit_rejects_bad_characters():
    with pytest.raises(ValueError):
        limbs.parse_digit_decimal("12a")
    with pytest.raises(ValueError):
        limbs.parse_digit_hexadecimal("xyz")


def test_normalized_drops_high_zeros():
    assert limbs.normalized([1, 2, 0, 0]) == [1, 2]
    assert limbs.normalized([0, 0]) == []
    assert limbs.normalized([0, 5]) == [0, 5]


@pytest.mark.parametrize(
    ("a", "b", "product"),
    [
        ("15818899999165008224", "9203627109237", "145591256870624226354416451365088"),
        ("8589934592", "8589934595", "73786976320608010240"),
        ("18446744073709551616", "18446744073709551616",
         "340282366920938463463374607431768211456"),
        ("4294967295", "4294967295", "18446744065119617025"),
        ("354108774791", "9720934714462407409", "3442268281561582515829270826519"),
    ],
)
def test_mac3_known_products(a, b, product):
    x = to_limbs(int(a))
    y = to_limbs(int(b))
    out = [0] * (len(x) + len(y))
    limbs.mac3(out, x, y)
    assert to_int(out) == int(product)


@pytest.mark.parametrize("size", [1, 10, 65, 130, 200])
def test_mac3_matches_integer_multiplication(size):
    rng = random.Random(size)
    x_value = rng.getrandbits(32 * size) | 1
    y_value = rng.getrandbits(32 * (size + 7)) | 1
    x = to_limbs(x_value)
    y = to_limbs(y_value)
    out = [0] * (len(x) + len(y))
    limbs.mac3(out, x, y)
    assert to_int(out) == x_value * y_value


def test_mac3_accumulates_into_existing_value():
    x = to_limbs(2**200 - 1)
    y = to_limbs(2**40 + 5)
    out = to_limbs(77, len(x) + len(y))
    limbs.mac3(out, x, y)
    assert to_int(out) == 77 + (2**200 - 1) * (2**40 + 5)


def test_mac3_all_ones_karatsuba():
    x = [MASK] * 150
    y = [MASK] * 150
    out = [0] * 300
    limbs.mac3(out, x, y)
    assert to_int(out) == (2**4800 - 1) ** 2


def test_mac3_overflow_raises():
    out = [MASK, MASK]
    with pytest.raises(OverflowError):
        limbs.mac3(out, [MASK], [MASK])