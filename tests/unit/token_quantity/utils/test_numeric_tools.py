from __future__ import annotations

from decimal import Decimal

import pytest

from token_quantity.utils.numeric_tools import as_decimal, group_digits, pow10, trunc_div, trunc_mod


@pytest.mark.parametrize(
    "dividend, divisor, quotient, remainder",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (6, 3, 2, 0),
        (0, 5, 0, 0),
    ],
)
def test_truncating_division(dividend: int, divisor: int, quotient: int, remainder: int) -> None:
    assert trunc_div(dividend, divisor) == quotient
    assert trunc_mod(dividend, divisor) == remainder
    assert quotient * divisor + remainder == dividend


@pytest.mark.parametrize(
    "digits, expected",
    [
        ("0", "0"),
        ("12", "12"),
        ("123", "123"),
        ("1234", "1,234"),
        ("123456", "123,456"),
        ("1234567", "1,234,567"),
    ],
)
def test_group_digits(digits: str, expected: str) -> None:
    assert group_digits(digits) == expected


def test_group_digits_with_custom_separator() -> None:
    assert group_digits("1234567", " ") == "1 234 567"


def test_pow10() -> None:
    assert pow10(0) == 1
    assert pow10(18) == 1_000_000_000_000_000_000
    with pytest.raises(ValueError):
        pow10(-1)


def test_as_decimal_goes_through_string() -> None:
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal("1.50") == Decimal("1.50")
    value = Decimal("2")
    assert as_decimal(value) is value
