from __future__ import annotations

import pytest

from token_quantity.domain.quantity.quantity import Quantity
from token_quantity.domain.quantity.quantity_errors import QuantityOverflowError


def test_format_as_string() -> None:
    testee = Quantity.from_str("14564.5299", 4)
    assert testee.to_str() == "14564.5299"
    assert str(testee) == "14564.5299"


@pytest.mark.parametrize(
    "raw, denomination, expected",
    [
        (0, 5, "0"),
        (100, 2, "1"),
        (120, 2, "1.2"),
        (-5, 2, "-0.05"),
        (5, 0, "5"),
        (-1234567, 0, "-1234567"),
        (1, 25, "0.0000000000000000000000001"),
    ],
)
def test_format_strips_trailing_zeros_and_keeps_sign(raw: int, denomination: int, expected: str) -> None:
    assert str(Quantity(raw, denomination)) == expected


def test_format_as_number() -> None:
    testee = Quantity.from_float(34.5, 10)
    assert testee.to_float() == 34.5
    assert float(Quantity(250, 2)) == 2.5


def test_to_float_overflow() -> None:
    with pytest.raises(QuantityOverflowError):
        Quantity(10**400, 0).to_float()
    with pytest.raises(OverflowError):
        float(Quantity(-(10**400), 2))


def test_int_and_bool() -> None:
    assert int(Quantity(-250, 2)) == -2
    assert int(Quantity(999, 3)) == 0
    assert not Quantity(0, 3)
    assert Quantity(1, 3)


def test_repr() -> None:
    assert repr(Quantity(123, 2)) == "Quantity('1.23', denomination=2)"


def test_locale_string_groups_integer_digits() -> None:
    testee = Quantity(123456789, 2)
    assert testee.to_locale_str() == "1,234,567.89"
    assert testee.to_locale_str(use_grouping=False) == "1234567.89"
    assert testee.to_locale_str(grouping_separator=".", decimal_separator=",") == "1.234.567,89"
    assert Quantity(-123456789, 2).to_locale_str() == "-1,234,567.89"
    assert Quantity(999, 0).to_locale_str() == "999"


def test_locale_string_truncates_excess_fraction_digits() -> None:
    testee = Quantity(123456789, 2)
    assert testee.to_locale_str(maximum_fraction_digits=1) == "1,234,567.8"
    assert Quantity(199, 2).to_locale_str(maximum_fraction_digits=0) == "1"


def test_locale_string_pads_to_minimum_fraction_digits() -> None:
    assert Quantity(150, 2).to_locale_str(minimum_fraction_digits=2) == "1.50"
    assert Quantity(100, 2).to_locale_str(minimum_fraction_digits=2) == "1.00"
    assert Quantity(0, 2).to_locale_str(minimum_fraction_digits=2) == "0.00"
    assert Quantity(150, 2).to_locale_str(minimum_fraction_digits=4) == "1.5000"


def test_locale_string_of_zero() -> None:
    assert Quantity(0, 2).to_locale_str() == "0"


def test_locale_string_drops_sign_of_value_truncated_to_zero() -> None:
    assert Quantity(-1, 3).to_locale_str(maximum_fraction_digits=2) == "0"


def test_locale_string_default_maximum_is_capped() -> None:
    # 25 fractional digits, only the first 20 are shown by default (all zeros here)
    assert Quantity(1, 25).to_locale_str() == "0"
    assert Quantity(1, 25).to_locale_str(maximum_fraction_digits=25) == "0.0000000000000000000000001"


def test_locale_string_validates_digit_bounds() -> None:
    with pytest.raises(ValueError):
        Quantity(1, 2).to_locale_str(minimum_fraction_digits=3, maximum_fraction_digits=2)
    with pytest.raises(ValueError):
        Quantity(1, 2).to_locale_str(minimum_fraction_digits=-1)
