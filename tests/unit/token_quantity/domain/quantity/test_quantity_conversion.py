from __future__ import annotations

import pytest

from token_quantity.domain.quantity.quantity import Quantity
from token_quantity.domain.quantity.quantity_errors import InvalidOperandError


def test_convert_to_larger_denomination() -> None:
    base_qty = 15529585725794
    testee = Quantity(base_qty, 10)

    converted = testee.convert(12)

    assert converted.raw == base_qty * 10**2
    assert converted.denomination == 12
    assert testee.raw == base_qty
    assert testee.denomination == 10


def test_convert_in_place() -> None:
    base_qty = 873576
    testee = Quantity(base_qty, 5)

    result = testee.iconvert(7)

    assert result is testee
    assert testee.raw == base_qty * 10**2
    assert testee.denomination == 7


def test_convert_to_smaller_denomination_truncates_toward_zero() -> None:
    assert Quantity(12399, 3).convert(1).raw == 123
    assert Quantity(-12399, 3).convert(1).raw == -123
    assert Quantity(12399, 3).convert(0).raw == 12


def test_convert_rejects_negative_denomination() -> None:
    with pytest.raises(ValueError):
        Quantity(1, 2).convert(-1)


def test_same_denomination_aligns_to_largest() -> None:
    inputs = (Quantity(1, 2), Quantity(1, 5), Quantity(1, 3))

    aligned = Quantity.same_denomination(*inputs)

    assert [q.raw for q in aligned] == [1000, 1, 100]
    assert [q.denomination for q in aligned] == [5, 5, 5]
    # inputs are left untouched
    assert [q.raw for q in inputs] == [1, 1, 1]
    assert [q.denomination for q in inputs] == [2, 5, 3]


def test_same_denomination_returns_new_instances() -> None:
    aligned = Quantity.same_denomination(Quantity(7, 1), Quantity(7, 4))

    realigned = Quantity.same_denomination(*aligned)

    assert realigned == aligned
    assert all(after is not before for after, before in zip(realigned, aligned))


def test_same_denomination_does_not_share_widest_input() -> None:
    narrow = Quantity(1, 2)
    wide = Quantity(1, 5)

    _, aligned_wide = Quantity.same_denomination(narrow, wide)
    aligned_wide.iadd(Quantity(1, 5))

    assert aligned_wide.raw == 2
    assert wide.raw == 1


def test_same_denomination_with_zero_or_one_argument() -> None:
    single = Quantity(5, 2)
    assert Quantity.same_denomination() == []

    (aligned,) = Quantity.same_denomination(single)

    assert aligned == single
    assert aligned is not single


def test_same_denomination_rejects_foreign_object() -> None:
    with pytest.raises(InvalidOperandError):
        Quantity.same_denomination(Quantity(5, 2), 5)
