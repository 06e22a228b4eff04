from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `int`, but an integral `float` is also acceptable (and will be converted to `int`)
IntLike: TypeAlias = int | float

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def pow10(exponent: int) -> int:
    """Return `10 ** exponent` as an exact int.

    Raises:
        ValueError: If $exponent is negative.
    """
    if exponent < 0:
        raise ValueError(f"Cannot call `pow10` because $exponent ({exponent}) < 0")
    return 10**exponent


def trunc_div(dividend: int, divisor: int) -> int:
    """Integer division truncating toward zero.

    Python's `//` floors toward negative infinity; ledger arithmetic truncates.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def trunc_mod(dividend: int, divisor: int) -> int:
    """Remainder of `trunc_div`; the sign follows $dividend.

    Examples:
        >>> trunc_mod(7, 2)
        1
        >>> trunc_mod(-7, 2)
        -1
    """
    return dividend - divisor * trunc_div(dividend, divisor)


def group_digits(digits: str, separator: str = ",") -> str:
    """Insert $separator between groups of three digits, counting from the right.

    Args:
        digits: Unsigned string of decimal digits.
        separator: Grouping separator.

    Returns:
        Grouped string, e.g. "1234567" -> "1,234,567".
    """
    head_len = len(digits) % 3 or 3
    groups = [digits[:head_len]]
    groups.extend(digits[i : i + 3] for i in range(head_len, len(digits), 3))
    return separator.join(groups)


# Note: No 'as_int' function is provided.
# Integer inputs are validated where they enter the domain, see `Quantity`
