from __future__ import annotations

import math
import re

from token_quantity.domain.quantity.quantity_errors import (
    DivisionByZeroError,
    InvalidOperandError,
    NonIntegerError,
    ParseError,
    QuantityOverflowError,
)
from token_quantity.utils.numeric_tools import IntLike, as_decimal, group_digits, pow10, trunc_div, trunc_mod

# Signed integer part; may be empty when a fractional part follows (".5", "-.5")
_INTEGER_PART_PATTERN = re.compile(r"[+-]?[0-9]*")
_FRACTIONAL_PART_PATTERN = re.compile(r"[0-9]*")

GROUPING_SEPARATOR = ","
DECIMAL_POINT = "."

# Upper bound for the default `maximum_fraction_digits` of `to_locale_str`
MAX_DEFAULT_FRACTION_DIGITS = 20


def _validate_denomination(denomination: int, function_name: str) -> int:
    # Raise: bool is an int subclass, but never a meaningful denomination
    if isinstance(denomination, bool) or not isinstance(denomination, int):
        raise TypeError(f"Cannot call `{function_name}` because $denomination is not int (got type '{type(denomination).__name__}')")

    # Raise: denomination counts fractional digits, so it cannot be negative
    if denomination < 0:
        raise ValueError(f"Cannot call `{function_name}` because $denomination ({denomination}) < 0")

    return denomination


def _as_whole_int(value: IntLike, function_name: str, parameter: str) -> int:
    """Return $value as int, accepting integral floats only."""
    if isinstance(value, bool):
        raise InvalidOperandError(function_name, value, "int")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise NonIntegerError(value, parameter)
        return int(value)
    raise InvalidOperandError(function_name, value, "int")


def _require_quantity(function_name: str, value: object) -> None:
    if not isinstance(value, Quantity):
        raise InvalidOperandError(function_name, value)


def _aligned(function_name: str, *quantities: Quantity) -> list[Quantity]:
    for quantity in quantities:
        _require_quantity(function_name, quantity)
    return Quantity.same_denomination(*quantities)


def _rescale(raw: int, source_denomination: int, target_denomination: int) -> int:
    if target_denomination >= source_denomination:
        return raw * pow10(target_denomination - source_denomination)
    return trunc_div(raw, pow10(source_denomination - target_denomination))


class Quantity:
    """Exact decimal quantity stored as a scaled integer.

    The represented number is `raw / 10 ** denomination`. $raw is an arbitrary
    precision int, so no operation overflows and no binary floating point is ever
    involved (except in the explicit `to_float` escape hatch).

    Two operator families exist:

    * Pure static methods (`Quantity.add`, `Quantity.mul`, ...) align both operands
      to the larger denomination and return a new instance. They never lose
      precision on their own account and never mutate operands.
    * In-place methods (`iadd`, `imul`, ...) compute the same result and convert it
      back to the receiver's original denomination, truncating if the operand was
      wider. They mutate and return the receiver.

    Python operators map onto the pure family (`+`, `*`, ...) and augmented
    assignment onto the in-place family (`+=`, `*=`, ...).

    Instances used as dict keys or set members must not be mutated in place.
    """

    __slots__ = ("_raw", "_denomination")

    def __init__(self, raw: IntLike = 0, denomination: int = 0) -> None:
        """Wrap an already scaled integer.

        Args:
            raw: Value scaled by `10 ** denomination`. Integral floats are accepted.
            denomination: Number of fractional decimal digits in $raw.

        Raises:
            NonIntegerError: If $raw is a float with a fractional part.
            InvalidOperandError: If $raw is not an int or float.
            TypeError: If $denomination is not int.
            ValueError: If $denomination is negative.
        """
        self._denomination = _validate_denomination(denomination, "Quantity.__init__")
        self._raw = _as_whole_int(raw, "Quantity.__init__", "raw")

    @classmethod
    def _from_trusted(cls, raw: int, denomination: int) -> Quantity:
        # Skips validation; only for values produced by this module
        result = cls.__new__(cls)
        result._raw = raw
        result._denomination = denomination
        return result

    # region Construction

    @classmethod
    def from_str(cls, value: str | None, denomination: int = 0) -> Quantity:
        """Parse a decimal string, keeping precision up to $denomination digits.

        Grouping separators (",") are stripped. Fractional digits beyond
        $denomination are discarded without rounding; shorter fractional parts are
        padded with zeros. The sign applies to the whole value.

        Args:
            value: Decimal string such as "1,234.5678" or "-.5". None or an empty
                string yields zero.
            denomination: Target denomination.

        Returns:
            Quantity: Parsed quantity with the given $denomination.

        Raises:
            ParseError: If either part of $value contains non-digit content.
            InvalidOperandError: If $value is not a string.
        """
        denomination = _validate_denomination(denomination, "Quantity.from_str")
        if value is None:
            return cls._from_trusted(0, denomination)

        # Raise: only strings can be parsed here, numbers have dedicated constructors
        if not isinstance(value, str):
            raise InvalidOperandError("Quantity.from_str", value, "str")

        text = value.strip().replace(GROUPING_SEPARATOR, "")
        if text == "":
            return cls._from_trusted(0, denomination)

        parts = text.split(DECIMAL_POINT)

        # Raise: only one decimal point is allowed
        if len(parts) > 2:
            raise ParseError(value, "more than one decimal point")

        integer_part = parts[0]
        fractional_part = parts[1] if len(parts) == 2 else ""

        # Raise: integer part must be a signed integer
        if not _INTEGER_PART_PATTERN.fullmatch(integer_part):
            raise ParseError(value, f"integer part '{integer_part}' is not a signed integer")

        # Raise: fractional part must consist of digits only
        if not _FRACTIONAL_PART_PATTERN.fullmatch(fractional_part):
            raise ParseError(value, f"fractional part '{fractional_part}' is not numeric")

        sign = -1 if integer_part.startswith("-") else 1
        integer_digits = integer_part.lstrip("+-")

        # Raise: a lone sign or decimal point is not a number
        if integer_digits == "" and fractional_part == "":
            raise ParseError(value, "no digits")

        relevant_fraction = fractional_part[:denomination].ljust(denomination, "0")
        magnitude = int(integer_digits or "0") * pow10(denomination) + int(relevant_fraction or "0")

        return cls._from_trusted(sign * magnitude, denomination)

    @classmethod
    def from_float(cls, value: float | int, denomination: int = 0) -> Quantity:
        """Parse a native number through its shortest decimal string.

        The float is never scaled directly: it is stringified first, which avoids
        binary rounding noise (`0.1` becomes exactly "0.1").

        Raises:
            ParseError: If $value is NaN or infinite.
            InvalidOperandError: If $value is not a float or int.
        """
        # Raise: only native numbers are accepted
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidOperandError("Quantity.from_float", value, "float")

        decimal_value = as_decimal(value)

        # Raise: NaN and infinity have no positional decimal representation
        if not decimal_value.is_finite():
            raise ParseError(value, "not a finite number")

        return cls.from_str(format(decimal_value, "f"), denomination)

    @classmethod
    def from_whole(cls, value: IntLike, denomination: int = 0) -> Quantity:
        """Create a quantity of $value whole units, e.g. `from_whole(5, 2).raw == 500`.

        Raises:
            NonIntegerError: If $value is a float with a fractional part.
        """
        denomination = _validate_denomination(denomination, "Quantity.from_whole")
        whole = _as_whole_int(value, "Quantity.from_whole", "value")
        return cls._from_trusted(whole * pow10(denomination), denomination)

    @classmethod
    def from_quantity(cls, other: Quantity, denomination: int | None = None) -> Quantity:
        """Copy $other, converting it to $denomination when one is given.

        Raises:
            InvalidOperandError: If $other is not a Quantity.
        """
        _require_quantity("Quantity.from_quantity", other)
        if denomination is None:
            return cls._from_trusted(other.raw, other.denomination)
        denomination = _validate_denomination(denomination, "Quantity.from_quantity")
        return cls._from_trusted(_rescale(other.raw, other.denomination, denomination), denomination)

    @classmethod
    def zero(cls, denomination: int = 0) -> Quantity:
        """Additive identity."""
        return cls._from_trusted(0, _validate_denomination(denomination, "Quantity.zero"))

    @classmethod
    def one(cls, denomination: int = 0) -> Quantity:
        """Multiplicative identity."""
        denomination = _validate_denomination(denomination, "Quantity.one")
        return cls._from_trusted(pow10(denomination), denomination)

    def copy(self) -> Quantity:
        return self._from_trusted(self._raw, self._denomination)

    def __copy__(self) -> Quantity:
        return self.copy()

    def __deepcopy__(self, memo) -> Quantity:
        return self.copy()

    # endregion

    # region Properties

    @property
    def raw(self) -> int:
        """Get the scaled integer; serialize this value verbatim."""
        return self._raw

    @property
    def denomination(self) -> int:
        """Get the number of fractional decimal digits."""
        return self._denomination

    @property
    def integer(self) -> int:
        """Get the whole part, truncated toward zero."""
        return trunc_div(self._raw, pow10(self._denomination))

    @property
    def fractional(self) -> int:
        """Get the fractional part as scaled int; the sign follows $raw."""
        return trunc_mod(self._raw, pow10(self._denomination))

    # endregion

    # region Formatting

    def _split_digits(self) -> tuple[str, str, str]:
        """Return sign, integer digits and fractional digits padded to $denomination."""
        sign = "-" if self._raw < 0 else ""
        integer_part, fractional_part = divmod(abs(self._raw), pow10(self._denomination))
        fractional_digits = str(fractional_part).zfill(self._denomination) if self._denomination > 0 else ""
        return sign, str(integer_part), fractional_digits

    def to_str(self) -> str:
        """Format as plain decimal string without grouping and without trailing zeros."""
        sign, integer_digits, fractional_digits = self._split_digits()
        fractional_digits = fractional_digits.rstrip("0")
        if fractional_digits:
            return f"{sign}{integer_digits}{DECIMAL_POINT}{fractional_digits}"
        return f"{sign}{integer_digits}"

    def to_locale_str(
        self,
        grouping_separator: str = GROUPING_SEPARATOR,
        decimal_separator: str = DECIMAL_POINT,
        use_grouping: bool = True,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int | None = None,
    ) -> str:
        """Format for humans with digit grouping and bounded fractional digits.

        Fractional digits beyond $maximum_fraction_digits are truncated, never
        rounded. Trailing zeros are stripped, then the fraction is zero-padded up
        to $minimum_fraction_digits.

        Args:
            grouping_separator: Separator between groups of three integer digits.
            decimal_separator: Separator between integer and fractional digits.
            use_grouping: Whether to group integer digits at all.
            minimum_fraction_digits: Fractional digits always shown.
            maximum_fraction_digits: Fractional digits shown at most. Defaults to
                $denomination capped at 20 (but never below $minimum_fraction_digits).

        Returns:
            str: Formatted value, e.g. "1,234,567.89".

        Raises:
            ValueError: If digit bounds are negative or inverted.
        """
        if maximum_fraction_digits is None:
            maximum_fraction_digits = max(min(self._denomination, MAX_DEFAULT_FRACTION_DIGITS), minimum_fraction_digits)

        # Raise: digit bounds must be non-negative
        if minimum_fraction_digits < 0 or maximum_fraction_digits < 0:
            raise ValueError(f"Cannot call `to_locale_str` because fraction digit bounds must be >= 0, but $minimum_fraction_digits = {minimum_fraction_digits} and $maximum_fraction_digits = {maximum_fraction_digits}")

        # Raise: the requested range must not be inverted
        if minimum_fraction_digits > maximum_fraction_digits:
            raise ValueError(f"Cannot call `to_locale_str` because $minimum_fraction_digits ({minimum_fraction_digits}) > $maximum_fraction_digits ({maximum_fraction_digits})")

        sign, integer_digits, fractional_digits = self._split_digits()
        fractions = fractional_digits[:maximum_fraction_digits].rstrip("0")

        # Truncated to zero, e.g. -0.001 shown with 2 digits
        if integer_digits == "0" and fractions == "":
            sign = ""

        fractions = fractions.ljust(minimum_fraction_digits, "0")
        if use_grouping:
            integer_digits = group_digits(integer_digits, grouping_separator)

        if fractions:
            return f"{sign}{integer_digits}{decimal_separator}{fractions}"
        return f"{sign}{integer_digits}"

    def to_float(self) -> float:
        """Convert to a native float through the decimal string. Loses precision.

        Raises:
            QuantityOverflowError: If the value exceeds the float range.
        """
        result = float(self.to_str())

        # Raise: float has a fixed width, unlike $raw
        if math.isinf(result):
            raise QuantityOverflowError(f"Cannot call `to_float` because {self!r} exceeds the float range")

        return result

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        """Return string like "Quantity('1.23', denomination=2)"."""
        return f"{self.__class__.__name__}('{self.to_str()}', denomination={self._denomination})"

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.integer

    def __bool__(self) -> bool:
        return self._raw != 0

    def __hash__(self) -> int:
        """Hash of the normalized value, so equal quantities hash equally across denominations."""
        if self._raw == 0:
            return hash((0, 0))
        raw, denomination = self._raw, self._denomination
        while denomination > 0 and raw % 10 == 0:
            raw //= 10
            denomination -= 1
        return hash((raw, denomination))

    # endregion

    # region Denomination conversion

    def convert(self, denomination: int) -> Quantity:
        """Return a new instance with the same value at $denomination.

        Widening is exact. Narrowing truncates toward zero and the discarded digits
        cannot be recovered.

        Args:
            denomination: Target denomination.

        Returns:
            Quantity: Converted quantity.
        """
        denomination = _validate_denomination(denomination, "convert")
        return self._from_trusted(_rescale(self._raw, self._denomination, denomination), denomination)

    def iconvert(self, denomination: int) -> Quantity:
        """Convert in place, overwriting both $raw and $denomination."""
        converted = self.convert(denomination)
        self._raw = converted._raw
        self._denomination = converted._denomination
        return self

    @staticmethod
    def same_denomination(*quantities: Quantity) -> list[Quantity]:
        """Bring quantities to the largest denomination among them.

        The conversion is always widening and therefore lossless. Every returned
        entry is a new instance, so the inputs are never shared or mutated.

        Returns:
            list[Quantity]: Quantities in input order, all at the same denomination.

        Raises:
            InvalidOperandError: If any input is not a Quantity.
        """
        for quantity in quantities:
            _require_quantity("same_denomination", quantity)

        if not quantities:
            return []

        largest_denomination = max(quantity.denomination for quantity in quantities)
        return [quantity.convert(largest_denomination) for quantity in quantities]

    # endregion

    # region Comparisons

    @staticmethod
    def eq(x: Quantity, y: Quantity) -> bool:
        """Exact equality after aligning denominations."""
        x, y = _aligned("eq", x, y)
        return x.raw == y.raw

    @staticmethod
    def lt(x: Quantity, y: Quantity) -> bool:
        x, y = _aligned("lt", x, y)
        return x.raw < y.raw

    @staticmethod
    def le(x: Quantity, y: Quantity) -> bool:
        x, y = _aligned("le", x, y)
        return x.raw <= y.raw

    @staticmethod
    def gt(x: Quantity, y: Quantity) -> bool:
        return Quantity.lt(y, x)

    @staticmethod
    def ge(x: Quantity, y: Quantity) -> bool:
        return Quantity.le(y, x)

    @staticmethod
    def min(*quantities: Quantity) -> Quantity | None:
        """Return the smallest of $quantities, or None if there are none.

        The original instance is returned, not an aligned copy. On ties the first
        one wins.
        """
        for quantity in quantities:
            _require_quantity("min", quantity)

        result = None
        for quantity in quantities:
            if result is None or Quantity.lt(quantity, result):
                result = quantity
        return result

    @staticmethod
    def max(*quantities: Quantity) -> Quantity | None:
        """Return the largest of $quantities, or None if there are none."""
        for quantity in quantities:
            _require_quantity("max", quantity)

        result = None
        for quantity in quantities:
            if result is None or Quantity.lt(result, quantity):
                result = quantity
        return result

    def __eq__(self, other) -> bool:
        """Check equality with another Quantity (denomination-aware)."""
        if not isinstance(other, Quantity):
            return False
        return Quantity.eq(self, other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.lt(self, other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.le(self, other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.gt(self, other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.ge(self, other)

    # endregion

    # region Arithmetic (pure)

    @staticmethod
    def add(x: Quantity, y: Quantity) -> Quantity:
        """Add two quantities; the result has the larger denomination."""
        x, y = _aligned("add", x, y)
        return Quantity._from_trusted(x.raw + y.raw, x.denomination)

    @staticmethod
    def sub(x: Quantity, y: Quantity) -> Quantity:
        """Subtract $y from $x; the result has the larger denomination."""
        x, y = _aligned("sub", x, y)
        return Quantity._from_trusted(x.raw - y.raw, x.denomination)

    @staticmethod
    def mul(x: Quantity, y: Quantity) -> Quantity:
        """Multiply two quantities.

        The product of two values scaled by `10 ** D` is scaled by `10 ** 2D`, so it is
        divided once by `10 ** D` (truncating toward zero).
        """
        x, y = _aligned("mul", x, y)
        return Quantity._from_trusted(trunc_div(x.raw * y.raw, pow10(x.denomination)), x.denomination)

    @staticmethod
    def div(x: Quantity, y: Quantity) -> Quantity:
        """Divide $x by $y, keeping the aligned denomination.

        The dividend is pre-scaled by `10 ** D` so the quotient keeps D fractional
        digits. The result is truncated toward zero, e.g. 456.82 / 2.2 at
        denomination 12 gives 207.645454545454.

        Raises:
            DivisionByZeroError: If $y is zero.
        """
        x, y = _aligned("div", x, y)

        # Raise: division by zero is undefined
        if y.raw == 0:
            raise DivisionByZeroError("div")

        return Quantity._from_trusted(trunc_div(x.raw * pow10(x.denomination), y.raw), x.denomination)

    @staticmethod
    def mod(x: Quantity, y: Quantity) -> Quantity:
        """Remainder of truncating division; the sign follows $x.

        Raises:
            DivisionByZeroError: If $y is zero.
        """
        x, y = _aligned("mod", x, y)

        # Raise: modulo by zero is undefined
        if y.raw == 0:
            raise DivisionByZeroError("mod")

        return Quantity._from_trusted(trunc_mod(x.raw, y.raw), x.denomination)

    @staticmethod
    def pow(x: Quantity, exponent: IntLike) -> Quantity:
        """Raise $x to an integer $exponent.

        Positive powers are defined as repeated `mul`, truncating after every step.
        Whole-number bases take a direct path (`integer ** n`), which matches the
        repeated multiplication exactly because no step truncates there. Negative
        exponents return `1 / x ** -exponent` through `div`.

        Args:
            x: Base.
            exponent: Integer exponent; integral floats are accepted.

        Returns:
            Quantity: Result at the denomination of $x.

        Raises:
            NonIntegerError: If $exponent is a float with a fractional part.
            DivisionByZeroError: If $exponent is negative and the positive power is zero.
        """
        _require_quantity("pow", x)
        exponent = _as_whole_int(exponent, "pow", "exponent")

        if exponent == 0:
            return Quantity.one(x.denomination)

        if exponent < 0:
            positive_power = Quantity.pow(x, -exponent)

            # Raise: reciprocal of zero is undefined
            if positive_power.raw == 0:
                raise DivisionByZeroError("pow")

            return Quantity.div(Quantity.one(x.denomination), positive_power)

        if x.fractional == 0:
            return Quantity._from_trusted(x.integer**exponent * pow10(x.denomination), x.denomination)

        result = x.copy()
        for _ in range(exponent - 1):
            result = Quantity.mul(result, x)
            if result.raw == 0:
                break
        return result

    @staticmethod
    def neg(x: Quantity) -> Quantity:
        _require_quantity("neg", x)
        return Quantity._from_trusted(-x.raw, x.denomination)

    @staticmethod
    def abs(x: Quantity) -> Quantity:
        _require_quantity("abs", x)
        return Quantity._from_trusted(abs(x.raw), x.denomination)

    @staticmethod
    def trunc(x: Quantity) -> Quantity:
        """Drop the fractional part (toward zero)."""
        _require_quantity("trunc", x)
        return Quantity._from_trusted(x.raw - x.fractional, x.denomination)

    @staticmethod
    def floor(x: Quantity) -> Quantity:
        """Round toward negative infinity, e.g. -53.89 -> -54."""
        _require_quantity("floor", x)
        remainder = x.fractional
        raw = x.raw - remainder
        if remainder < 0:
            raw -= pow10(x.denomination)
        return Quantity._from_trusted(raw, x.denomination)

    @staticmethod
    def ceil(x: Quantity) -> Quantity:
        """Round toward positive infinity, e.g. 53.89 -> 54."""
        _require_quantity("ceil", x)
        remainder = x.fractional
        raw = x.raw - remainder
        if remainder > 0:
            raw += pow10(x.denomination)
        return Quantity._from_trusted(raw, x.denomination)

    def __add__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.sub(self, other)

    def __mul__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.mul(self, other)

    def __truediv__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.div(self, other)

    def __mod__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity.mod(self, other)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return Quantity.pow(self, exponent)

    def __neg__(self):
        return Quantity.neg(self)

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        return Quantity.abs(self)

    def __trunc__(self):
        return Quantity.trunc(self)

    def __floor__(self):
        return Quantity.floor(self)

    def __ceil__(self):
        return Quantity.ceil(self)

    # endregion

    # region Arithmetic (in-place)

    def _assign(self, result: Quantity) -> Quantity:
        # Narrow back to own denomination; may truncate
        self._raw = _rescale(result.raw, result.denomination, self._denomination)
        return self

    def iadd(self, other: Quantity) -> Quantity:
        """Add $other in place. Truncates if $other has a larger denomination."""
        return self._assign(Quantity.add(self, other))

    def isub(self, other: Quantity) -> Quantity:
        return self._assign(Quantity.sub(self, other))

    def imul(self, other: Quantity) -> Quantity:
        return self._assign(Quantity.mul(self, other))

    def idiv(self, other: Quantity) -> Quantity:
        return self._assign(Quantity.div(self, other))

    def imod(self, other: Quantity) -> Quantity:
        return self._assign(Quantity.mod(self, other))

    def ipow(self, exponent: IntLike) -> Quantity:
        return self._assign(Quantity.pow(self, exponent))

    def ineg(self) -> Quantity:
        return self._assign(Quantity.neg(self))

    def iabs(self) -> Quantity:
        return self._assign(Quantity.abs(self))

    def itrunc(self) -> Quantity:
        return self._assign(Quantity.trunc(self))

    def ifloor(self) -> Quantity:
        return self._assign(Quantity.floor(self))

    def iceil(self) -> Quantity:
        return self._assign(Quantity.ceil(self))

    def __iadd__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.iadd(other)

    def __isub__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.isub(other)

    def __imul__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.imul(other)

    def __itruediv__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.idiv(other)

    def __imod__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.imod(other)

    def __ipow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return self.ipow(exponent)

    # endregion
