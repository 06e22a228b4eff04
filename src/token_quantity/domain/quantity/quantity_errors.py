"""Exceptions raised by `Quantity` construction and arithmetic.

Every error also subclasses the closest built-in exception, so callers can catch
either `QuantityError` or e.g. `ValueError`.
"""


class QuantityError(Exception):
    """Base class for all `Quantity` errors."""


class ParseError(QuantityError, ValueError):
    """Raised when a decimal string has non-numeric content."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot parse $value ({value!r}) as a quantity - {reason}")


class NonIntegerError(QuantityError, ValueError):
    """Raised when a whole number is required but a fractional float was provided."""

    def __init__(self, value: float, parameter: str = "value"):
        self.value = value
        super().__init__(f"${parameter} ({value!r}) is not a whole number")


class InvalidOperandError(QuantityError, TypeError):
    """Raised when an operation receives something that is not a valid operand."""

    def __init__(self, operation: str, value: object, expected: str = "Quantity"):
        self.operation = operation
        self.value = value
        super().__init__(f"Cannot call `{operation}` because operand is not {expected} (got type '{type(value).__name__}')")


class DivisionByZeroError(QuantityError, ZeroDivisionError):
    """Raised when the divisor's raw value is zero."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call `{operation}` because the divisor is zero")


class QuantityOverflowError(QuantityError, OverflowError):
    """Raised when a quantity does not fit a fixed-width target (e.g. `float`)."""
