"""Quantity domain package.

This package contains the exact decimal `Quantity` value type (a scaled integer
plus a denomination) together with the errors raised by its construction and
arithmetic.
"""
