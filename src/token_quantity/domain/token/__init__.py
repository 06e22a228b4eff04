"""Token domain package.

This package contains token metadata (`TokenInfo`) and the `Token` facade that
wraps raw ledger balances into `Quantity` instances.
"""
