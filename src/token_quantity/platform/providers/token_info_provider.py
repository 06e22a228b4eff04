"""Token info provider protocol definition."""

from __future__ import annotations

from typing import Protocol

from token_quantity.domain.token.token_info import TokenInfo


class TokenLoadError(Exception):
    """Raised when a token process does not report usable token info."""

    def __init__(self, token_id: str, reason: str | None = None):
        self.token_id = token_id
        self.reason = reason

        message = f"Could not load token '{token_id}'"
        if reason:
            message += f" - {reason}"

        super().__init__(message)


class TokenInfoProvider(Protocol):
    """Protocol for the remote source of token metadata and raw balances.

    Balances are returned as raw scaled integers; wrapping them into `Quantity`
    instances is left to the caller (see `Token`).
    """

    def get_info(self, token_id: str) -> TokenInfo:
        """Return metadata of token $token_id.

        Raises:
            TokenLoadError: If the process does not report token info.
        """
        ...

    def get_balance(self, token_id: str, address: str) -> int:
        """Return the raw balance of $address in token $token_id."""
        ...

    def get_balances(self, token_id: str) -> dict[str, int]:
        """Return raw balances of all holders of token $token_id, keyed by address."""
        ...
