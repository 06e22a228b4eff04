from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenInfo:
    """Metadata a token process reports about itself.

    Attributes:
        denomination (int): Number of fractional digits of raw balances.
        name (str | None): Full token name.
        ticker (str | None): Short ticker symbol.
        logo (str | None): Id of the logo transaction.
        mirror (str | None): Id of a process mirroring balances, if any.
    """

    denomination: int = 0
    name: str | None = None
    ticker: str | None = None
    logo: str | None = None
    mirror: str | None = None

    def __post_init__(self) -> None:
        # Raise: $denomination must be a non-negative int to scale raw balances
        if isinstance(self.denomination, bool) or not isinstance(self.denomination, int):
            raise TypeError(f"$denomination must be int, but provided value is: {self.denomination!r}")
        if self.denomination < 0:
            raise ValueError(f"$denomination must be >= 0, but provided value is: {self.denomination}")

    def __str__(self) -> str:
        label = self.ticker or self.name or "?"
        return f"{label} (denomination={self.denomination})"
