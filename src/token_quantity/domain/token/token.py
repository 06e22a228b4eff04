from __future__ import annotations

import logging

from token_quantity.domain.quantity.quantity import Quantity
from token_quantity.domain.token.token_info import TokenInfo
from token_quantity.platform.providers.token_info_provider import TokenInfoProvider, TokenLoadError

logger = logging.getLogger(__name__)


def is_quantity_of(value: object, info: TokenInfo) -> bool:
    """Check if $value is a Quantity denominated exactly like the token described by $info.

    Args:
        value: Any object.
        info: Token metadata supplying the expected denomination.

    Returns:
        bool: True only for a Quantity with `denomination == info.denomination`.
    """
    if not isinstance(value, Quantity):
        return False
    return value.denomination == info.denomination


class Token:
    """A token process together with its (optionally loaded) metadata.

    Attributes:
        id (str): Token process id.
        info (TokenInfo | None): Metadata, if loaded.
    """

    __slots__ = ("_id", "_info")

    def __init__(self, token_id: str, info: TokenInfo | None = None) -> None:
        # Raise: $token_id must be a string
        if not isinstance(token_id, str):
            raise TypeError(f"$token_id must be a string, but provided value is: {token_id!r}")

        # Raise: $token_id must not be empty
        if not token_id.strip():
            raise ValueError(f"$token_id must be a non-empty string, but provided value is: '{token_id}'")

        # Raise: $info must be TokenInfo when provided
        if info is not None and not isinstance(info, TokenInfo):
            raise TypeError(f"$info must be a TokenInfo instance, but provided value is: {info}")

        self._id = token_id
        self._info = info

    @classmethod
    def load(cls, token_id: str, provider: TokenInfoProvider) -> Token:
        """Load token metadata through $provider.

        Args:
            token_id: Token process id.
            provider: Source of token metadata.

        Returns:
            Token: Token with loaded info.

        Raises:
            TokenLoadError: If the provider cannot find token info.
        """
        info = provider.get_info(token_id)
        logger.info(f"Loaded token '{token_id}': {info}")
        return cls(token_id, info)

    @property
    def id(self) -> str:
        """Get the token process id."""
        return self._id

    @property
    def info(self) -> TokenInfo | None:
        """Get the token info."""
        return self._info

    def _require_info(self, function_name: str) -> TokenInfo:
        # Raise: denomination is unknown until info is loaded
        if self._info is None:
            raise TokenLoadError(self._id, f"cannot call `{function_name}` before token info is loaded")
        return self._info

    # region Quantities

    def quantity(self, raw: int) -> Quantity:
        """Wrap a raw balance with this token's denomination."""
        return Quantity(raw, self._require_info("quantity").denomination)

    def parse(self, value: str) -> Quantity:
        """Parse a decimal string (e.g. user input "1,000.5") with this token's denomination."""
        return Quantity.from_str(value, self._require_info("parse").denomination)

    def is_quantity(self, value: object) -> bool:
        """Check if $value is a Quantity of this token. False if info is not loaded."""
        if self._info is None:
            return False
        return is_quantity_of(value, self._info)

    def get_balance(self, address: str, provider: TokenInfoProvider) -> Quantity:
        """Return the balance of $address as Quantity."""
        return self.quantity(provider.get_balance(self._id, address))

    def get_balances(self, provider: TokenInfoProvider) -> dict[str, Quantity]:
        """Return all balances as Quantity, keyed by address."""
        denomination = self._require_info("get_balances").denomination
        return {address: Quantity(raw, denomination) for address, raw in provider.get_balances(self._id).items()}

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._id}', {self._info!r})"
