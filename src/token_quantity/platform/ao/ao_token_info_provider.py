from __future__ import annotations

import json
import logging
from typing import Any

from token_quantity.domain.token.token_info import TokenInfo
from token_quantity.platform.ao.dry_run_client import DryRunClient, DryRunError
from token_quantity.platform.providers.token_info_provider import TokenLoadError
from token_quantity.utils.ao_tools import get_tag_value, is_address, make_tags

logger = logging.getLogger(__name__)


def _parse_raw_balance(value: Any, process_id: str) -> int:
    """Parse a raw balance as sent by token processes (decimal integer string)."""
    text = str(value).strip()

    # Raise: raw balances are plain non-negative integers
    if not text.isdigit() or not text.isascii():
        raise DryRunError(process_id, f"invalid raw balance '{value}'")

    return int(text)


class AoTokenInfoProvider:
    """TokenInfoProvider reading token processes that follow the ao token standard.

    Uses the `Info`, `Balance` and `Balances` actions through dry runs.
    """

    def __init__(self, client: DryRunClient | None = None):
        self._client = client if client is not None else DryRunClient()

    def get_info(self, token_id: str) -> TokenInfo:
        """Return token metadata from the first `Info` reply carrying a ticker or name.

        Raises:
            TokenLoadError: If no reply carries token info or the denomination is invalid.
            DryRunError: If the dry run itself fails.
        """
        messages = self._client.dry_run(token_id, make_tags(Action="Info"))

        for message in messages:
            tags = message.get("Tags")
            ticker = get_tag_value("Ticker", tags)
            name = get_tag_value("Name", tags)
            if not ticker and not name:
                continue

            denomination_str = str(get_tag_value("Denomination", tags) or "0").strip()

            # Raise: denomination tag must be a non-negative integer
            if not (denomination_str.isascii() and denomination_str.isdigit()):
                raise TokenLoadError(token_id, f"invalid denomination '{denomination_str}'")

            return TokenInfo(
                denomination=int(denomination_str),
                name=name,
                ticker=ticker,
                logo=get_tag_value("Logo", tags),
                mirror=get_tag_value("Mirror", tags),
            )

        logger.error(f"Token '{token_id}' replied with {len(messages)} message(s), none with token info")
        raise TokenLoadError(token_id, "no message with token info")

    def get_balance(self, token_id: str, address: str) -> int:
        """Return the raw balance of $address.

        Raises:
            ValueError: If $address is not an ao address.
            DryRunError: If no reply carries a balance.
        """
        # Raise: balance lookups need a valid address
        if not is_address(address):
            raise ValueError(f"Cannot call `get_balance` because $address ('{address}') is not an ao address")

        messages = self._client.dry_run(token_id, make_tags(Action="Balance", Target=address, Recipient=address))

        for message in messages:
            value = get_tag_value("Balance", message.get("Tags"))
            if value is None:
                value = message.get("Data")
            if value is None or value == "":
                continue
            return _parse_raw_balance(value, token_id)

        raise DryRunError(token_id, f"no balance reported for address '{address}'")

    def get_balances(self, token_id: str) -> dict[str, int]:
        """Return raw balances of all holders, keyed by address.

        Raises:
            DryRunError: If no reply carries a JSON balance mapping.
        """
        messages = self._client.dry_run(token_id, make_tags(Action="Balances"))

        for message in messages:
            data = message.get("Data")
            if not data:
                continue

            try:
                balances = json.loads(data) if isinstance(data, str) else data
            except ValueError as e:
                raise DryRunError(token_id, "balances are not valid JSON") from e

            # Raise: balances must be an address -> amount mapping
            if not isinstance(balances, dict):
                raise DryRunError(token_id, f"unexpected balances type '{type(balances).__name__}'")

            return {address: _parse_raw_balance(raw, token_id) for address, raw in balances.items()}

        raise DryRunError(token_id, "no balances reported")
