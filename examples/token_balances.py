from __future__ import annotations

import logging

from token_quantity.domain.token.token import Token
from token_quantity.platform.ao.ao_token_info_provider import AoTokenInfoProvider


logger = logging.getLogger(__name__)

# Wrapped AR process; the compute unit is taken from AO_CU_URL (.env is supported)
TOKEN_ID = "Sa0iBLPNyJQrwpTTG-tWLQU-1QeUAJA73DdxGGiKoJc"


def run() -> None:
    provider = AoTokenInfoProvider()
    token = Token.load(TOKEN_ID, provider)

    balances = token.get_balances(provider)
    top = sorted(balances.items(), key=lambda item: item[1], reverse=True)[:10]
    for address, balance in top:
        logger.info(f"{address}: {balance.to_locale_str()} {token.info.ticker}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
