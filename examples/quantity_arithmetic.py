from __future__ import annotations

import logging

from token_quantity.domain.quantity.quantity import Quantity


logger = logging.getLogger(__name__)


def run() -> None:
    # Raw integers as a ledger stores them, with their denominations
    price = Quantity(45682000000000, 11)  # 456.82
    amount = Quantity(2200000000000, 12)  # 2.2

    # Pure operators widen to the larger denomination
    logger.info(f"{price} + {amount} = {price + amount}")
    logger.info(f"{price} / {amount} = {price / amount}")  # 207.645454545454 (truncated)

    # In-place operators keep the receiver's denomination (and may truncate)
    total = Quantity.from_str("1,000.5", 2)
    total += Quantity.from_str("0.125", 3)
    logger.info(f"Total at denomination {total.denomination}: {total.to_locale_str(minimum_fraction_digits=2)}")

    # Send `raw` to the ledger, never the string form
    logger.info(f"Raw total: {total.raw}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
