from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class RateSnapshot:
    """Gas price and ether price captured together for one reporting session.

    ``fee_rate`` is quoted in gwei per gas unit, ``exchange_rate`` in USD per ETH.
    """

    fee_rate: Decimal
    exchange_rate: Decimal
    fetched_at: datetime
    source: str


__all__ = ["RateSnapshot"]
