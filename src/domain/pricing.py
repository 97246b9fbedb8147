from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext
from typing import Protocol

# Gas prices are quoted in gwei; the exchange rate is quoted per whole ETH.
GWEI_TO_ETH = Decimal("1e-9")


class GasRates(Protocol):
    """A captured gas price (gwei per gas unit) and ether price (fiat per ETH)."""

    @property
    def fee_rate(self) -> Decimal: ...

    @property
    def exchange_rate(self) -> Decimal: ...


class RateProvider(Protocol):
    """Lookup interface for the rates of the current session."""

    def current_snapshot(self) -> GasRates: ...


def compute_fiat_cost(usage_units: int, rates: GasRates) -> Decimal:
    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return Decimal(usage_units) * rates.fee_rate * GWEI_TO_ETH * rates.exchange_rate


__all__ = ["GWEI_TO_ETH", "GasRates", "RateProvider", "compute_fiat_cost"]
