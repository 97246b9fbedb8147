from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Sequence

from domain.errors import NotInitialized


@dataclass(frozen=True)
class StubRates:
    fee_rate: Decimal
    exchange_rate: Decimal


class StubRateProvider:
    def __init__(self, rates: StubRates | None = None) -> None:
        self.rates = rates
        self.calls = 0

    def current_snapshot(self) -> StubRates:
        self.calls += 1
        if self.rates is None:
            raise NotInitialized("no rates captured")
        return self.rates


@dataclass
class TableUsageEstimator:
    """Answers gas estimates from a lookup table keyed by target."""

    units: dict[Any, Any]
    calls: list[tuple[Any, list[Any]]] = field(default_factory=list)

    def estimate(self, target: Any, args: Sequence[Any]) -> int:
        self.calls.append((target, list(args)))
        return self.units[target]


class FailingUsageEstimator:
    def __init__(self, error: Exception) -> None:
        self.error = error

    def estimate(self, target: Any, args: Sequence[Any]) -> int:
        raise self.error


class StubToken:
    """Stand-in for a deployed token contract."""

    def transfer(self, recipient: str, amount: int) -> bool:
        return True

    def balanceOf(self, owner: str) -> int:  # noqa: N802
        return 0

    def _mint(self, amount: int) -> None:
        return None

    decimals = 18
