from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownOperation, UsageEstimationFailed
from .pricing import GasRates, RateProvider, compute_fiat_cost
from .usage import ContractInstance, UsageEstimator

DEPLOY_LABEL = "deploy"


class CostProjection(BaseModel):
    """Estimated fiat cost of one deploy or call, tied to the rates it was computed with."""

    model_config = ConfigDict(frozen=True)

    label: str
    usage_units: int = Field(ge=0)
    fiat_cost: Decimal
    fee_rate: Decimal
    exchange_rate: Decimal

    @property
    def is_deploy(self) -> bool:
        return self.label == DEPLOY_LABEL


class CostEstimator:
    """Turns gas usage estimates into fiat costs using the session's captured rates.

    Nothing is cached here: each call reads the current snapshot and asks the usage
    estimator again, since gas usage may depend on contract state.
    """

    def __init__(self, *, rate_provider: RateProvider) -> None:
        self._rate_provider = rate_provider

    def estimate_deploy_cost(
        self,
        usage_estimator: UsageEstimator,
        deploy_target: Any,
        constructor_args: Sequence[Any],
    ) -> CostProjection:
        rates = self._rate_provider.current_snapshot()
        usage = self._estimate_usage(usage_estimator, deploy_target, constructor_args, label=DEPLOY_LABEL)
        return self._project(DEPLOY_LABEL, usage, rates)

    def estimate_call_cost(
        self,
        usage_estimator: UsageEstimator,
        instance: ContractInstance,
        method_name: str,
        args: Sequence[Any],
    ) -> CostProjection:
        rates = self._rate_provider.current_snapshot()
        operation = instance.get_operation(method_name)
        if operation is None:
            raise UnknownOperation(method_name)
        usage = self._estimate_usage(usage_estimator, operation, args, label=method_name)
        return self._project(method_name, usage, rates)

    @staticmethod
    def _estimate_usage(
        usage_estimator: UsageEstimator,
        target: Any,
        args: Sequence[Any],
        *,
        label: str,
    ) -> int:
        try:
            usage = usage_estimator.estimate(target, list(args))
        except Exception as exc:
            raise UsageEstimationFailed(f"Gas estimation failed for {label}: {exc}", label=label) from exc

        # bool is an int subclass but never a gas figure.
        if isinstance(usage, bool) or not isinstance(usage, int):
            raise UsageEstimationFailed(f"Gas estimation for {label} returned non-integer {usage!r}", label=label)
        if usage < 0:
            raise UsageEstimationFailed(f"Gas estimation for {label} returned negative {usage}", label=label)
        return usage

    @staticmethod
    def _project(label: str, usage: int, rates: GasRates) -> CostProjection:
        return CostProjection(
            label=label,
            usage_units=usage,
            fiat_cost=compute_fiat_cost(usage, rates),
            fee_rate=rates.fee_rate,
            exchange_rate=rates.exchange_rate,
        )


__all__ = ["DEPLOY_LABEL", "CostEstimator", "CostProjection"]
