from __future__ import annotations

from typing import Any, Sequence

from domain.gas_cost import CostEstimator, CostProjection
from domain.usage import ContractInstance, UsageEstimator
from utils.gas_report import report_cost, report_rates, report_summary

from .rate_source import RateSource
from .rate_types import RateSnapshot


class GasReportSession:
    """One reporting run: capture rates once, then price any number of deploys and calls.

    Every estimate is printed as it is produced and kept in call order for the
    closing summary. Failures are not caught here.
    """

    def __init__(self, rate_source: RateSource, *, estimator: CostEstimator | None = None) -> None:
        self.rate_source = rate_source
        self.estimator = estimator or CostEstimator(rate_provider=rate_source)
        self._projections: list[CostProjection] = []

    @property
    def projections(self) -> tuple[CostProjection, ...]:
        return tuple(self._projections)

    def start(self, api_key: str | None = None) -> RateSnapshot:
        snapshot = self.rate_source.initialize(api_key)
        report_rates(snapshot)
        return snapshot

    def deploy(self, usage_estimator: UsageEstimator, target: Any, args: Sequence[Any]) -> CostProjection:
        projection = self.estimator.estimate_deploy_cost(usage_estimator, target, args)
        return self._record(projection)

    def call(
        self,
        usage_estimator: UsageEstimator,
        instance: ContractInstance,
        method_name: str,
        args: Sequence[Any],
    ) -> CostProjection:
        projection = self.estimator.estimate_call_cost(usage_estimator, instance, method_name, args)
        return self._record(projection)

    def summary(self) -> None:
        report_summary(self._projections)

    def _record(self, projection: CostProjection) -> CostProjection:
        report_cost(projection)
        self._projections.append(projection)
        return projection


__all__ = ["GasReportSession"]
