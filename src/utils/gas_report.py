from __future__ import annotations

from typing import Iterable

from domain.gas_cost import CostProjection
from domain.pricing import GasRates

from .formatting import format_currency, format_decimal


def _render_group(title: str, rows: list[tuple[str, str]]) -> str:
    label_width = max((len(label) for label, _ in rows), default=0)
    lines = [title]
    for label, value in rows:
        lines.append(f"  {label:<{label_width}}  {value}")
    return "\n".join(lines)


def report_rates(snapshot: GasRates) -> None:
    rows = [
        ("Gas rate", f"{format_decimal(snapshot.fee_rate)} GWEI"),
        ("Eth rate", f"US$ {format_decimal(snapshot.exchange_rate)}"),
    ]
    print(_render_group("Current rates", rows))


def report_cost(projection: CostProjection) -> None:
    rows = [
        ("Gas usage", str(projection.usage_units)),
        ("Cost", f"US$ {format_decimal(projection.fiat_cost)}"),
    ]
    if projection.is_deploy:
        title = "Deploy Cost"
        rows.insert(0, ("Method", "Deploy Cost"))
    else:
        title = f"Method: {projection.label}"
    print()
    print(_render_group(title, rows))


def report_summary(projections: Iterable[CostProjection]) -> None:
    projection_list = list(projections)
    print("Estimated costs (USD):")
    if not projection_list:
        print("  (no estimates)")
        return

    rows = [
        (projection.label, str(projection.usage_units), format_currency(projection.fiat_cost))
        for projection in projection_list
    ]
    operation_width = max(len("Operation"), max((len(label) for label, _, _ in rows), default=0))
    usage_width = max(len("Gas usage"), max((len(usage) for _, usage, _ in rows), default=0))
    cost_width = max(len("Cost"), max((len(cost) for _, _, cost in rows), default=0))

    header = f"{'Operation':<{operation_width}} {'Gas usage':>{usage_width}} {'Cost':>{cost_width}}"
    lines = [header, "-" * len(header)]
    for label, usage, cost in rows:
        lines.append(f"{label:<{operation_width}} {usage:>{usage_width}} {cost:>{cost_width}}")
    lines.append("-" * len(header))
    print("\n".join(lines))


__all__ = ["report_cost", "report_rates", "report_summary"]
