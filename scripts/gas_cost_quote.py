# flake8: noqa E402
# Run via uv so project deps are loaded, e.g.:
# uv run scripts/gas_cost_quote.py --deploy 1200000 --call transfer=51000 --call balanceOf=24000
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

# Ensure the src directory is importable when the script is invoked via uv/python directly.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from services.gas_report_session import GasReportSession
from services.rate_source import RateSource

# Deploy target for the contract constructor; never equal to an operation name.
DEPLOY_TARGET = object()


class _KnownGasUsage:
    """Usage estimator answering with one gas figure given on the command line."""

    def __init__(self, units: int) -> None:
        self.units = units

    def estimate(self, target: Any, args: Sequence[Any]) -> int:
        return self.units


class _KnownOperations:
    def __init__(self, names: Sequence[str]) -> None:
        self.names = frozenset(names)

    def get_operation(self, name: str) -> str | None:
        return name if name in self.names else None


def parse_call(raw: str) -> tuple[str, int]:
    name, sep, units = raw.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=UNITS, got {raw!r}")
    try:
        return name, int(units)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"gas units must be an integer, got {units!r}") from exc


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Price known gas figures at live Etherscan rates.")
    parser.add_argument("--api-key", help="Etherscan API key (default: ETHERSCAN_API_KEY from env/.env).")
    parser.add_argument("--deploy", type=int, help="Gas units consumed by the contract deployment.")
    parser.add_argument(
        "--call",
        type=parse_call,
        action="append",
        default=[],
        metavar="NAME=UNITS",
        help="Gas units consumed by a named contract method; may be repeated.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log oracle requests.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    session = GasReportSession(RateSource())
    session.start(args.api_key)
    if args.deploy is not None:
        session.deploy(_KnownGasUsage(args.deploy), DEPLOY_TARGET, [])
    operations = _KnownOperations([name for name, _ in args.call])
    # Each --call is priced on its own, so repeated names keep their own figures.
    for name, units in args.call:
        session.call(_KnownGasUsage(units), operations, name, [])
    print()
    session.summary()


if __name__ == "__main__":
    main()
