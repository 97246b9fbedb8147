from __future__ import annotations

from typing import Any, Protocol, Sequence


class UsageEstimator(Protocol):
    """Simulates a call without committing it and reports the gas units it would consume.

    ``target`` is either something deployable (estimating its constructor) or an
    operation resolved from a deployed instance.
    """

    def estimate(self, target: Any, args: Sequence[Any]) -> int: ...


class ContractInstance(Protocol):
    """A deployed contract that can be asked for its operations by name."""

    def get_operation(self, name: str) -> Any | None: ...


class AttributeOperations:
    """Exposes the public callable attributes of an object as contract operations."""

    def __init__(self, instance: Any) -> None:
        self.instance = instance

    def get_operation(self, name: str) -> Any | None:
        if not name or name.startswith("_"):
            return None
        operation = getattr(self.instance, name, None)
        if not callable(operation):
            return None
        return operation


__all__ = ["AttributeOperations", "ContractInstance", "UsageEstimator"]
