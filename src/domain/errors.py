from __future__ import annotations


class GasReportError(Exception):
    """Base class for failures raised while producing a gas cost report."""


class OracleUnavailable(GasReportError):
    """Fetching or parsing the live rates failed; the session cannot continue."""


class NotInitialized(GasReportError):
    """Rates were requested before the rate source captured a snapshot."""


class UsageEstimationFailed(GasReportError):
    def __init__(self, message: str, *, label: str) -> None:
        super().__init__(message)
        self.label = label


class UnknownOperation(GasReportError):
    def __init__(self, method_name: str) -> None:
        super().__init__(f"Contract does not expose an operation named {method_name!r}")
        self.method_name = method_name


__all__ = [
    "GasReportError",
    "NotInitialized",
    "OracleUnavailable",
    "UnknownOperation",
    "UsageEstimationFailed",
]
