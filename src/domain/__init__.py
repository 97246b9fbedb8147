"""Domain types for the gas cost reporter.

This package holds the cost formula, the projection model and the capability
interfaces the reporter consumes. It does not talk to the network; live rates
are supplied through a ``RateProvider``.
"""

__all__ = [
    "errors",
    "gas_cost",
    "pricing",
    "usage",
]
