"""Custom exception types used across :mod:`apsp`."""

from __future__ import annotations


class APSPError(Exception):
    """Base class for all package-specific errors."""


class InputError(APSPError, ValueError):
    """Raised for invalid user input such as mismatched edge lists."""


class GraphError(InputError):
    """Raised when the graph structure is invalid.

    The typical case is an edge pointing at a label that was never added as a
    vertex, or a source label that is not part of the graph.
    """


class ConfigError(APSPError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(APSPError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


class NegativeWeightCycleError(AlgorithmError):
    """Raised when a negative-weight cycle makes shortest paths undefined."""


__all__ = [
    "APSPError",
    "InputError",
    "GraphError",
    "ConfigError",
    "AlgorithmError",
    "NegativeWeightCycleError",
]
