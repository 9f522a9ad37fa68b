"""Configuration knobs shared by the shortest-path algorithms."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConfigError


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for :class:`~apsp.graph.Graph` algorithms.

    Attributes:
        synthetic_source: Preferred label of the temporary vertex Johnson's
            algorithm connects to every other vertex. A ``'`` is appended
            while the label clashes with an existing vertex.
        early_exit: If ``True``, Bellman-Ford stops as soon as a full round
            relaxes nothing. If ``False`` it always runs ``|V| - 1`` rounds.
        restore_weights: If ``True``, Johnson's algorithm puts the original
            edge weights back after the per-source Dijkstra passes. If
            ``False`` the reweighted (non-negative) weights stay in place.
    """

    synthetic_source: str = "S"
    early_exit: bool = True
    restore_weights: bool = True

    def __post_init__(self) -> None:
        """Validate option values."""
        if not isinstance(self.synthetic_source, str) or not self.synthetic_source:
            raise ConfigError("synthetic_source must be a non-empty string.")


__all__ = ["SolverConfig"]
