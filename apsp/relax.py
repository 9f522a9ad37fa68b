"""Edge relaxation rules shared by Bellman-Ford and Dijkstra."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, cast

from .exceptions import AlgorithmError, ConfigError
from .vertex import INFINITY, Distance, Label, Weight


class RelaxMode(Enum):
    """Which distance space a relaxation works in."""

    NORMAL = "normal"
    REWEIGH = "reweigh"


@dataclass(frozen=True)
class Relaxation:
    """Relaxation strategy.

    Two quantities are kept apart here. *Live* distances are the tentative
    distances of the running algorithm; they are owned by the caller and
    passed to :meth:`relax`. *Potentials* are the Bellman-Ford distances
    from Johnson's synthetic source; they are frozen when the strategy is
    built and only read afterwards.

    In ``NORMAL`` mode edges are relaxed with their stored weight and live
    distances are final distances.

    In ``REWEIGH`` mode the stored weights must already be reweighted to
    ``w + pot(u) - pot(v)``. Relaxation happens in the reweighted space
    (where every weight is non-negative) and :meth:`to_original` maps a live
    distance from ``source`` back to the original weights.

    Args:
        mode: Relaxation mode.
        potentials: Vertex potentials, required in ``REWEIGH`` mode.

    Raises:
        ConfigError: If ``REWEIGH`` is requested without potentials.
    """

    mode: RelaxMode = RelaxMode.NORMAL
    potentials: Optional[Mapping[Label, Distance]] = None

    def __post_init__(self) -> None:
        """Validate the mode and freeze the potentials."""
        if self.mode is RelaxMode.REWEIGH and self.potentials is None:
            raise ConfigError("REWEIGH relaxation requires vertex potentials.")
        if self.potentials is not None:
            object.__setattr__(self, "potentials", MappingProxyType(dict(self.potentials)))

    @classmethod
    def normal(cls) -> "Relaxation":
        """Return the plain relaxation rule."""
        return cls(RelaxMode.NORMAL)

    @classmethod
    def reweigh(cls, potentials: Mapping[Label, Distance]) -> "Relaxation":
        """Return the reweighted relaxation rule for ``potentials``."""
        return cls(RelaxMode.REWEIGH, potentials)

    def candidate(self, u: Label, v: Label, w: Weight, dist: Mapping[Label, Distance]) -> Distance:
        """Return the distance ``v`` would get through edge ``(u, v, w)``.

        Raises:
            AlgorithmError: If a ``REWEIGH`` edge has a negative weight,
                which means the graph was not reweighted.
        """
        if self.mode is RelaxMode.REWEIGH and w < 0:
            raise AlgorithmError(f"negative reweighted weight {w} on edge ({u}, {v})")
        du = dist[u]
        if du == INFINITY:
            return INFINITY
        return du + w

    def relax(
        self,
        u: Label,
        v: Label,
        w: Weight,
        dist: Dict[Label, Distance],
        pred: Dict[Label, Optional[Label]],
    ) -> bool:
        """Relax edge ``(u, v, w)`` against the live distances.

        Returns:
            ``True`` if ``dist[v]`` improved.
        """
        cand = self.candidate(u, v, w, dist)
        if dist[v] > cand:
            dist[v] = cand
            pred[v] = u
            return True
        return False

    def to_original(self, source: Label, v: Label, d: Distance) -> Distance:
        """Convert a live distance from ``source`` to ``v`` into original weights."""
        if self.mode is RelaxMode.NORMAL or d == INFINITY:
            return d
        pot = cast(Mapping[Label, Distance], self.potentials)
        return d - pot[source] + pot[v]


__all__ = ["RelaxMode", "Relaxation"]
