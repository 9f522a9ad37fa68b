"""Vertex record holding tentative distance, predecessor and outgoing edges."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

Label = str
Weight = int
Distance = Union[int, float]

INFINITY: float = math.inf


@dataclass
class Vertex:
    """A named node of a :class:`~apsp.graph.Graph`.

    Attributes:
        label: Unique identifier of the vertex.
        weight: Current tentative distance from the active source, or
            :data:`INFINITY` when unreached.
        predecessor: Label of the previous vertex on the current shortest
            path, ``None`` for the source and unreached vertices.
        edges: Outgoing edges as ``destination label -> weight``.
    """

    label: Label
    weight: Distance = INFINITY
    predecessor: Optional[Label] = None
    edges: Dict[Label, Weight] = field(default_factory=dict)

    @property
    def reached(self) -> bool:
        """Return ``True`` if the vertex has a finite distance."""
        return self.weight != INFINITY

    def snapshot(self) -> "Vertex":
        """Return an independent copy of the current vertex state."""
        return Vertex(
            label=self.label,
            weight=self.weight,
            predecessor=self.predecessor,
            edges=dict(self.edges),
        )

    def __str__(self) -> str:
        lines = [
            f"Vertex {self.label}:",
            f"\tWeight: {self.weight}",
            f"\tPredecessor: {self.predecessor if self.predecessor is not None else 'NONE'}",
            "\tEdges:",
        ]
        for v, cost in self.edges.items():
            lines.append(f"\t\t{cost} {self.label} -> {v}")
        return "\n".join(lines)


__all__ = ["Vertex", "Label", "Weight", "Distance", "INFINITY"]
