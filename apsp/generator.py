"""Seeded random graph generation for experiments and tests.

SUPPORTED GRAPH TYPES
---------------------
1. erdos_renyi
   Random directed graphs with uniformly sampled arcs.

2. dag
   Directed acyclic graphs (arcs only from lower to higher index).

WEIGHTS
-------
Weights are sampled from ``[w_min, w_max]`` (``uniform``) or from a narrow
band above ``w_min`` (``small_int``, many ties). With ``negative=True``
every arc ``(u, v, w)`` is shifted to ``w + p(u) - p(v)`` for random integer
potentials ``p``. The shift adds zero around any cycle, so cycle weights stay
non-negative while individual arcs become negative.

Vertex labels are the strings ``"0"`` .. ``"n-1"``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Set, Tuple

from .config import SolverConfig
from .exceptions import InputError
from .graph import Edge, Graph
from .logger import Logger

WeightDist = Literal["uniform", "small_int"]
GraphType = Literal["erdos_renyi", "dag"]


@dataclass(frozen=True)
class GeneratedGraph:
    n: int
    m: int
    edges: List[Edge]
    source: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_graph(self, config: Optional[SolverConfig] = None, logger: Logger | None = None) -> Graph:
        """Build a :class:`~apsp.graph.Graph` holding every vertex and edge."""
        g = Graph.from_edges(self.edges, source=self.source, config=config, logger=logger)
        for i in range(self.n):
            # isolated vertices never show up in the edge list
            if str(i) not in g.adj:
                g.add_edge(str(i), [], [])
        return g


def _check_weights(dist: WeightDist, w_min: int, w_max: int) -> None:
    if w_min < 0:
        raise InputError("w_min must be >= 0; use negative=True for negative arcs.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")
    if dist not in ("uniform", "small_int"):
        raise InputError(f"Unknown weight distribution: {dist}")


def _sample_weight(rng: random.Random, dist: WeightDist, w_min: int, w_max: int) -> int:
    if dist == "uniform":
        return rng.randint(w_min, w_max)

    if dist == "small_int":
        hi = min(w_max, w_min + 10)
        return rng.randint(w_min, hi)

    raise InputError(f"Unknown weight distribution: {dist}")


def generate_graph(
    *,
    n: int,
    m: Optional[int] = None,
    graph_type: GraphType = "erdos_renyi",
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    source: int = 0,
    negative: bool = False,
    potential_range: int = 50,
    ensure_weakly_connected: bool = True,
) -> GeneratedGraph:
    """Generate a directed integer-weighted graph.

    Notes:
    - If ensure_weakly_connected=True, a backbone chain (i -> i+1) is added
      first so that the instance is never totally disconnected.
    - Self loops and duplicate arcs are never generated.

    Returns:
        GeneratedGraph with its edge list.

    Raises:
        InputError: On invalid sizes, weights or unknown families.
    """
    if n <= 0:
        raise InputError("n must be > 0.")
    if not (0 <= source < n):
        raise InputError("source must be in [0, n).")
    if m is None:
        m = min(n * 4, n * (n - 1))
    if m < 0:
        raise InputError("m must be >= 0.")
    _check_weights(weight_dist, w_min, w_max)
    if graph_type not in ("erdos_renyi", "dag"):
        raise InputError(f"Unknown graph_type: {graph_type}")

    rng = random.Random(seed)

    edges_set: Set[Tuple[int, int]] = set()
    arcs: List[Tuple[int, int, int]] = []

    def add_arc(u: int, v: int) -> None:
        if u == v or (u, v) in edges_set:
            return
        edges_set.add((u, v))
        arcs.append((u, v, _sample_weight(rng, weight_dist, w_min, w_max)))

    if ensure_weakly_connected:
        for i in range(n - 1):
            add_arc(i, i + 1)

    if graph_type == "erdos_renyi":
        target_m = min(m, n * (n - 1))
        while len(arcs) < target_m:
            add_arc(rng.randrange(n), rng.randrange(n))
    elif graph_type == "dag":
        target_m = min(m, n * (n - 1) // 2)
        while len(arcs) < target_m:
            u = rng.randrange(n)
            v = rng.randrange(n)
            if u > v:
                u, v = v, u
            add_arc(u, v)

    if negative:
        pot = [rng.randint(0, potential_range) for _ in range(n)]
        arcs = [(u, v, w + pot[u] - pot[v]) for u, v, w in arcs]

    edges: List[Edge] = [(str(u), str(v), w) for u, v, w in arcs]
    return GeneratedGraph(
        n=n,
        m=len(edges),
        edges=edges,
        source=str(source),
        metadata={
            "graph_type": graph_type,
            "weight_dist": weight_dist,
            "w_min": w_min,
            "w_max": w_max,
            "seed": seed,
            "negative": negative,
            "ensure_weakly_connected": ensure_weakly_connected,
        },
    )


def with_negative_cycle(g: GeneratedGraph, seed: Optional[int] = 0) -> GeneratedGraph:
    """Return a copy of ``g`` with an extra arc that closes a negative cycle.

    The arc goes from a random vertex back along the backbone chain and has
    weight ``-(path weight) - 1``, so the cycle it closes weighs ``-1``.

    Raises:
        InputError: If ``g`` has fewer than two vertices or no backbone.
    """
    if g.n < 2 or not g.metadata.get("ensure_weakly_connected", False):
        raise InputError("need a backbone chain with at least two vertices.")
    rng = random.Random(seed)
    j = rng.randrange(1, g.n)
    weights = {(u, v): w for u, v, w in g.edges}
    chain = sum(weights[(str(i), str(i + 1))] for i in range(j))
    edges = [e for e in g.edges if (e[0], e[1]) != (str(j), "0")]
    edges.append((str(j), "0", -chain - 1))
    return GeneratedGraph(
        n=g.n,
        m=len(edges),
        edges=edges,
        source=g.source,
        metadata={**g.metadata, "negative_cycle": True},
    )


__all__ = ["GeneratedGraph", "generate_graph", "with_negative_cycle"]
