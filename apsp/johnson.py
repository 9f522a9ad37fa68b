"""Johnson's all-pairs shortest paths.

The algorithm runs in three phases:

1. A synthetic vertex with zero-weight edges to every vertex is added and
   Bellman-Ford runs from it. Its distances are the vertex *potentials*; a
   negative cycle aborts here with :class:`NegativeWeightCycleError`.
2. Every edge ``(u, v, w)`` is reweighted in place to
   ``w + pot(u) - pot(v)``, which is non-negative, and the synthetic vertex
   is removed.
3. Dijkstra runs from every vertex on the reweighted graph and each result
   is converted back to original weights.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from .bellman_ford import bellman_ford
from .dijkstra import dijkstra
from .exceptions import AlgorithmError, NegativeWeightCycleError
from .graph import Graph
from .relax import Relaxation
from .vertex import Distance, Label, Vertex

ShortestPathTree = Dict[Label, Vertex]


def synthetic_label(G: Graph) -> Label:
    """Return a label for the synthetic source that is not used in ``G``."""
    label = G.cfg.synthetic_source
    while label in G.adj:
        label += "'"
    return label


def compute_prime(G: Graph) -> Label:
    """Add the synthetic source to ``G`` and make it the active origin.

    The synthetic vertex gets a zero-weight edge to every existing vertex.
    All tentative distances are reset relative to it, so the previous
    source drops back to infinity.

    Returns:
        Label of the synthetic vertex.
    """
    s = synthetic_label(G)
    targets = list(G.adj)
    G.add_edge(s, targets, [0] * len(targets))
    G.reset(s)
    return s


def compute_potentials(G: Graph) -> Dict[Label, Distance]:
    """Return Bellman-Ford potentials of every vertex of ``G``.

    The synthetic source is always removed from ``G`` again before this
    function returns or raises. Vertices it reached directly are left
    without a predecessor.

    Raises:
        NegativeWeightCycleError: If ``G`` contains a negative-weight cycle.
    """
    G.validate()
    s = compute_prime(G)
    try:
        if bellman_ford(G, s):
            G.logger.info("johnson.negative_cycle", n=G.n - 1)
            raise NegativeWeightCycleError("graph contains a negative-weight cycle")
        return {label: vertex.weight for label, vertex in G.adj.items() if label != s}
    finally:
        G.remove_vertex(s)
        for vertex in G.adj.values():
            if vertex.predecessor == s:
                vertex.predecessor = None


def reweight(G: Graph, potentials: Mapping[Label, Distance], inverse: bool = False) -> None:
    """Shift every stored edge weight of ``G`` by the given potentials.

    Each ``(u, v, w)`` becomes ``w + pot(u) - pot(v)``; with ``inverse`` the
    shift is undone.

    Raises:
        AlgorithmError: If a forward reweighting yields a negative weight,
            which means ``potentials`` are not shortest-path distances.
    """
    sign = -1 if inverse else 1
    for u, vertex in G.adj.items():
        for v, w in vertex.edges.items():
            w2 = w + sign * (potentials[u] - potentials[v])
            if not inverse and w2 < 0:
                raise AlgorithmError(f"reweighted edge ({u}, {v}) is negative: {w2}")
            vertex.edges[v] = int(w2)


def johnson(G: Graph) -> List[ShortestPathTree]:
    """Compute shortest paths between all pairs of vertices of ``G``.

    Args:
        G: Graph with integer weights, possibly negative.

    Returns:
        One mapping per source vertex, in the iteration order of ``G.adj``.
        Each mapping holds snapshots of every vertex keyed by label, with
        ``weight`` the distance from that source in original weights and
        ``predecessor`` the previous label on the shortest path.

    Raises:
        GraphError: If ``G`` references unknown vertices.
        NegativeWeightCycleError: If ``G`` contains a negative-weight cycle.
            Nothing is computed past the Bellman-Ford phase in that case.
    """
    potentials = compute_potentials(G)
    G.logger.debug("johnson.potentials", potentials=potentials)

    original = {label: dict(vertex.edges) for label, vertex in G.adj.items()}
    reweight(G, potentials)
    rule = Relaxation.reweigh(potentials)
    results: List[ShortestPathTree] = []
    try:
        for u in list(G.adj):
            tree = dijkstra(G, u, rule)
            snapshot: ShortestPathTree = {}
            for label, vertex in tree.items():
                copy = vertex.snapshot()
                copy.edges = dict(original[label])
                snapshot[label] = copy
            results.append(snapshot)
    finally:
        if G.cfg.restore_weights:
            reweight(G, potentials, inverse=True)

    G.logger.info("johnson", n=G.n, m=G.m, sources=len(results), **G.summary())
    return results


__all__ = [
    "ShortestPathTree",
    "compute_potentials",
    "compute_prime",
    "johnson",
    "reweight",
    "synthetic_label",
]
