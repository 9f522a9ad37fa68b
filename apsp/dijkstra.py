"""Dijkstra single-source shortest paths under either relaxation mode."""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Set, Tuple

from .exceptions import AlgorithmError
from .graph import Graph
from .relax import Relaxation
from .vertex import INFINITY, Distance, Label, Vertex


def dijkstra(
    G: Graph,
    source: Optional[Label] = None,
    relaxation: Optional[Relaxation] = None,
) -> Dict[Label, Vertex]:
    """Run Dijkstra's algorithm from ``source`` over ``G``.

    Args:
        G: Graph whose effective edge weights are non-negative.
        source: Source label, ``G.source`` if omitted.
        relaxation: Relaxation rule, ``NORMAL`` if omitted.

    Returns:
        The vertices of ``G`` keyed by label, in the order they were settled,
        followed by unreachable vertices. The values are the live vertex
        objects of ``G``, not copies.

    Raises:
        GraphError: If ``G`` references unknown vertices or ``source`` is
            not a vertex of ``G``.
        AlgorithmError: If a negative effective edge weight is met.
    """
    src = G.resolve_source(source)
    G.validate()
    rule = relaxation or Relaxation.normal()
    G.reset(src)
    G.counters["dijkstra_runs"] += 1

    dist: Dict[Label, Distance] = {label: INFINITY for label in G.adj}
    pred: Dict[Label, Optional[Label]] = {label: None for label in G.adj}
    dist[src] = 0

    # ties are broken by label
    pq: List[Tuple[Distance, Label]] = [(0, src)]
    seen: Set[Label] = set()
    order: List[Label] = []
    while pq:
        d, u = heapq.heappop(pq)
        if d != dist[u] or u in seen:
            continue
        seen.add(u)
        order.append(u)
        G.counters["dijkstra_pops"] += 1
        for v, w in G.adj[u].edges.items():
            G.counters["edges_relaxed"] += 1
            if w < 0:
                raise AlgorithmError(f"negative weight {w} on edge ({u}, {v}); Dijkstra requires w >= 0")
            if rule.relax(u, v, w, dist, pred):
                heapq.heappush(pq, (dist[v], v))

    order.extend(label for label in G.adj if label not in seen)

    result: Dict[Label, Vertex] = {}
    for label in order:
        vertex = G.adj[label]
        vertex.weight = rule.to_original(src, label, dist[label])
        vertex.predecessor = pred[label]
        result[label] = vertex

    G.logger.debug(
        "dijkstra",
        source=src,
        mode=rule.mode.value,
        settled=len(seen),
        unreachable=G.n - len(seen),
    )
    return result


__all__ = ["dijkstra"]
