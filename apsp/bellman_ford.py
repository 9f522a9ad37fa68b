"""Bellman-Ford single-source shortest paths with negative-cycle detection."""

from __future__ import annotations

from typing import Dict, Optional

from .graph import Graph
from .relax import Relaxation
from .vertex import INFINITY, Distance, Label


def bellman_ford(
    G: Graph,
    source: Optional[Label] = None,
    relaxation: Optional[Relaxation] = None,
) -> bool:
    """Run Bellman-Ford from ``source`` over ``G``.

    Up to ``|V| - 1`` rounds relax every outgoing edge of every vertex. A
    final pass then looks for an edge that can still be relaxed; such an
    edge exists exactly when a negative-weight cycle is reachable from
    ``source``.

    The resulting distances and predecessors are written to the vertices of
    ``G`` (converted to original weights when ``relaxation`` is in
    ``REWEIGH`` mode).

    Args:
        G: Graph to run on. It is validated first.
        source: Source label, ``G.source`` if omitted.
        relaxation: Relaxation rule, ``NORMAL`` if omitted.

    Returns:
        ``True`` if a negative-weight cycle is reachable from ``source``,
        ``False`` otherwise.

    Raises:
        GraphError: If ``G`` references unknown vertices or ``source`` is
            not a vertex of ``G``.
    """
    src = G.resolve_source(source)
    G.validate()
    rule = relaxation or Relaxation.normal()

    dist: Dict[Label, Distance] = {label: INFINITY for label in G.adj}
    pred: Dict[Label, Optional[Label]] = {label: None for label in G.adj}
    dist[src] = 0

    rounds = 0
    for _ in range(G.n - 1):
        updated = False
        rounds += 1
        for u, vertex in G.adj.items():
            if dist[u] == INFINITY:
                continue
            for v, w in vertex.edges.items():
                G.counters["edges_relaxed"] += 1
                if rule.relax(u, v, w, dist, pred):
                    updated = True
        if not updated and G.cfg.early_exit:
            break
    G.counters["bellman_ford_rounds"] += rounds

    has_negative_cycle = any(
        dist[v] > rule.candidate(u, v, w, dist)
        for u, vertex in G.adj.items()
        for v, w in vertex.edges.items()
    )

    for label, vertex in G.adj.items():
        vertex.weight = rule.to_original(src, label, dist[label])
        vertex.predecessor = pred[label]

    G.logger.debug(
        "bellman_ford",
        source=src,
        mode=rule.mode.value,
        rounds=rounds,
        negative_cycle=has_negative_cycle,
    )
    return has_negative_cycle


__all__ = ["bellman_ford"]
