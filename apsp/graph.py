"""Directed, integer-weighted graph keyed by vertex label."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import SolverConfig
from .exceptions import GraphError, InputError
from .logger import Logger, NoopLogger
from .relax import Relaxation
from .vertex import INFINITY, Distance, Label, Vertex, Weight

Edge = Tuple[Label, Label, Weight]


class Graph:
    """Directed graph whose edge weights may be negative.

    Vertices are identified by their label only. The graph is built from a
    source vertex and its outgoing edges; :meth:`add_edge` adds the other
    vertices. Every edge destination has to be added as a vertex before an
    algorithm runs, otherwise :meth:`validate` raises
    :class:`~apsp.exceptions.GraphError`.

    ``source`` is only the default origin. :meth:`bellman_ford` and
    :meth:`dijkstra` accept an explicit source and never change it.

    Args:
        source: Label of the initial vertex.
        destinations: Destination labels of the source's outgoing edges.
        weights: Weights matching ``destinations``.
        config: Optional solver configuration.
        logger: Optional logger receiving algorithm events.

    Examples:
        ```python
        >>> g = Graph("a", ["b"], [-2])
        >>> g.add_edge("b", [], [])
        >>> g.bellman_ford()
        False
        >>> g.adj["b"].weight
        -2
        ```
    """

    def __init__(
        self,
        source: Label,
        destinations: Sequence[Label] = (),
        weights: Sequence[Weight] = (),
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.adj: Dict[Label, Vertex] = {}
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "edges_relaxed": 0,
            "bellman_ford_rounds": 0,
            "dijkstra_runs": 0,
            "dijkstra_pops": 0,
        }
        self.add_edge(source, destinations, weights)
        self.source: Label = source
        self.adj[source].weight = 0

    # ---------- construction ---------------------------------------------

    def add_edge(
        self,
        label: Label,
        destinations: Sequence[Label],
        weights: Sequence[Weight],
    ) -> None:
        """Insert vertex ``label`` with edges ``label -> destinations[i]``.

        An existing vertex with the same label is replaced entirely, so its
        previous edges and distance are lost.

        Args:
            label: Vertex label.
            destinations: Destination labels.
            weights: Integer weight of each edge.

        Raises:
            InputError: If ``destinations`` and ``weights`` differ in length,
                a label is not a non-empty string, or a weight is not an
                integer.
        """
        _check_label(label)
        if len(destinations) != len(weights):
            raise InputError(
                f"vertex {label!r}: {len(destinations)} destinations but {len(weights)} weights"
            )
        vertex = Vertex(label)
        for v, w in zip(destinations, weights):
            _check_label(v)
            if isinstance(w, bool) or not isinstance(w, int):
                raise InputError(f"non-integer weight {w!r} on edge ({label}, {v})")
            vertex.edges[v] = w
        self.adj[label] = vertex

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge],
        source: Optional[Label] = None,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` edges.

        Both endpoints of every edge become vertices. A repeated ``(u, v)``
        keeps the last weight.

        Args:
            edges: Iterable of ``(u, v, w)`` tuples.
            source: Default source; the first tail vertex if omitted.
            config: Optional solver configuration.
            logger: Optional logger.

        Returns:
            A graph populated with the provided edges.

        Raises:
            InputError: If there are no edges and no ``source``.
        """
        out: Dict[Label, Dict[Label, Weight]] = {}
        for u, v, w in edges:
            out.setdefault(u, {})[v] = w
            out.setdefault(v, {})
        if source is None:
            if not out:
                raise InputError("cannot infer a source from an empty edge list")
            source = next(iter(out))
        first = out.pop(source, {})
        g = cls(source, list(first), list(first.values()), config=config, logger=logger)
        for u, nbrs in out.items():
            g.add_edge(u, list(nbrs), list(nbrs.values()))
        return g

    def remove_vertex(self, label: Label) -> Vertex:
        """Remove and return vertex ``label``.

        Edges of other vertices pointing at it are left untouched.
        """
        if label == self.source:
            raise GraphError(f"cannot remove the default source {label!r}")
        try:
            return self.adj.pop(label)
        except KeyError:
            raise GraphError(f"unknown vertex {label!r}") from None

    # ---------- inspection -----------------------------------------------

    @property
    def n(self) -> int:
        """Number of vertices."""
        return len(self.adj)

    @property
    def m(self) -> int:
        """Number of edges."""
        return sum(len(vertex.edges) for vertex in self.adj.values())

    def labels(self) -> List[Label]:
        """Return vertex labels in iteration order."""
        return list(self.adj)

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(u, v, w)``."""
        for u, vertex in self.adj.items():
            for v, w in vertex.edges.items():
                yield u, v, w

    def distances(self) -> Dict[Label, Distance]:
        """Return the current tentative distance of every vertex."""
        return {label: vertex.weight for label, vertex in self.adj.items()}

    def summary(self) -> Dict[str, int]:
        """Return a copy of the operation counters."""
        return dict(self.counters)

    def resolve_source(self, source: Optional[Label]) -> Label:
        """Return ``source`` or the default source, checking it exists.

        Raises:
            GraphError: If the label is not a vertex of the graph.
        """
        src = self.source if source is None else source
        if src not in self.adj:
            raise GraphError(f"source {src!r} is not a vertex of the graph")
        return src

    def validate(self) -> None:
        """Check that every edge destination is a vertex of the graph.

        Raises:
            GraphError: On the first edge pointing at an unknown label.
        """
        for u, v, _ in self.edges():
            if v not in self.adj:
                raise GraphError(f"edge ({u}, {v}) points at unknown vertex {v!r}")

    def reset(self, source: Optional[Label] = None) -> None:
        """Reset distances (``source`` to 0, others to infinity) and predecessors."""
        src = self.resolve_source(source)
        for label, vertex in self.adj.items():
            vertex.weight = 0 if label == src else INFINITY
            vertex.predecessor = None

    # ---------- algorithms -----------------------------------------------

    def bellman_ford(
        self, source: Optional[Label] = None, relaxation: Optional[Relaxation] = None
    ) -> bool:
        """Run Bellman-Ford; see :func:`apsp.bellman_ford.bellman_ford`.

        Returns:
            ``True`` if a negative-weight cycle is reachable from the source.
        """
        from .bellman_ford import bellman_ford

        return bellman_ford(self, source, relaxation)

    def dijkstra(
        self, source: Optional[Label] = None, relaxation: Optional[Relaxation] = None
    ) -> Dict[Label, Vertex]:
        """Run Dijkstra; see :func:`apsp.dijkstra.dijkstra`."""
        from .dijkstra import dijkstra

        return dijkstra(self, source, relaxation)

    def johnson(self) -> List[Dict[Label, Vertex]]:
        """Run Johnson's algorithm; see :func:`apsp.johnson.johnson`."""
        from .johnson import johnson

        return johnson(self)

    def distance_matrix(self) -> Dict[Label, Dict[Label, Distance]]:
        """Return all-pairs distances as ``matrix[source][target]``."""
        from .matrix import johnson_matrix

        results = self.johnson()
        return johnson_matrix(results, self.labels())

    def path(self, tree: Dict[Label, Vertex], source: Label, target: Label) -> List[Label]:
        """Return the labels on the shortest path from ``source`` to ``target``.

        Args:
            tree: Result of :meth:`dijkstra` from ``source`` or the entry of
                :meth:`johnson` for ``source``.
            source: Source label of ``tree``.
            target: Target label.

        Returns:
            Labels from source to target, or ``[]`` if unreachable.
        """
        from .path import reconstruct_path

        return reconstruct_path(tree, source, target)

    def __str__(self) -> str:
        return "\n".join(str(vertex) for vertex in self.adj.values())


def _check_label(label: object) -> None:
    if not isinstance(label, str) or not label:
        raise InputError(f"vertex labels must be non-empty strings, got {label!r}")


__all__ = ["Graph", "Edge"]
