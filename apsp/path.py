"""Utilities for reconstructing paths from predecessor labels."""

from __future__ import annotations

from typing import List, Mapping, Optional, Set

from .exceptions import GraphError
from .vertex import Label, Vertex


def reconstruct_path(
    tree: Mapping[Label, Vertex],
    source: Label,
    target: Label,
) -> List[Label]:
    """Return the path from ``source`` to ``target`` in a shortest-path tree.

    Args:
        tree: Vertices keyed by label, as returned by
            :meth:`~apsp.graph.Graph.dijkstra` or one entry of
            :meth:`~apsp.graph.Graph.johnson`.
        source: Source label the tree was computed from.
        target: Target label.

    Returns:
        Labels from source to target (inclusive). Returns an empty list if no
        path exists.

    Raises:
        GraphError: If ``source`` or ``target`` is not in ``tree``.
    """
    if source not in tree or target not in tree:
        raise GraphError("source/target not in the shortest-path tree.")
    if source == target:
        return [source]

    chain: List[Label] = []
    cur: Optional[Label] = target
    seen: Set[Label] = set()
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if cur in seen:
            break
        seen.add(cur)
        cur = tree[cur].predecessor
        if cur is not None and cur not in tree:
            break

    return []  # unreachable


__all__ = ["reconstruct_path"]
