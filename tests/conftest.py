from __future__ import annotations

import pytest

from apsp import Graph


@pytest.fixture
def clrs_johnson_graph() -> Graph:
    """Five-vertex graph with negative arcs and no negative cycle."""
    g = Graph("1", ["2", "3", "5"], [3, 8, -4])
    g.add_edge("2", ["4", "5"], [1, 7])
    g.add_edge("3", ["2"], [4])
    g.add_edge("4", ["1", "3"], [2, -5])
    g.add_edge("5", ["4"], [6])
    return g


@pytest.fixture
def clrs_bellman_ford_graph() -> Graph:
    g = Graph("s", ["t", "y"], [6, 7])
    g.add_edge("t", ["x", "y", "z"], [5, 8, -4])
    g.add_edge("x", ["t"], [-2])
    g.add_edge("y", ["x", "z"], [-3, 9])
    g.add_edge("z", ["s", "x"], [2, 7])
    return g


@pytest.fixture
def clrs_dijkstra_graph() -> Graph:
    g = Graph("s", ["t", "y"], [10, 5])
    g.add_edge("t", ["x", "y"], [1, 2])
    g.add_edge("x", ["z"], [4])
    g.add_edge("y", ["t", "x", "z"], [3, 9, 2])
    g.add_edge("z", ["s", "x"], [7, 6])
    return g
