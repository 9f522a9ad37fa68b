from __future__ import annotations

import pytest

from apsp import INFINITY, AlgorithmError, Graph, generate_graph


def test_clrs_distances_and_extraction_order(clrs_dijkstra_graph):
    res = clrs_dijkstra_graph.dijkstra()
    assert list(res) == ["s", "y", "z", "t", "x"]
    assert {label: v.weight for label, v in res.items()} == {
        "s": 0,
        "y": 5,
        "z": 7,
        "t": 8,
        "x": 9,
    }
    assert {label: v.predecessor for label, v in res.items()} == {
        "s": None,
        "y": "s",
        "z": "y",
        "t": "y",
        "x": "t",
    }


def test_returns_live_vertices(clrs_dijkstra_graph):
    g = clrs_dijkstra_graph
    res = g.dijkstra()
    for label, vertex in res.items():
        assert vertex is g.adj[label]


def test_source_distance_is_zero_for_every_source(clrs_dijkstra_graph):
    g = clrs_dijkstra_graph
    for s in g.labels():
        res = g.dijkstra(s)
        assert res[s].weight == 0
        assert res[s].predecessor is None
        assert next(iter(res)) == s
    assert g.source == "s"


def test_reset_then_rerun_is_idempotent(clrs_dijkstra_graph):
    g = clrs_dijkstra_graph
    first = {label: (v.weight, v.predecessor) for label, v in g.dijkstra("t").items()}
    g.reset("t")
    second = {label: (v.weight, v.predecessor) for label, v in g.dijkstra("t").items()}
    assert first == second


def test_unreachable_vertices_come_last():
    g = Graph("a", ["b"], [2])
    g.add_edge("island", ["a"], [1])
    g.add_edge("b", [], [])
    res = g.dijkstra()
    assert list(res) == ["a", "b", "island"]
    assert res["island"].weight == INFINITY
    assert res["island"].predecessor is None


def test_negative_weight_is_rejected():
    g = Graph("a", ["b"], [-1])
    g.add_edge("b", [], [])
    with pytest.raises(AlgorithmError):
        g.dijkstra()


@pytest.mark.parametrize("seed", [0, 3, 11])
def test_distances_grow_along_predecessor_chains(seed):
    g = generate_graph(n=40, m=160, seed=seed, w_min=0, w_max=20).to_graph()
    res = g.dijkstra()
    for label, vertex in res.items():
        if vertex.predecessor is None:
            continue
        parent = res[vertex.predecessor]
        assert parent.weight <= vertex.weight
        assert vertex.weight == parent.weight + parent.edges[label]


@pytest.mark.parametrize("seed", [1, 2])
def test_matches_bellman_ford_on_non_negative_graphs(seed):
    g = generate_graph(n=30, m=100, seed=seed, graph_type="dag").to_graph()
    expected = {label: v.weight for label, v in g.dijkstra("0").items()}
    assert not g.bellman_ford("0")
    assert g.distances() == expected


def test_counters_track_runs(clrs_dijkstra_graph):
    g = clrs_dijkstra_graph
    g.dijkstra()
    g.dijkstra("x")
    summary = g.summary()
    assert summary["dijkstra_runs"] == 2
    assert summary["dijkstra_pops"] == 10
    assert summary["edges_relaxed"] == 2 * g.m
