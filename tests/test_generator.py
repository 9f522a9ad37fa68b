from __future__ import annotations

import pytest

from apsp import InputError, generate_graph, with_negative_cycle


def test_generation_is_deterministic():
    a = generate_graph(n=20, m=60, seed=3, negative=True)
    b = generate_graph(n=20, m=60, seed=3, negative=True)
    assert a.edges == b.edges
    assert a.m == 60


def test_no_self_loops_or_duplicate_arcs():
    g = generate_graph(n=10, m=200, seed=1)
    pairs = [(u, v) for u, v, _ in g.edges]
    assert len(pairs) == len(set(pairs))
    assert all(u != v for u, v in pairs)
    # capped at the number of possible arcs
    assert g.m == 10 * 9


def test_dag_arcs_point_forward():
    g = generate_graph(n=12, m=30, seed=2, graph_type="dag")
    assert all(int(u) < int(v) for u, v, _ in g.edges)


def test_negative_shift_keeps_graph_cycle_safe():
    gen = generate_graph(n=30, m=120, seed=9, w_max=10, negative=True)
    assert any(w < 0 for _, _, w in gen.edges)
    g = gen.to_graph()
    assert g.n == 30
    assert g.m == gen.m
    assert not g.bellman_ford()


def test_to_graph_keeps_isolated_vertices():
    gen = generate_graph(n=5, m=0, seed=0, ensure_weakly_connected=False)
    g = gen.to_graph()
    assert sorted(g.labels()) == ["0", "1", "2", "3", "4"]
    assert g.m == 0


def test_with_negative_cycle_closes_a_minus_one_cycle():
    gen = with_negative_cycle(generate_graph(n=8, m=20, seed=5), seed=5)
    assert gen.metadata["negative_cycle"] is True
    g = gen.to_graph()
    assert g.bellman_ford("0")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 0},
        {"n": 3, "source": 3},
        {"n": 3, "m": -1},
        {"n": 3, "w_min": -1},
        {"n": 3, "w_min": 5, "w_max": 1},
        {"n": 3, "graph_type": "grid"},
        {"n": 3, "weight_dist": "exp"},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(InputError):
        generate_graph(**kwargs)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 1, "w_min": -1},
        {"n": 3, "m": 0, "ensure_weakly_connected": False, "weight_dist": "exp"},
        {"n": 3, "m": 0, "ensure_weakly_connected": False, "w_min": 9, "w_max": 2},
        {"n": 3, "m": 0, "ensure_weakly_connected": False, "graph_type": "grid"},
    ],
)
def test_arguments_checked_even_without_arcs(kwargs):
    with pytest.raises(InputError):
        generate_graph(**kwargs)


def test_with_negative_cycle_needs_backbone():
    gen = generate_graph(n=4, m=2, seed=0, ensure_weakly_connected=False)
    with pytest.raises(InputError):
        with_negative_cycle(gen)
