from __future__ import annotations

import pytest

from apsp import INFINITY, AlgorithmError, ConfigError, Relaxation, RelaxMode


def test_normal_relaxation_updates_distance_and_predecessor():
    rule = Relaxation.normal()
    dist = {"u": 2, "v": INFINITY}
    pred = {"u": None, "v": None}
    assert rule.relax("u", "v", -5, dist, pred)
    assert dist["v"] == -3
    assert pred["v"] == "u"
    # no improvement the second time
    assert not rule.relax("u", "v", -5, dist, pred)


def test_relaxation_from_unreached_vertex_is_a_noop():
    rule = Relaxation.normal()
    dist = {"u": INFINITY, "v": INFINITY}
    pred = {"u": None, "v": None}
    assert not rule.relax("u", "v", -100, dist, pred)
    assert dist["v"] == INFINITY
    assert pred["v"] is None


def test_reweigh_requires_potentials():
    with pytest.raises(ConfigError):
        Relaxation(RelaxMode.REWEIGH)


def test_reweigh_rejects_negative_weights():
    rule = Relaxation.reweigh({"u": 0, "v": -1})
    with pytest.raises(AlgorithmError):
        rule.relax("u", "v", -1, {"u": 0, "v": INFINITY}, {"u": None, "v": None})


def test_reweigh_converts_back_to_original_weights():
    rule = Relaxation.reweigh({"s": -1, "v": -5})
    assert rule.to_original("s", "v", 3) == 3 - (-1) + (-5)
    assert rule.to_original("s", "v", INFINITY) == INFINITY
    assert Relaxation.normal().to_original("s", "v", 3) == 3


def test_potentials_are_frozen():
    potentials = {"u": 0, "v": -2}
    rule = Relaxation.reweigh(potentials)
    potentials["v"] = 100
    assert rule.potentials["v"] == -2
    with pytest.raises(TypeError):
        rule.potentials["v"] = 1  # type: ignore[index]
