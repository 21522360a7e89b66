# tests/app/test_workbench.py
import pytest
from pydantic import ValidationError

from pathscope.app.build import build


def _cfg(**over):
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "seed": 3,
        "plane": {"width": 800, "height": 600},
        "placement": {"count": 25},
        "connection": {"density": 0.5, "max_degree": 4},
    }
    cfg.update(over)
    return cfg


def test_build_places_a_graph():
    bench = build(_cfg(), use_logging=False)
    assert 0 < len(bench.graph) <= 25
    assert bench.generation == 1
    assert bench.finder.name == "dijkstra"


def test_same_seed_same_layout():
    a = build(_cfg(), use_logging=False).graph
    b = build(_cfg(), use_logging=False).graph
    assert [(v.x, v.y) for v in a.vertices] == [(v.x, v.y) for v in b.vertices]


def test_regenerate_replaces_graph_and_forgets_last_query():
    bench = build(_cfg(), use_logging=False)
    old = bench.graph
    s, e = old.vertices[0], old.vertices[-1]
    bench.find(s, e)
    assert bench.last is not None

    new = bench.regenerate(density=0.3, count=10)
    assert new is not old
    assert bench.last is None
    assert bench.generation == 2
    assert bench.model.connection.density == 0.3
    assert len(new) <= 10


def test_regenerate_rejects_unknown_or_invalid_settings():
    bench = build(_cfg(), use_logging=False)
    with pytest.raises(ValueError):
        bench.regenerate(colour="teal")
    with pytest.raises(ValidationError):
        bench.regenerate(density=2.0)


def test_switching_algorithm():
    bench = build(_cfg(), use_logging=False)
    finder = bench.use("astar")
    assert finder.name == "astar"
    assert bench.model.search.kind == "astar"

    g = bench.graph
    s, e = g.vertices[0], g.vertices[-1]
    res = bench.find(s, e)
    assert res is bench.last


def test_anchor_center_puts_first_vertex_mid_plane():
    bench = build(_cfg(placement={"count": 10, "anchor_center": True}), use_logging=False)
    first = bench.graph.vertices[0]
    assert (first.x, first.y) == (400.0, 300.0)


def test_pick_returns_nearest_vertex():
    bench = build(_cfg(), use_logging=False)
    v = bench.graph.vertices[3]
    assert bench.pick(v.x + 1.0, v.y - 1.0) == v


def test_empty_graph_pick_is_none():
    bench = build(_cfg(placement={"count": 0}), use_logging=False)
    assert len(bench.graph) == 0
    assert bench.pick(1.0, 1.0) is None
