import itertools

import numpy as np
import pytest

from pathscope.app.protocols import PathFinder
from pathscope.config.models import AStarModel, DijkstraModel
from pathscope.domain.entities.graph import path_cost
from pathscope.graph.builder import build_graph
from pathscope.runtime import registries
from pathscope.runtime.registries import (
    AStarFinder,
    find_path,
    known_algorithms,
    make_finder,
    register_finder,
)


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("density", [0.3, 0.5, 0.7])
def test_dijkstra_and_astar_agree_on_cost(seed, density):
    g = build_graph(800, 600, 40, density, 4, rng=np.random.default_rng(seed))
    pairs = itertools.islice(itertools.combinations(g.vertices, 2), 0, None, 37)
    for s, e in pairs:
        d = find_path("dijkstra", g.vertices, g.edges, s, e)
        a = find_path("astar", g.vertices, g.edges, s, e)
        assert d.found(s) == a.found(s)
        if d.found(s):
            assert a.cost == pytest.approx(d.cost)
            assert path_cost(d.path, g.edges) == pytest.approx(d.cost)
            assert path_cost(a.path, g.edges) == pytest.approx(a.cost)


def test_zero_heuristic_matches_dijkstra():
    g = build_graph(800, 600, 30, 0.5, 4, rng=np.random.default_rng(99))
    s, e = g.vertices[0], g.vertices[-1]
    blind = make_finder(AStarModel(heuristic="zero")).find(g.vertices, g.edges, s, e)
    base = find_path("dijkstra", g.vertices, g.edges, s, e)
    assert blind.cost == pytest.approx(base.cost)


@pytest.mark.parametrize("algo", ["dijkstra", "astar"])
def test_repeat_queries_are_identical(algo):
    g = build_graph(800, 600, 40, 0.5, 4, rng=np.random.default_rng(5))
    s, e = g.vertices[1], g.vertices[-2]
    r1 = find_path(algo, g.vertices, g.edges, s, e)
    r2 = find_path(algo, g.vertices, g.edges, s, e)
    assert r1.path == r2.path
    assert r1.visited == r2.visited


def test_registry_kinds_and_protocol():
    assert known_algorithms() == ["astar", "dijkstra"]
    finder = make_finder(AStarModel())
    assert isinstance(finder, AStarFinder)
    assert isinstance(finder, PathFinder)
    assert make_finder(DijkstraModel()).name == "dijkstra"


def test_unknown_algorithm_raises(square):
    v0 = square.vertices[0]
    with pytest.raises(ValueError, match="bfs"):
        find_path("bfs", square.vertices, square.edges, v0, v0)


def test_registered_kind_is_reachable_by_name(square, monkeypatch):
    monkeypatch.setattr(registries, "_finder_registry", dict(registries._finder_registry))
    monkeypatch.setattr(registries, "_default_registry", dict(registries._default_registry))
    seen = []

    @register_finder("blind", defaults=lambda: AStarModel(heuristic="zero"))
    def _make_blind(cfg):
        seen.append(cfg)
        return AStarFinder(name="blind", heuristic=lambda a, b: 0.0)

    v0, _, v2, _ = square.vertices
    res = find_path("blind", square.vertices, square.edges, v0, v2)

    assert "blind" in known_algorithms()
    assert res.cost == 20.0
    assert seen == [AStarModel(heuristic="zero")]


def test_unknown_algorithm_message_lists_registered_names(square):
    v0 = square.vertices[0]
    with pytest.raises(ValueError, match=r"\['astar', 'dijkstra'\]"):
        find_path("bfs", square.vertices, square.edges, v0, v0)
