# runtime/registries.py
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pathscope.app.protocols import PathFinder
from pathscope.config.models import AStarModel, DijkstraModel, SearchUnion
from pathscope.domain.entities.graph import Edge, SearchResult, Vertex, euclidean
from pathscope.search.astar import Heuristic, astar
from pathscope.search.dijkstra import dijkstra

FinderFactory = Callable[[SearchUnion], PathFinder]

_finder_registry: dict[str, FinderFactory] = {}
_default_registry: dict[str, Callable[[], SearchUnion]] = {}

_heuristics: dict[str, Heuristic] = {
    "euclidean": euclidean,
    "zero": lambda a, b: 0.0,
}


@dataclass
class DijkstraFinder:
    name: str = "dijkstra"

    def find(self, vertices, edges, start, end) -> SearchResult:
        return dijkstra(vertices, edges, start, end)


@dataclass
class AStarFinder:
    name: str = "astar"
    heuristic: Heuristic = euclidean

    def find(self, vertices, edges, start, end) -> SearchResult:
        return astar(vertices, edges, start, end, self.heuristic)


# ------------------- Finder registry ---------------------------


def register_finder(kind: str, *, defaults: Callable[[], SearchUnion]):
    """Register a finder factory plus the config it runs with when only named."""

    def deco(fn: FinderFactory):
        _finder_registry[kind] = fn
        _default_registry[kind] = defaults
        return fn

    return deco


def make_finder(cfg: SearchUnion) -> PathFinder:
    try:
        factory = _finder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}") from None
    return factory(cfg)


def known_algorithms() -> list[str]:
    return sorted(_finder_registry)


@register_finder("dijkstra", defaults=DijkstraModel)
def _make_dijkstra(cfg: DijkstraModel):
    return DijkstraFinder()


@register_finder("astar", defaults=AStarModel)
def _make_astar(cfg: AStarModel):
    return AStarFinder(heuristic=_heuristics[cfg.heuristic])


def find_path(
    algorithm: str,
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
    start: Vertex,
    end: Vertex,
) -> SearchResult:
    """Run a registered strategy by name with its default settings."""
    try:
        factory, defaults = _finder_registry[algorithm], _default_registry[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm {algorithm!r}; expected one of {known_algorithms()}"
        ) from None
    return factory(defaults()).find(vertices, edges, start, end)
