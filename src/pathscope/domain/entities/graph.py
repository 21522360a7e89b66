import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


# Core graph types shared by the builder and the search strategies
@dataclass(frozen=True)
class Point:
    x: float  # plane units (pixels in the viewer)
    y: float


@dataclass(frozen=True)
class Vertex:
    """Graph node. Identity is the id; coordinates never take part in equality."""

    id: int
    x: float = field(compare=False)
    y: float = field(compare=False)


@dataclass(frozen=True)
class Edge:
    src: Vertex
    dst: Vertex
    weight: float  # >= 0, euclidean length for built graphs


def euclidean(a, b) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


class Graph:
    """Vertex list plus the authoritative flat edge list.

    Vertex-local views (adjacency, neighbors) are derived from the edge list on
    demand and never stored separately.
    """

    def __init__(self, vertices: Sequence[Vertex] = (), edges: Iterable[Edge] = ()):
        self.vertices: list[Vertex] = list(vertices)
        self.edges: list[Edge] = list(edges)
        self._ids = {v.id for v in self.vertices}

    def __contains__(self, v) -> bool:
        return isinstance(v, Vertex) and v.id in self._ids

    def __len__(self) -> int:
        return len(self.vertices)

    def adjacency(self, v: Vertex) -> dict[Vertex, float]:
        return {e.dst: e.weight for e in self.edges if e.src == v}

    def neighbors(self, v: Vertex) -> list[Vertex]:
        return list(self.adjacency(v))

    def degree(self, v: Vertex) -> int:
        return sum(1 for e in self.edges if e.src == v)

    def nearest_vertex(self, x: float, y: float) -> Vertex | None:
        if not self.vertices:
            return None
        p = Point(x, y)
        return min(self.vertices, key=lambda v: euclidean(v, p))


@dataclass
class SearchResult:
    path: list[Vertex]
    visited: list[Edge]
    cost: float = math.inf  # distance to end, inf when unreachable

    def found(self, start: Vertex) -> bool:
        # an unreachable end leaves a path that does not begin with start
        return bool(self.path) and self.path[0] == start

    def path_edges(self) -> list[tuple[Vertex, Vertex]]:
        return list(zip(self.path, self.path[1:]))


def path_cost(path: Sequence[Vertex], edges: Iterable[Edge]) -> float:
    """Sum of the cheapest arc weight between consecutive path vertices."""
    best: dict[tuple[Vertex, Vertex], float] = {}
    for e in edges:
        k = (e.src, e.dst)
        if e.weight < best.get(k, math.inf):
            best[k] = e.weight
    return sum(best.get((a, b), math.inf) for a, b in zip(path, path[1:]))
