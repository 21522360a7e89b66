# search/common.py
import math
from collections.abc import Sequence

from pathscope.domain.entities.graph import Edge, SearchResult, Vertex


def outgoing(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> dict[Vertex, list[Edge]]:
    out: dict[Vertex, list[Edge]] = {v: [] for v in vertices}
    for e in edges:
        if e.src in out:
            out[e.src].append(e)
    return out


def init_state(vertices: Sequence[Vertex], start: Vertex):
    dist = {v: math.inf for v in vertices}
    prev: dict[Vertex, Vertex | None] = {v: None for v in vertices}
    dist[start] = 0.0
    return dist, prev


def reconstruct(prev: dict[Vertex, Vertex | None], start: Vertex, end: Vertex) -> list[Vertex]:
    """Walk predecessors back from end. Stops at a missing link, leaving start off the path."""
    path: list[Vertex] = []
    cur: Vertex | None = end
    while cur is not None and cur != start:
        path.append(cur)
        cur = prev.get(cur)
    if cur == start:
        path.append(start)
    path.reverse()
    return path


def degenerate(vertices: Sequence[Vertex], start: Vertex, end: Vertex) -> SearchResult | None:
    members = set(vertices)
    if start not in members or end not in members:
        return SearchResult(path=[], visited=[])
    return None


def result(prev, dist, visited, start, end) -> SearchResult:
    path = reconstruct(prev, start, end)
    cost = dist[end] if path and path[0] == start else math.inf
    return SearchResult(path=path, visited=visited, cost=cost)
