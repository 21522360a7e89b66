# search/astar.py
import math
from collections.abc import Callable, Sequence

from pathscope.domain.entities.graph import Edge, SearchResult, Vertex, euclidean
from pathscope.search.common import degenerate, init_state, outgoing, result
from pathscope.search.frontier import PriorityQueue

Heuristic = Callable[[Vertex, Vertex], float]


def astar(
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
    start: Vertex,
    end: Vertex,
    heuristic: Heuristic = euclidean,
) -> SearchResult:
    """
    A* keyed by dist + heuristic(v, end). The heuristic must not overestimate;
    euclidean is safe on graphs whose weights are euclidean lengths.

    Unlike dijkstra, ``visited`` records each edge when it relaxes a distance.
    """
    early = degenerate(vertices, start, end)
    if early is not None:
        return early

    dist, prev = init_state(vertices, start)
    out = outgoing(vertices, edges)
    visited: list[Edge] = []

    frontier: PriorityQueue[Vertex] = PriorityQueue()
    for v in vertices:
        frontier.enqueue(v, heuristic(v, end) if v == start else math.inf)

    while not frontier.is_empty():
        priority, current = frontier.pop()
        # superseded by a later, better enqueue of the same vertex
        if priority > dist[current] + heuristic(current, end):
            continue
        if current == end:
            break

        for e in out[current]:
            alt = dist[current] + e.weight
            if alt < dist[e.dst]:
                dist[e.dst] = alt
                prev[e.dst] = current
                frontier.enqueue(e.dst, alt + heuristic(e.dst, end))
                visited.append(e)

    return result(prev, dist, visited, start, end)
