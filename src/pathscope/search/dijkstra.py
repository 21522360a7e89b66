# search/dijkstra.py
from collections.abc import Sequence

from pathscope.domain.entities.graph import Edge, SearchResult, Vertex
from pathscope.search.common import degenerate, init_state, outgoing, result


def dijkstra(
    vertices: Sequence[Vertex], edges: Sequence[Edge], start: Vertex, end: Vertex
) -> SearchResult:
    """
    Uniform-cost search. Every vertex starts in the frontier; each round takes
    the one with the smallest distance (earliest in vertex order on ties).

    ``visited`` gets one entry per finalized vertex, drawn from its predecessor
    (from itself for start and for unreached vertices) with weight 0.
    """
    early = degenerate(vertices, start, end)
    if early is not None:
        return early

    dist, prev = init_state(vertices, start)
    out = outgoing(vertices, edges)
    frontier = list(vertices)
    visited: list[Edge] = []

    while frontier:
        current = min(frontier, key=dist.__getitem__)
        frontier.remove(current)
        via = prev[current]
        visited.append(Edge(via if via is not None else current, current, 0.0))
        if current == end:
            break

        for e in out[current]:
            alt = dist[current] + e.weight
            if alt < dist[e.dst]:
                dist[e.dst] = alt
                prev[e.dst] = current

    return result(prev, dist, visited, start, end)
