"""
Shared graph fixtures.

Edges are written out by hand so traces and tie-breaks can be asserted exactly.
"""

import pytest

from pathscope.domain.entities.graph import Edge, Graph, Vertex


def link(a: Vertex, b: Vertex, w: float) -> list[Edge]:
    return [Edge(a, b, w), Edge(b, a, w)]


@pytest.fixture
def square() -> Graph:
    """4-cycle (0,0)-(10,0)-(10,10)-(0,10), weight 10 per side, no diagonal."""
    v0, v1, v2, v3 = Vertex(0, 0, 0), Vertex(1, 10, 0), Vertex(2, 10, 10), Vertex(3, 0, 10)
    edges = link(v0, v1, 10.0) + link(v1, v2, 10.0) + link(v2, v3, 10.0) + link(v3, v0, 10.0)
    return Graph([v0, v1, v2, v3], edges)


@pytest.fixture
def two_islands() -> Graph:
    a, b = Vertex(0, 0, 0), Vertex(1, 5, 0)
    c, d = Vertex(2, 100, 100), Vertex(3, 105, 100)
    return Graph([a, b, c, d], link(a, b, 5.0) + link(c, d, 5.0))
