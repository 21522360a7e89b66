# pathscope/graph/builder.py
import numpy as np

from pathscope.domain.entities.graph import Edge, Graph, Point, Vertex, euclidean
from pathscope.sim.hooks import GraphHooks, NoopHooks

# Defaults used by the viewer
MIN_SEPARATION = 50.0
MAX_DEGREE = 4
DENSITY = 0.5
ATTEMPTS_PER_VERTEX = 3


def _inside(x: float, y: float, width: float, height: float, margin: float) -> bool:
    return margin <= x <= width - margin and margin <= y <= height - margin


def generate_vertices(
    width: float,
    height: float,
    count: int,
    min_separation: float = MIN_SEPARATION,
    *,
    margin: float = 0.0,
    anchor: Point | None = None,
    rng: np.random.Generator | None = None,
    hooks: GraphHooks | None = None,
) -> list[Vertex]:
    """
    Rejection-sample up to ``count`` vertices uniformly in [0, width) x [0, height).

    A draw is kept only when it is at least ``min_separation`` from every kept
    vertex and, with ``margin`` > 0, inside the margin-shrunk rectangle. At most
    ``3 * count`` draws are made, so a crowded plane yields fewer vertices than
    requested; that is reported through ``hooks`` and is not an error.

    ``anchor`` is placed first without a draw and counts toward ``count``.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"plane must be positive, got {width}x{height}")
    if min_separation <= 0:
        raise ValueError("min_separation must be > 0")
    if count < 0:
        raise ValueError("count must be >= 0")
    if margin < 0:
        raise ValueError("margin must be >= 0")

    rng = rng if rng is not None else np.random.default_rng()
    hooks = hooks or NoopHooks()

    verts: list[Vertex] = []
    if anchor is not None and count > 0:
        verts.append(Vertex(0, float(anchor.x), float(anchor.y)))

    attempts, max_attempts = 0, ATTEMPTS_PER_VERTEX * count
    while len(verts) < count and attempts < max_attempts:
        attempts += 1
        x, y = float(rng.uniform(0, width)), float(rng.uniform(0, height))
        if margin and not _inside(x, y, width, height, margin):
            continue
        p = Point(x, y)
        if all(euclidean(v, p) >= min_separation for v in verts):
            verts.append(Vertex(len(verts), x, y))

    hooks.vertices_placed(requested=count, placed=len(verts), attempts=attempts)
    return verts


def connect_vertices(
    vertices: list[Vertex],
    width: float,
    height: float,
    density: float = DENSITY,
    max_degree: int = MAX_DEGREE,
) -> list[Edge]:
    """
    Link each vertex to the first ``max_degree`` vertices (in list order) closer
    than ``min(width, height) * density``. Every link is stored as two arcs.

    The cap only counts links made while scanning from a vertex; links made by
    other vertices towards it are not counted, so a vertex can end up with more
    than ``max_degree`` arcs. Mutual picks produce the arc pair twice.
    """
    if not 0 < density <= 1:
        raise ValueError(f"density must be in (0, 1], got {density}")
    if max_degree < 0:
        raise ValueError("max_degree must be >= 0")

    radius = min(width, height) * density
    edges: list[Edge] = []
    for i, a in enumerate(vertices):
        made = 0
        for j, b in enumerate(vertices):
            if made >= max_degree:
                break
            if i == j:
                continue
            d = euclidean(a, b)
            if d < radius:
                edges.append(Edge(a, b, d))
                edges.append(Edge(b, a, d))
                made += 1
    return edges


def build_graph(
    width: float,
    height: float,
    vertex_count: int,
    density: float = DENSITY,
    max_degree: int = MAX_DEGREE,
    *,
    min_separation: float = MIN_SEPARATION,
    margin: float = 0.0,
    anchor: Point | None = None,
    rng: np.random.Generator | None = None,
    hooks: GraphHooks | None = None,
) -> Graph:
    hooks = hooks or NoopHooks()
    vertices = generate_vertices(
        width,
        height,
        vertex_count,
        min_separation,
        margin=margin,
        anchor=anchor,
        rng=rng,
        hooks=hooks,
    )
    edges = connect_vertices(vertices, width, height, density, max_degree)
    hooks.graph_built(
        vertices=len(vertices),
        edges=len(edges),
        radius=min(width, height) * density,
        max_degree=max_degree,
    )
    return Graph(vertices, edges)


def center_of(width: float, height: float) -> Point:
    return Point(width / 2, height / 2)
