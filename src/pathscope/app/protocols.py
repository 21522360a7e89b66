from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pathscope.domain.entities.graph import Edge, SearchResult, Vertex


@runtime_checkable
class PathFinder(Protocol):
    """
    Responsibilities:
      • Find a cheapest path from start to end over a flat edge list.
      • Report the ordered edges it examined, for playback.
    Never mutates the vertices or edges it is given.
    """

    name: str

    def find(
        self, vertices: Sequence[Vertex], edges: Sequence[Edge], start: Vertex, end: Vertex
    ) -> SearchResult: ...


@runtime_checkable
class Sink(Protocol):
    def write(self, frame) -> None: ...
