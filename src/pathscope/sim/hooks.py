# sim/hooks.py
from typing import Protocol


class GraphHooks(Protocol):
    def vertices_placed(self, *, requested, placed, attempts): ...
    def graph_built(self, *, vertices, edges, radius, max_degree): ...
    def search_done(self, *, algorithm, found, path_len, visited, cost): ...


class NoopHooks:
    def vertices_placed(self, **_):
        pass

    def graph_built(self, **_):
        pass

    def search_done(self, **_):
        pass
