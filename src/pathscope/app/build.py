# pathscope/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass, field

from pathscope.app.protocols import PathFinder
from pathscope.config.models import ScenarioModel
from pathscope.domain.entities.graph import Graph, SearchResult, Vertex
from pathscope.graph.builder import build_graph, center_of
from pathscope.io.graph_logging import GraphLogging
from pathscope.runtime.registries import make_finder
from pathscope.sim.hooks import GraphHooks, NoopHooks
from pathscope.sim.rng import RNGRegistry


@dataclass
class Workbench:
    """
    One graph at a time plus the queries run against it.

    Regenerating replaces the graph wholesale and forgets the last query, so a
    result computed on an old graph is never handed out for the new one.
    """

    model: ScenarioModel
    rng: RNGRegistry
    hooks: GraphHooks
    finder: PathFinder
    graph: Graph = field(default_factory=Graph)
    generation: int = 0
    last: SearchResult | None = None

    def regenerate(self, **changes) -> Graph:
        """
        Rebuild after a configuration change. Accepted keys: width, height,
        count, density, max_degree.
        """
        if changes:
            self.model = _apply(self.model, changes)
        m = self.model
        self.generation += 1
        self.last = None
        self.graph = build_graph(
            m.plane.width,
            m.plane.height,
            m.placement.count,
            m.connection.density,
            m.connection.max_degree,
            min_separation=m.placement.min_separation,
            margin=m.placement.margin,
            anchor=center_of(m.plane.width, m.plane.height) if m.placement.anchor_center else None,
            rng=self.rng.fresh("placement", self.generation),
            hooks=self.hooks,
        )
        return self.graph

    def use(self, algorithm: str) -> PathFinder:
        self.model = ScenarioModel.model_validate({**self.model.model_dump(), "search": algorithm})
        self.finder = make_finder(self.model.search)
        return self.finder

    def find(self, start: Vertex, end: Vertex) -> SearchResult:
        g = self.graph
        res = self.finder.find(g.vertices, g.edges, start, end)
        self.hooks.search_done(
            algorithm=self.finder.name,
            found=res.found(start),
            path_len=len(res.path),
            visited=len(res.visited),
            cost=res.cost,
        )
        self.last = res
        return res

    def pick(self, x: float, y: float) -> Vertex | None:
        return self.graph.nearest_vertex(x, y)


_CHANGE_PATHS = {
    "width": ("plane", "width"),
    "height": ("plane", "height"),
    "count": ("placement", "count"),
    "density": ("connection", "density"),
    "max_degree": ("connection", "max_degree"),
}


def _apply(model: ScenarioModel, changes: Mapping) -> ScenarioModel:
    data = model.model_dump()
    for key, value in changes.items():
        try:
            section, name = _CHANGE_PATHS[key]
        except KeyError:
            raise ValueError(f"Unknown setting {key!r}") from None
        data[section][name] = value
    return ScenarioModel.model_validate(data)


def build(cfg: ScenarioModel | Mapping | None = None, *, use_logging: bool = True) -> Workbench:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG & hooks
    rng_registry = RNGRegistry(model.seed, scenario=model.name)
    hooks = (
        GraphLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Strategy, then the first graph
    bench = Workbench(model=model, rng=rng_registry, hooks=hooks, finder=make_finder(model.search))
    bench.regenerate()
    return bench
