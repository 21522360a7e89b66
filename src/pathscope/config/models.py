from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Algorithm = Literal["dijkstra", "astar"]


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class PlaneModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: float = Field(800.0, gt=0)  # viewport units
    height: float = Field(600.0, gt=0)


class PlacementModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    count: int = Field(30, ge=0, le=100)
    min_separation: float = Field(50.0, gt=0)
    margin: float = Field(0.0, ge=0)
    anchor_center: bool = False  # landing-page layout seeds a vertex at the centre


class ConnectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    density: float = 0.5  # viewer offers 0.3 / 0.5 / 0.7
    max_degree: int = Field(4, ge=1)

    @field_validator("density")
    @classmethod
    def _in_unit_interval(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError("density must be in (0, 1]")
        return v


# ----------------- SEARCH STRATEGIES ---------------------


class DijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class AStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    heuristic: Literal["euclidean", "zero"] = "euclidean"


SearchUnion = Annotated[DijkstraModel | AStarModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    seed: int = 0
    plane: PlaneModel = PlaneModel()
    placement: PlacementModel = PlacementModel()
    connection: ConnectionModel = ConnectionModel()
    search: SearchUnion = Field(default_factory=DijkstraModel)
    log: LogModel = LogModel()

    @field_validator("search", mode="before")
    @classmethod
    def _bare_kind(cls, v):
        # "astar" is shorthand for {"kind": "astar"}
        if isinstance(v, str):
            return {"kind": v}
        return v

    @model_validator(mode="after")
    def _margin_fits(self):
        short = min(self.plane.width, self.plane.height)
        if 2 * self.placement.margin >= short:
            raise ValueError(f"margin {self.placement.margin} leaves no room in a {short} wide plane")
        return self
