from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    capacity: int = Field(default=100, ge=1, le=1000)
    max_weight: int = Field(default=65_535, ge=1)  # u16 ceiling of the editor's line length


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    tie_break: Literal["lowest_id", "keep_first"] = "lowest_id"


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- SAMPLES ---------------------


class SampleEmptyModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["empty"] = "empty"


class SampleBuiltinModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["builtin"] = "builtin"
    name: Literal["small", "medium", "large"]


class SampleRandomModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["random"] = "random"
    points: int = Field(ge=0)
    seed: int = 0
    radius: float = 13.0

    @field_validator("radius")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("radius must be > 0")
        return v


SampleUnion = Annotated[
    SampleEmptyModel | SampleBuiltinModel | SampleRandomModel,
    Field(discriminator="kind"),
]

# ------------------------------------------------------------------


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "graph-vis"
    run_id: str = "local"
    graph: GraphModel = GraphModel()
    search: SearchModel = SearchModel()
    log: LogModel = LogModel()
    sample: SampleUnion = Field(default_factory=SampleEmptyModel)

    @model_validator(mode="after")
    def _sample_fits(self):
        # built-in samples address ids up to 18
        if self.sample.kind == "builtin" and self.graph.capacity < 19:
            raise ValueError(
                f"sample {self.sample.name!r} needs capacity >= 19, got {self.graph.capacity}"
            )
        return self
