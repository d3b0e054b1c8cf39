# graph_vis/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from graph_vis.config.models import AppModel
from graph_vis.domain.graph import Graph
from graph_vis.domain.samples import load_sample, random_points
from graph_vis.engine.dijkstra import DijkstraEngine
from graph_vis.engine.hooks import GraphHooks, NoopHooks
from graph_vis.io.recorder import JsonlSink, Recorder
from graph_vis.io.search_logging import SearchLogging


@dataclass
class App:
    model: AppModel
    graph: Graph
    engine: DijkstraEngine
    hooks: GraphHooks
    recorder: Recorder | None


def build(
    cfg: AppModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = AppModel()
    else:
        model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) Hooks (JSON logs + analytics recorder)
    if use_logging:
        recorder = recorder or Recorder(JsonlSink())
        hooks = SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            recorder=recorder,
        )
    else:
        hooks = NoopHooks()

    # 2) Engine & graph
    engine = DijkstraEngine(hooks=hooks, tie_break=model.search.tie_break)
    graph = Graph(
        model.graph.capacity,
        max_weight=model.graph.max_weight,
        engine=engine,
        hooks=hooks,
    )

    # 3) Optional demo content
    sample = model.sample
    if sample.kind == "builtin":
        load_sample(graph, sample.name)
    elif sample.kind == "random":
        random_points(graph, sample.points, np.random.default_rng(sample.seed), radius=sample.radius)

    return App(model, graph, engine, hooks, recorder if use_logging else None)
