# io/search_logging.py
import json
import logging
import sys

from graph_vis.engine.hooks import NoopHooks
from graph_vis.io.recorder import Recorder
from graph_vis.io.search_events import PathFound, PathNotFound


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def default_json_logger(name="graph_vis", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for graph edits and path queries.

    INFO: one record per query (start, end, rejection). DEBUG (debug=True only):
    every mutation, invalidation and node visit. Query outcomes are also handed to
    the recorder as PathFound / PathNotFound events when one is attached.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or default_json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # ------------- graph edits --------------------------

    def mutation(self, op: str, **kw):
        if self.debug:
            self._emit("DEBUG", op, **kw)

    def invalidated(self, *, reason: str):
        if self.debug:
            self._emit("DEBUG", "path_invalidated", reason=reason)

    # ------------- queries --------------------------

    def search_start(self, *, start, end, nodes):
        self._seq += 1
        self._emit("INFO", "search_start", seq=self._seq, start=start, end=end, nodes=nodes)

    def search_visit(self, *, node, distance, frontier):
        if self.debug:
            self._emit(
                "DEBUG",
                "visit",
                seq=self._seq,
                node=node,
                distance=distance,
                frontier=int(frontier.sum()),
            )

    def search_end(self, *, start, end, found, path, distance, visited, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            seq=self._seq,
            found=found,
            path=list(path) if path else None,
            distance=distance,
            visited=visited,
            wall_ms=round(wall_ms, 3),
        )
        if found:
            self._record(
                PathFound(
                    run_id=self.run_id,
                    seq=self._seq,
                    name="PathFound",
                    start=start,
                    end=end,
                    path=list(path),
                    distance=distance,
                    visited=visited,
                    wall_ms=wall_ms,
                )
            )
        else:
            self._record(
                PathNotFound(
                    run_id=self.run_id,
                    seq=self._seq,
                    name="PathNotFound",
                    start=start,
                    end=end,
                    reason="disconnected",
                    visited=visited,
                )
            )

    def search_rejected(self, *, reason: str, start, end):
        self._seq += 1
        self._emit("INFO", "search_rejected", seq=self._seq, reason=reason, start=start, end=end)
        self._record(
            PathNotFound(
                run_id=self.run_id,
                seq=self._seq,
                name="PathNotFound",
                start=start,
                end=end,
                reason=reason,
            )
        )
