# io/recorder.py
import json
import logging
import sys
from collections import Counter
from dataclasses import asdict
from typing import Protocol, TypeVar

import numpy as np

from graph_vis.io.search_events import SearchEvent

log = logging.getLogger("graph_vis.recorder")

E = TypeVar("E", bound=SearchEvent)


class Sink(Protocol):
    def write(self, ev: SearchEvent) -> None: ...


def _plain(value):
    # search results may still carry numpy scalars from the state arrays
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.ndarray):
        return value.tolist()
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


class JsonlSink:
    """One JSON object per line, flushed per query so a tail -f sees it immediately."""

    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev: SearchEvent) -> None:
        self.fp.write(json.dumps(asdict(ev), default=_plain) + "\n")
        self.fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list[SearchEvent] = []

    def write(self, ev: SearchEvent) -> None:
        self.events.append(ev)

    def of_type(self, cls: type[E]) -> list[E]:
        return [ev for ev in self.events if isinstance(ev, cls)]


class Recorder:
    """Fans search outcomes out to every sink. A failing sink is skipped and counted."""

    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)
        self.emitted = 0
        self.dropped: Counter[str] = Counter()

    def emit(self, ev: SearchEvent) -> None:
        self.emitted += 1
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                self.dropped[type(s).__name__] += 1
                log.warning(
                    "sink %s dropped %s #%d", type(s).__name__, ev.name, ev.seq, exc_info=True
                )
