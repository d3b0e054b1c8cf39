# engine/hooks.py
from typing import Protocol


class GraphHooks(Protocol):
    def mutation(self, op: str, **kw): ...
    def invalidated(self, *, reason: str): ...
    def search_start(self, *, start, end, nodes): ...
    # frontier is the live bool mask over node slots; copy it to keep it
    def search_visit(self, *, node, distance, frontier): ...
    def search_end(self, *, start, end, found, path, distance, visited, wall_ms): ...
    def search_rejected(self, *, reason: str, start, end): ...


class NoopHooks:
    def mutation(self, *_, **__):
        pass

    def invalidated(self, **_):
        pass

    def search_start(self, **_):
        pass

    def search_visit(self, **_):
        pass

    def search_end(self, **_):
        pass

    def search_rejected(self, **_):
        pass
