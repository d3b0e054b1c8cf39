# main.py
import logging
import sys

from graph_vis.app.build import build

log = logging.getLogger("graph_vis")


def run(sample: str = "small", start: int = 2, end: int = 0):
    app = build({"run_id": "demo", "sample": {"kind": "builtin", "name": sample}})
    g = app.graph
    log.debug("graph", extra={"extra": g.describe()})

    g.set_start(start)
    g.set_end(end)
    if g.find_shortest_path():
        print(f"Shortest path {start} -> {end}: {g.get_path()} (total weight {g.path_distance})")
    else:
        print(f"No path {start} -> {end}")
    return g.get_path()


if __name__ == "__main__":
    args = sys.argv[1:]
    run(args[0] if args else "small", *(int(a) for a in args[1:3]))
