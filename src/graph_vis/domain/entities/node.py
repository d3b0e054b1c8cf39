# domain/entities/node.py
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Node:
    id: int
    payload: Any  # caller-owned (usually a Point); never interpreted by the core
    out: dict[int, int] = field(default_factory=dict)  # destination -> weight, insertion ordered
    inc: set[int] = field(default_factory=set)  # ids with an edge into this node


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    weight: int
