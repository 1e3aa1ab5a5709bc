# core shared types: Location, CellCode, search and pathfinding results
# src/interfaces/types.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Generic, List, Optional, TypeVar

from .graph import Node


# ---------------------------------------------------------------------------
# Grid coordinates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Location:
    """
    Integer grid coordinate.

    Frozen so that two Locations with the same (x, y) compare equal and
    hash the same; search results are keyed by Location.
    """

    x: int
    y: int

    def __iter__(self):
        # allows `x, y = loc`
        yield self.x
        yield self.y

    def to_list(self) -> List[int]:
        return [self.x, self.y]


class CellCode(IntEnum):
    """Cell classification used by the encoded maze matrix."""

    OPEN = 0
    WALL = 1
    FOREST = 2
    PATH = 3


# Ordered start -> goal sequence, both inclusive.
Path = List[Location]

T = TypeVar("T")

CameFrom = Dict[Node, Node]
CostSoFar = Dict[Node, float]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class SearchResult(Generic[T]):
    """
    Output of a single weighted search invocation.

    came_from:
        Predecessor pointers. The start maps to itself; every other
        reached node maps to the node it was relaxed from.
    cost_so_far:
        Cheapest known cumulative cost from the start.

    Each search allocates a fresh SearchResult; it is never shared
    between invocations.
    """

    came_from: Dict[T, T] = field(default_factory=dict)
    cost_so_far: Dict[T, float] = field(default_factory=dict)

    def reached(self, node: T) -> bool:
        return node in self.came_from

    def cost_to(self, node: T) -> Optional[float]:
        return self.cost_so_far.get(node)


@dataclass
class PathfindingResult:
    """Structured result for a validated pathfinding request."""

    path: Path
    success: bool
    cost: Optional[float] = None
    reason: str | None = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "path": [loc.to_list() for loc in self.path],
            "success": self.success,
            "cost": self.cost,
            "reason": self.reason,
        }
