# square grid with walls and forest terrain
# src/pathing/grid.py
"""
SquareGrid: bounded 2D lattice implementing WeightedGraph[Location].

This module only knows about:
- bounds (width x height)
- walls (impassable cells)
- forests (cells that cost more to enter)

It has no notion of how cells are drawn; see pathing.maze for the
cell-code matrix handed to renderers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterator, Tuple

from interfaces.types import Location

# Fixed neighbor order: +x, -y, -x, +y. Search tie-breaking depends on it.
DIRS: Tuple[Location, ...] = (
    Location(1, 0),
    Location(0, -1),
    Location(-1, 0),
    Location(0, 1),
)

FOREST_COST = 5.0
DEFAULT_COST = 1.0

WALL = "wall"
FOREST = "forest"


@dataclass
class SquareGrid:
    """
    Grid model used by the A* and BFS engines.

    Responsibilities:
    - Answer bounds and passability queries.
    - Report the cost of entering a cell.
    - Enumerate 4-directional neighbors (no diagonals).

    Walls and forests are plain sets so callers can build a grid up cell
    by cell; call freeze() before handing it to a search.
    """

    width: int
    height: int
    walls: AbstractSet[Location] = field(default_factory=set)
    forests: AbstractSet[Location] = field(default_factory=set)

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, loc: Location) -> bool:
        return 0 <= loc.x < self.width and 0 <= loc.y < self.height

    def passable(self, loc: Location) -> bool:
        """True if `loc` is not a wall. Bounds are NOT checked here."""
        return loc not in self.walls

    def cost(self, a: Location, b: Location) -> float:
        """
        Cost of stepping from `a` into `b`.

        Only the destination matters today; `a` is part of the signature
        so a source-dependent cost function can be dropped in later.
        """
        return FOREST_COST if b in self.forests else DEFAULT_COST

    def neighbors(self, loc: Location) -> Iterator[Location]:
        """
        Yield in-bounds, passable neighbors of `loc` in DIRS order.

        The origin itself is not bounds-checked; callers validate start
        and goal before searching.
        """
        for d in DIRS:
            nxt = Location(loc.x + d.x, loc.y + d.y)
            if self.in_bounds(nxt) and self.passable(nxt):
                yield nxt

    def is_wall(self, loc: Location) -> bool:
        return loc in self.walls

    def is_forest(self, loc: Location) -> bool:
        return loc in self.forests

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def add_rect(self, kind: str, x0: int, y0: int, x1: int, y1: int) -> None:
        """Mark the inclusive rectangle (x0, y0)-(x1, y1) as walls or forest."""
        if kind == WALL:
            target = self.walls
        elif kind == FOREST:
            target = self.forests
        else:
            raise ValueError(f"Unknown cell kind: {kind!r}")

        if isinstance(target, frozenset):
            raise ValueError("Cannot modify a frozen grid")

        for x in range(min(x0, x1), max(x0, x1) + 1):
            for y in range(min(y0, y1), max(y0, y1) + 1):
                target.add(Location(x, y))  # type: ignore[attr-defined]

    def freeze(self) -> "SquareGrid":
        """Return a copy whose wall and forest sets cannot be mutated."""
        return SquareGrid(
            width=self.width,
            height=self.height,
            walls=frozenset(self.walls),
            forests=frozenset(self.forests),
        )

    def cells(self) -> Iterator[Location]:
        """All cells in row-major order (y outer, x inner)."""
        for y in range(self.height):
            for x in range(self.width):
                yield Location(x, y)
