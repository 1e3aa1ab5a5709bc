# src/pathing/diagram.py
"""
Plain-text diagrams for debugging searches.

terrain_diagram() prints the top row (y = height - 1) first.
came_from_diagram() prints y = 0 first, matching the maze matrix.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from interfaces.types import Location

from .grid import SquareGrid


def terrain_diagram(grid: SquareGrid, path: Optional[Iterable[Location]] = None) -> str:
    """# wall, F forest, . open, @ path."""
    on_path = set(path or ())
    lines: List[str] = []
    for y in range(grid.height - 1, -1, -1):
        line = ""
        for x in range(grid.width):
            loc = Location(x, y)
            if loc in on_path:
                line += "@"
            elif grid.is_wall(loc):
                line += "#"
            elif grid.is_forest(loc):
                line += "F"
            else:
                line += "."
        lines.append(line)
    return "\n".join(lines)


def came_from_diagram(grid: SquareGrid, came_from: Dict[Location, Location]) -> str:
    """Arrow per cell pointing at its predecessor; '* ' where there is none."""
    lines: List[str] = []
    for y in range(grid.height):
        line = ""
        for x in range(grid.width):
            loc = Location(x, y)
            ptr = came_from.get(loc, loc)
            if grid.is_wall(loc):
                line += "##"
            elif ptr.x == x + 1:
                line += "→ "
            elif ptr.x == x - 1:
                line += "← "
            elif ptr.y == y + 1:
                line += "↓ "
            elif ptr.y == y - 1:
                line += "↑ "
            else:
                line += "* "
        lines.append(line)
    return "\n".join(lines)
