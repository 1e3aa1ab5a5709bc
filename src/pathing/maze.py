# cell-code matrix encoding of a grid and route
# src/pathing/maze.py
"""
Maze matrix encoding.

The matrix is the hand-off format for renderers: rows indexed [y][x],
each cell an int CellCode (0 open, 1 wall, 2 forest, 3 path). The search
engines never read it.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from interfaces.types import CellCode, Location

from .grid import SquareGrid

MazeMatrix = List[List[int]]


def _mark_path(maze: MazeMatrix, path: Iterable[Location]) -> None:
    # negative indices would silently wrap to the far edge
    for loc in path:
        if not (0 <= loc.y < len(maze) and 0 <= loc.x < len(maze[loc.y])):
            raise ValueError(f"Path cell {loc} lies outside the maze")
        maze[loc.y][loc.x] = int(CellCode.PATH)


def encode_maze(grid: SquareGrid, path: Optional[Iterable[Location]] = None) -> MazeMatrix:
    """
    Classify every cell, then overlay `path` (if given) with PATH.

    Walls win over forest when a cell is in both sets. The path overlay is
    applied last and wins over everything; whether the path crosses a wall
    is the caller's business, not checked here. A path cell outside the
    grid raises ValueError.
    """
    maze: MazeMatrix = []
    for y in range(grid.height):
        row: List[int] = []
        for x in range(grid.width):
            loc = Location(x, y)
            if grid.is_wall(loc):
                row.append(int(CellCode.WALL))
            elif grid.is_forest(loc):
                row.append(int(CellCode.FOREST))
            else:
                row.append(int(CellCode.OPEN))
        maze.append(row)

    if path is not None:
        _mark_path(maze, path)

    return maze


def overlay_path(maze: Sequence[Sequence[int]], path: Iterable[Location]) -> MazeMatrix:
    """Return a copy of `maze` with every path cell set to PATH."""
    out: MazeMatrix = [list(row) for row in maze]
    _mark_path(out, path)
    return out


def grid_from_maze(maze: Sequence[Sequence[int]]) -> SquareGrid:
    """
    Build a SquareGrid from a cell-code matrix.

    WALL cells become walls, FOREST cells become forest, OPEN and PATH
    cells are plain ground.
    """
    height = len(maze)
    if height == 0:
        raise ValueError("Maze matrix must have at least one row")
    width = len(maze[0])
    if width == 0:
        raise ValueError("Maze matrix rows must not be empty")

    grid = SquareGrid(width=width, height=height)
    for y, row in enumerate(maze):
        if len(row) != width:
            raise ValueError(f"Maze row {y} has {len(row)} cells, expected {width}")
        for x, raw in enumerate(row):
            try:
                code = CellCode(int(raw))
            except (TypeError, ValueError):
                raise ValueError(f"Unknown cell code {raw!r} at ({x}, {y})") from None
            if code == CellCode.WALL:
                grid.walls.add(Location(x, y))  # type: ignore[attr-defined]
            elif code == CellCode.FOREST:
                grid.forests.add(Location(x, y))  # type: ignore[attr-defined]
    return grid
