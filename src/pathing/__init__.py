"""
Pathfinding engine.

Provides:
- SquareGrid: bounded grid with walls and forest cost
- AdjacencyGraph: explicit edge-list graph
- PriorityQueue: stable min-priority frontier
- breadth_first_search: reachability traversal with a visit callback
- a_star_search / find_path: weighted shortest paths
- reconstruct_path: came_from -> ordered route
- encode_maze / overlay_path / grid_from_maze: cell-code matrices
"""

from __future__ import annotations

from .astar import a_star_search, find_path, manhattan, validate_endpoints
from .bfs import breadth_first_search
from .errors import (
    EmptyQueueError,
    InvalidEndpointError,
    PathingError,
    PathReconstructionError,
)
from .graphs import AdjacencyGraph
from .grid import DEFAULT_COST, DIRS, FOREST_COST, SquareGrid
from .maze import encode_maze, grid_from_maze, overlay_path
from .queue import PriorityQueue
from .reconstruct import reconstruct_path

__all__ = [
    "SquareGrid",
    "DIRS",
    "FOREST_COST",
    "DEFAULT_COST",
    "AdjacencyGraph",
    "PriorityQueue",
    "breadth_first_search",
    "a_star_search",
    "find_path",
    "manhattan",
    "validate_endpoints",
    "reconstruct_path",
    "encode_maze",
    "overlay_path",
    "grid_from_maze",
    "PathingError",
    "InvalidEndpointError",
    "PathReconstructionError",
    "EmptyQueueError",
]
