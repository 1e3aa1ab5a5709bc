# src/interfaces/__init__.py

from __future__ import annotations

"""
Shared contracts for the pathfinding engine.

Re-exports the graph capability protocols and the plain data types that
flow between the engines, the maze encoder and the runtime.
"""

from .graph import Graph, Node, WeightedGraph
from .types import (
    CameFrom,
    CellCode,
    CostSoFar,
    Location,
    Path,
    PathfindingResult,
    SearchResult,
)

__all__ = [
    # Graph capabilities
    "Graph",
    "WeightedGraph",
    "Node",
    # Data types
    "Location",
    "CellCode",
    "Path",
    "CameFrom",
    "CostSoFar",
    "SearchResult",
    "PathfindingResult",
]
