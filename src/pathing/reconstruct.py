# src/pathing/reconstruct.py
"""Turn a came_from map into an ordered start -> goal route."""

from __future__ import annotations

from typing import Dict, List

from interfaces.graph import Node

from .errors import PathReconstructionError


def reconstruct_path(
    start: Node,
    goal: Node,
    came_from: Dict[Node, Node],
) -> List[Node]:
    """
    Walk predecessors back from `goal` to `start`, then reverse.

    Returns [] when `goal` was never reached. Each call builds a new list.

    The walk is bounded by the size of `came_from`; a chain that does not
    hit `start` within that many steps contains a cycle and raises
    PathReconstructionError.
    """
    if goal not in came_from:
        return []

    path: List[Node] = []
    current = goal
    max_steps = len(came_from)

    while current != start:
        if len(path) >= max_steps:
            raise PathReconstructionError(
                code="path_cycle",
                details={"start": repr(start), "goal": repr(goal), "steps": len(path)},
            )
        path.append(current)
        try:
            current = came_from[current]
        except KeyError:
            raise PathReconstructionError(
                code="broken_chain",
                details={"start": repr(start), "goal": repr(goal), "missing": repr(current)},
            ) from None

    path.append(start)
    path.reverse()
    return path
