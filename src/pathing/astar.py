# A* pathfinding over weighted graphs
# src/pathing/astar.py
"""
A* search.

- a_star_search(): the raw engine. Works on any WeightedGraph, returns the
  came_from / cost_so_far maps and never raises for an unreachable goal.
- find_path(): grid-level entry point. Validates endpoints, runs the engine
  and reconstructs the route into a PathfindingResult.

The default heuristic is Manhattan distance. It is admissible only while
every step costs at least 1 and movement stays 4-directional; adding
diagonal moves without changing the heuristic breaks optimality.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from interfaces.graph import Node, WeightedGraph
from interfaces.types import Location, PathfindingResult, SearchResult

from .errors import InvalidEndpointError
from .grid import SquareGrid
from .queue import PriorityQueue
from .reconstruct import reconstruct_path

log = logging.getLogger(__name__)

HeuristicFn = Callable[[Node, Node], float]


def manhattan(a: Location, b: Location) -> float:
    """Manhattan distance heuristic for 4-directional grids."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def a_star_search(
    graph: WeightedGraph[Node],
    start: Node,
    goal: Node,
    heuristic: HeuristicFn = manhattan,
) -> SearchResult[Node]:
    """
    Weighted shortest-path search from `start` to `goal`.

    Stops as soon as `goal` is dequeued. If the frontier empties first,
    the goal is unreachable and simply has no came_from entry.

    Nodes may be enqueued several times as cheaper routes turn up. Stale
    entries are processed like any other; their neighbors just fail the
    relaxation test.
    """
    result: SearchResult[Node] = SearchResult()
    came_from = result.came_from
    cost_so_far = result.cost_so_far

    frontier: PriorityQueue[Node] = PriorityQueue()
    frontier.enqueue(start, 0.0)
    came_from[start] = start
    cost_so_far[start] = 0.0

    expanded = 0
    while frontier.count() > 0:
        current = frontier.dequeue()

        if current == goal:
            break

        expanded += 1
        for nxt in graph.neighbors(current):
            new_cost = cost_so_far[current] + graph.cost(current, nxt)
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                frontier.enqueue(nxt, new_cost + heuristic(nxt, goal))
                came_from[nxt] = current

    log.debug(
        "astar start=%r goal=%r expanded=%d reached=%s cost=%s",
        start,
        goal,
        expanded,
        goal in came_from,
        cost_so_far.get(goal),
    )
    return result


def validate_endpoints(grid: SquareGrid, start: Location, goal: Location) -> None:
    """Raise InvalidEndpointError unless start and goal are in bounds and passable."""
    for code, loc in (("invalid_start", start), ("invalid_goal", goal)):
        if not grid.in_bounds(loc):
            raise InvalidEndpointError(
                code=code,
                details={
                    "location": loc.to_list(),
                    "problem": "out_of_bounds",
                    "width": grid.width,
                    "height": grid.height,
                },
            )
        if not grid.passable(loc):
            raise InvalidEndpointError(
                code=code,
                details={"location": loc.to_list(), "problem": "wall"},
            )


def find_path(
    grid: SquareGrid,
    start: Location,
    goal: Location,
    heuristic: Optional[HeuristicFn] = None,
) -> PathfindingResult:
    """
    Validated A* search on a SquareGrid.

    Returns a PathfindingResult with:
      - path: start..goal inclusive, or [] when unreachable
      - cost: total cost of the path (None when unreachable)
      - reason: "no_path_found" when unreachable

    Raises InvalidEndpointError for out-of-bounds or walled endpoints.
    """
    validate_endpoints(grid, start, goal)

    if start == goal:
        return PathfindingResult(path=[start], success=True, cost=0.0)

    search = a_star_search(grid, start, goal, heuristic or manhattan)
    path = reconstruct_path(start, goal, search.came_from)

    if not path:
        return PathfindingResult(path=[], success=False, reason="no_path_found")

    return PathfindingResult(path=path, success=True, cost=search.cost_to(goal))
