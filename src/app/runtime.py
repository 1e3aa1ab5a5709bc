# src/app/runtime.py
"""
Directly callable entry points that wire the engine to config and tracing.

- run_scenario: ScenarioConfig -> grid -> A* -> route -> maze matrix
- run_traversal: BFS with every visit published on an EventBus

Nothing here depends on a frame loop; each call runs to completion.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from env.loader import build_grid
from env.schema import ScenarioConfig
from interfaces.graph import Graph, Node
from interfaces.types import PathfindingResult
from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event
from pathing.astar import find_path
from pathing.bfs import breadth_first_search
from pathing.grid import SquareGrid
from pathing.maze import MazeMatrix, encode_maze

log = logging.getLogger(__name__)

MODULE = "app.runtime"


@dataclass
class RouteReport:
    """Everything a renderer needs after one scenario run."""

    scenario: str
    grid: SquareGrid
    result: PathfindingResult
    maze: MazeMatrix

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"scenario": self.scenario}
        data.update(self.result.to_dict())
        data["maze"] = [list(row) for row in self.maze]
        return data


def run_scenario(scenario: ScenarioConfig, bus: Optional[EventBus] = None) -> RouteReport:
    """
    Run A* for one scenario and encode the result.

    Raises InvalidEndpointError when start/goal are outside the grid or on a
    wall. An unreachable goal is reported through result.success.
    """
    grid = build_grid(scenario).freeze()
    correlation_id = uuid.uuid4().hex

    if bus is not None:
        log_event(
            bus=bus,
            module=MODULE,
            event_type=EventType.SEARCH_STARTED,
            message="A* search started",
            payload={
                "scenario": scenario.name,
                "algorithm": "astar",
                "start": scenario.start.to_list(),
                "goal": scenario.goal.to_list(),
                "width": grid.width,
                "height": grid.height,
            },
            correlation_id=correlation_id,
        )

    result = find_path(grid, scenario.start, scenario.goal)

    if bus is not None:
        log_event(
            bus=bus,
            module=MODULE,
            event_type=EventType.SEARCH_FINISHED,
            message="A* search finished",
            payload={"success": result.success, "cost": result.cost, "reason": result.reason},
            correlation_id=correlation_id,
        )
        if result.success:
            log_event(
                bus=bus,
                module=MODULE,
                event_type=EventType.PATH_RECONSTRUCTED,
                message="Route reconstructed",
                payload={"path": [loc.to_list() for loc in result.path], "length": len(result.path)},
                correlation_id=correlation_id,
            )

    if result.success:
        log.info(
            "scenario=%s path_len=%d cost=%.1f",
            scenario.name,
            len(result.path),
            result.cost or 0.0,
        )
    else:
        log.info("scenario=%s no path from %s to %s", scenario.name, scenario.start, scenario.goal)

    maze = encode_maze(grid, result.path or None)
    return RouteReport(scenario=scenario.name, grid=grid, result=result, maze=maze)


def run_traversal(graph: Graph[Node], start: Node, bus: Optional[EventBus] = None) -> List[Node]:
    """BFS from `start`; each visit becomes a NODE_VISITED event when a bus is given."""
    correlation_id = uuid.uuid4().hex

    def _visit(node: Node) -> None:
        if bus is None:
            return
        log_event(
            bus=bus,
            module=MODULE,
            event_type=EventType.NODE_VISITED,
            message=f"Visiting {node}",
            payload={"node": repr(node)},
            correlation_id=correlation_id,
        )

    order = breadth_first_search(graph, start, visit=_visit)
    log.info("traversal from %r visited %d nodes", start, len(order))
    return order
