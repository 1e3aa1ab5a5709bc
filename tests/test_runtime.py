# tests/test_runtime.py
"""
Tests for app.runtime.

Covers:
- run_scenario on the shipped scenarios (events, maze overlay)
- unreachable goals and invalid endpoints
- run_traversal publishing NODE_VISITED events
"""

from __future__ import annotations

from typing import List

import pytest

from app.runtime import run_scenario, run_traversal
from env.loader import DEFAULT_SCENARIOS_PATH, load_scenario
from env.schema import ScenarioConfig
from interfaces.types import CellCode, Location
from monitoring.bus import EventBus
from monitoring.events import EventType, MonitoringEvent
from pathing.errors import InvalidEndpointError
from pathing.graphs import AdjacencyGraph


def collecting_bus() -> tuple[EventBus, List[MonitoringEvent]]:
    bus = EventBus()
    events: List[MonitoringEvent] = []
    bus.subscribe(events.append)
    return bus, events


def test_open_grid_scenario_report() -> None:
    bus, events = collecting_bus()
    scenario = load_scenario("open_10x10", path=DEFAULT_SCENARIOS_PATH)

    report = run_scenario(scenario, bus=bus)

    assert report.result.success
    assert report.result.cost == 11.0
    assert len(report.result.path) == 12
    assert sum(row.count(CellCode.PATH) for row in report.maze) == 12

    assert [e.event_type for e in events] == [
        EventType.SEARCH_STARTED,
        EventType.SEARCH_FINISHED,
        EventType.PATH_RECONSTRUCTED,
    ]
    assert len({e.correlation_id for e in events}) == 1
    assert events[0].payload["start"] == [1, 1]
    assert events[2].payload["length"] == 12


def test_rat_maze_scenario_routes_around_walls() -> None:
    scenario = load_scenario("rat_maze", path=DEFAULT_SCENARIOS_PATH)

    report = run_scenario(scenario)

    assert report.result.success
    assert report.result.path[0] == Location(1, 1)
    assert report.result.path[-1] == Location(8, 5)
    assert not any(report.grid.is_wall(loc) for loc in report.result.path)
    assert report.maze[5][8] == CellCode.PATH
    # the grid handed back is the frozen one the search ran on
    assert isinstance(report.grid.walls, frozenset)


def test_unreachable_goal_reports_failure() -> None:
    bus, events = collecting_bus()
    scenario = ScenarioConfig(
        name="boxed",
        start=Location(0, 0),
        goal=Location(2, 2),
        width=5,
        height=5,
        walls=[Location(1, 2), Location(3, 2), Location(2, 1), Location(2, 3)],
    )

    report = run_scenario(scenario, bus=bus)

    assert not report.result.success
    assert report.result.reason == "no_path_found"
    assert all(CellCode.PATH not in row for row in report.maze)
    assert [e.event_type for e in events] == [EventType.SEARCH_STARTED, EventType.SEARCH_FINISHED]
    assert events[-1].payload["success"] is False


def test_invalid_start_raises() -> None:
    scenario = load_scenario("rat_maze", path=DEFAULT_SCENARIOS_PATH)
    scenario.start = Location(0, 0)  # border wall

    with pytest.raises(InvalidEndpointError) as excinfo:
        run_scenario(scenario)

    assert excinfo.value.code == "invalid_start"


def test_report_to_dict_is_json_shaped() -> None:
    report = run_scenario(load_scenario("open_10x10", path=DEFAULT_SCENARIOS_PATH))

    data = report.to_dict()

    assert data["scenario"] == "open_10x10"
    assert data["path"][0] == [1, 1]
    assert data["path"][-1] == [8, 5]
    assert data["cost"] == 11.0
    assert len(data["maze"]) == 10


def test_run_traversal_publishes_visits() -> None:
    bus, events = collecting_bus()
    graph = AdjacencyGraph.undirected([("A", "B"), ("B", "C"), ("B", "D"), ("D", "E")])

    order = run_traversal(graph, "A", bus=bus)

    assert order == ["A", "B", "C", "D", "E"]
    assert [e.event_type for e in events] == [EventType.NODE_VISITED] * 5
    assert [e.payload["node"] for e in events] == ["'A'", "'B'", "'C'", "'D'", "'E'"]
    assert events[0].message == "Visiting A"


def test_run_traversal_without_bus() -> None:
    graph = AdjacencyGraph(edges={"A": ["B"]})

    assert run_traversal(graph, "A") == ["A", "B"]
