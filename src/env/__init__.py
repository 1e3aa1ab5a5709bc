"""Scenario configuration (YAML) for the pathfinding runtime."""

from __future__ import annotations

from .loader import DEFAULT_SCENARIOS_PATH, build_grid, load_scenario, load_scenarios
from .schema import ScenarioConfig

__all__ = [
    "DEFAULT_SCENARIOS_PATH",
    "ScenarioConfig",
    "build_grid",
    "load_scenario",
    "load_scenarios",
]
