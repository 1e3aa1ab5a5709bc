# src/env/loader.py
"""
Scenario loader for config/scenarios.yaml.

Responsibility:
  - Read the YAML file and select the active (or named) scenario
  - Map the raw mapping into a ScenarioConfig
  - Build the SquareGrid a scenario describes

Only structure is checked here. Whether start/goal are passable is
decided by pathing.find_path at search time.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from interfaces.types import Location
from pathing.grid import FOREST, WALL, SquareGrid
from pathing.maze import grid_from_maze

from .schema import Rect, ScenarioConfig

log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_SCENARIOS_PATH = CONFIG_ROOT / "scenarios.yaml"

# only meaningful for width/height scenarios
_TERRAIN_KEYS = ("walls", "forests", "wall_rects", "forest_rects")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_point(raw: Any, what: str) -> Location:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{what} must be an [x, y] pair, got {raw!r}")
    try:
        return Location(int(raw[0]), int(raw[1]))
    except (TypeError, ValueError):
        raise ValueError(f"{what} must contain integers, got {raw!r}") from None


def _parse_rect(raw: Any, what: str) -> Rect:
    if not isinstance(raw, (list, tuple)) or len(raw) != 4:
        raise ValueError(f"{what} must be an [x0, y0, x1, y1] list, got {raw!r}")
    try:
        x0, y0, x1, y1 = (int(v) for v in raw)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must contain integers, got {raw!r}") from None
    return (x0, y0, x1, y1)


def _parse_list(raw: Any, what: str) -> List[Any]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"{what} must be a list, got {type(raw).__name__}")
    return raw


def _select_scenario(cfg: Dict[str, Any], name: Optional[str]) -> Tuple[str, Dict[str, Any]]:
    """Return (scenario_name, scenario_mapping)."""
    scenarios = cfg.get("scenarios")
    if not isinstance(scenarios, dict):
        raise ValueError("scenarios.yaml must define a 'scenarios' mapping.")

    if name is None:
        name = cfg.get("scenario")
        if not name:
            raise ValueError("scenarios.yaml must define a 'scenario' key when no name is given.")

    if name not in scenarios:
        raise KeyError(f"Scenario '{name}' not found in scenarios.yaml")

    raw = scenarios[name]
    if not isinstance(raw, dict):
        raise ValueError(f"Scenario '{name}' must be a mapping.")
    return name, raw


def _parse_scenario(name: str, raw: Dict[str, Any]) -> ScenarioConfig:
    has_maze = raw.get("maze") is not None
    has_dims = raw.get("width") is not None or raw.get("height") is not None

    if has_maze and has_dims:
        raise ValueError(f"Scenario '{name}' sets both 'maze' and width/height.")
    if not has_maze and not has_dims:
        raise ValueError(f"Scenario '{name}' needs either 'maze' or width/height.")
    if has_maze:
        extra = [key for key in _TERRAIN_KEYS if raw.get(key) is not None]
        if extra:
            raise ValueError(f"Scenario '{name}' sets 'maze' together with {', '.join(extra)}.")

    if "start" not in raw or "goal" not in raw:
        raise ValueError(f"Scenario '{name}' must define 'start' and 'goal'.")

    scenario = ScenarioConfig(
        name=name,
        start=_parse_point(raw["start"], f"{name}.start"),
        goal=_parse_point(raw["goal"], f"{name}.goal"),
    )

    if has_maze:
        maze = _parse_list(raw["maze"], f"{name}.maze")
        rows: List[List[int]] = []
        for y, row in enumerate(maze):
            cells = _parse_list(row, f"{name}.maze[{y}]")
            try:
                rows.append([int(v) for v in cells])
            except (TypeError, ValueError):
                raise ValueError(f"{name}.maze[{y}] must contain integers, got {cells!r}") from None
        return replace(scenario, maze=rows)

    width = int(raw.get("width") or 0)
    height = int(raw.get("height") or 0)
    if width <= 0 or height <= 0:
        raise ValueError(f"Scenario '{name}' needs positive width/height, got {width}x{height}")

    return replace(
        scenario,
        width=width,
        height=height,
        walls=[_parse_point(p, f"{name}.walls") for p in _parse_list(raw.get("walls"), f"{name}.walls")],
        forests=[_parse_point(p, f"{name}.forests") for p in _parse_list(raw.get("forests"), f"{name}.forests")],
        wall_rects=[_parse_rect(r, f"{name}.wall_rects") for r in _parse_list(raw.get("wall_rects"), f"{name}.wall_rects")],
        forest_rects=[_parse_rect(r, f"{name}.forest_rects") for r in _parse_list(raw.get("forest_rects"), f"{name}.forest_rects")],
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_scenarios(path: Path = DEFAULT_SCENARIOS_PATH) -> Dict[str, Any]:
    """Load the raw scenarios mapping from YAML."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def load_scenario(name: Optional[str] = None, path: Path = DEFAULT_SCENARIOS_PATH) -> ScenarioConfig:
    """Main entry point: returns the named (or active) scenario."""
    cfg = load_scenarios(path)
    scenario_name, raw = _select_scenario(cfg, name)
    scenario = _parse_scenario(scenario_name, raw)
    log.debug("loaded scenario %s from %s", scenario_name, path)
    return scenario


def build_grid(scenario: ScenarioConfig) -> SquareGrid:
    """Build the SquareGrid described by `scenario`."""
    if scenario.maze is not None:
        return grid_from_maze(scenario.maze)

    grid = SquareGrid(width=int(scenario.width or 0), height=int(scenario.height or 0))
    for rect in scenario.wall_rects:
        grid.add_rect(WALL, *rect)
    for rect in scenario.forest_rects:
        grid.add_rect(FOREST, *rect)
    grid.walls.update(scenario.walls)  # type: ignore[attr-defined]
    grid.forests.update(scenario.forests)  # type: ignore[attr-defined]
    return grid
