# Scenario dataclasses loaded from config/scenarios.yaml
# src/env/schema.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from interfaces.types import Location

# Inclusive rectangle (x0, y0, x1, y1)
Rect = Tuple[int, int, int, int]


@dataclass
class ScenarioConfig:
    """
    One named pathfinding scenario.

    Exactly one grid source is set: `maze` (cell-code matrix) or
    `width`/`height` with optional point and rectangle lists.
    """
    name: str
    start: Location
    goal: Location
    maze: Optional[List[List[int]]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    walls: List[Location] = field(default_factory=list)
    forests: List[Location] = field(default_factory=list)
    wall_rects: List[Rect] = field(default_factory=list)
    forest_rects: List[Rect] = field(default_factory=list)
