# src/app/__init__.py
"""
Application entrypoints for the pathfinding engine.

Exposes:
- run_scenario: YAML scenario -> A* route + encoded maze
- run_traversal: BFS with visit events
- configure_logging: stdout logging setup
"""

from __future__ import annotations

from .logging_config import configure_logging
from .runtime import RouteReport, run_scenario, run_traversal

__all__ = [
    "RouteReport",
    "configure_logging",
    "run_scenario",
    "run_traversal",
]
