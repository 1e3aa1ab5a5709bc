# path: src/monitoring/events.py
"""
Event schema for search tracing.

This module defines:
- EventType enum
- MonitoringEvent (structured trace events)

All events are JSON-serializable via `.to_dict()` and are intended for use
with monitoring.bus.EventBus and monitoring.logger.JsonFileLogger.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional


# ============================================================
# Event Types
# ============================================================

class EventType(Enum):
    """Typed events emitted around a search invocation."""

    # A search (A* or BFS) is about to run
    SEARCH_STARTED = auto()

    # BFS visited one node
    NODE_VISITED = auto()

    # A* returned; payload says whether the goal was reached
    SEARCH_FINISHED = auto()

    # came_from was turned into an ordered route
    PATH_RECONSTRUCTED = auto()

    # Generic log messages
    LOG = auto()


# ============================================================
# Monitoring Event Structure
# ============================================================

@dataclass
class MonitoringEvent:
    """
    Trace event emitted by the runtime or a traversal callback.

    All fields must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # Source module string ("app.runtime", ...)
    event_type: EventType       # Enum describing the event class
    message: str                # Short human-readable description
    payload: Dict[str, Any]     # Structured data (locations, costs, counts)
    correlation_id: Optional[str] = None  # Groups events of one search

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict for loggers."""
        data = asdict(self)
        data["event_type"] = self.event_type.name  # store name, not enum
        return data
