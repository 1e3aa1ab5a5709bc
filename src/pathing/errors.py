# domain errors for the pathing engine
# src/pathing/errors.py
"""
Error taxonomy for pathing.

- No path found is NOT an error: it is reported through an empty path
  (reconstruct_path) or PathfindingResult.success == False (find_path).
- Invalid start/goal is a caller contract violation and raises
  InvalidEndpointError.
- Dequeuing from an empty PriorityQueue is a programming error and
  raises EmptyQueueError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PathingError(RuntimeError):
    """
    Domain-level error raised by the pathing engine.

    code:
        Short machine-readable identifier ("invalid_start", "path_cycle", ...).
    details:
        JSON-safe context for logs and CLI output.
    """

    code: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, details={self.details!r})"


@dataclass
class InvalidEndpointError(PathingError):
    """Start or goal lies outside the grid or inside a wall."""


@dataclass
class PathReconstructionError(PathingError):
    """The predecessor chain never reaches the start (a cycle in came_from)."""


class EmptyQueueError(IndexError):
    """Raised by PriorityQueue.dequeue() when the queue holds no entries."""
