# min-priority queue used as the A* frontier
# src/pathing/queue.py
"""
Binary-heap priority queue.

- enqueue() always inserts; the same item may sit in the queue several
  times with different priorities. There is no decrease-key.
- dequeue() removes the entry with the lowest priority. Equal priorities
  come out in insertion order (a monotonic counter breaks ties), so items
  themselves never need to be comparable.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, List, Tuple, TypeVar

from .errors import EmptyQueueError

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    def __init__(self) -> None:
        # (priority, seq, item)
        self._heap: List[Tuple[float, int, T]] = []
        self._seq = itertools.count()

    def enqueue(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._seq), item))

    def dequeue(self) -> T:
        """Remove and return the lowest-priority item; first inserted wins ties."""
        if not self._heap:
            raise EmptyQueueError("dequeue from an empty PriorityQueue")
        _, _, item = heapq.heappop(self._heap)
        return item

    def peek_priority(self) -> float:
        if not self._heap:
            raise EmptyQueueError("peek on an empty PriorityQueue")
        return self._heap[0][0]

    def count(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
