# breadth-first reachability traversal
# src/pathing/bfs.py
"""
Unweighted breadth-first traversal over any Graph.

Reachability only: there is no path reconstruction here. Each visited
node is reported to an optional `visit` callback, which is where logging,
UI or test harnesses plug in.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Set

from interfaces.graph import Graph, Node

log = logging.getLogger(__name__)

# Signature for a visitation sink:
#   visit(node) -> None
VisitFn = Callable[[Node], None]


def breadth_first_search(
    graph: Graph[Node],
    start: Node,
    visit: Optional[VisitFn] = None,
) -> List[Node]:
    """
    Visit every node reachable from `start` exactly once, in FIFO order.

    Nodes are marked as reached when they are enqueued, not when they are
    dequeued, so a node can never sit in the frontier twice.

    Returns the visit order, which is the same sequence passed to `visit`.
    """
    frontier: Deque[Node] = deque([start])
    reached: Set[Node] = {start}
    order: List[Node] = []

    while frontier:
        current = frontier.popleft()
        order.append(current)
        if visit is not None:
            visit(current)

        for nxt in graph.neighbors(current):
            if nxt not in reached:
                frontier.append(nxt)
                reached.add(nxt)

    log.debug("bfs start=%r visited=%d", start, len(order))
    return order
