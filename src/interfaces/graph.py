# graph capability contracts shared by the search engines
# src/interfaces/graph.py

from __future__ import annotations

from typing import Hashable, Iterable, Protocol, TypeVar

# Nodes are used as dict keys by every search, so value equality and
# hashing are required.
Node = TypeVar("Node", bound=Hashable)


class Graph(Protocol[Node]):
    """
    Anything that can enumerate the neighbors of a node.

    Implementations should yield neighbors in a fixed order so that
    tie-breaking during search is reproducible from run to run.
    """

    def neighbors(self, node: Node) -> Iterable[Node]:
        """Return the nodes directly reachable from `node`."""
        ...


class WeightedGraph(Graph[Node], Protocol[Node]):
    """
    Graph whose edges carry a traversal cost.

    A* needs only this capability; it does not have to be a grid.
    """

    def cost(self, a: Node, b: Node) -> float:
        """Cost of stepping from `a` into the neighboring node `b`."""
        ...
