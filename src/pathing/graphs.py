# src/pathing/graphs.py
"""Explicit edge-list graph for non-grid searches and traversal demos."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, Iterable, List, Sequence, Tuple

from interfaces.graph import Node


@dataclass
class AdjacencyGraph(Generic[Node]):
    """
    Graph backed by a mapping of node -> ordered neighbor list.

    Edges are directed exactly as recorded; use undirected() to build a
    symmetric graph from pairs. A node with no recorded edges is a sink.
    """

    edges: Dict[Node, Sequence[Node]] = field(default_factory=dict)

    def neighbors(self, node: Node) -> Tuple[Node, ...]:
        return tuple(self.edges.get(node, ()))

    @classmethod
    def undirected(cls, pairs: Iterable[Tuple[Node, Node]]) -> "AdjacencyGraph[Node]":
        """Build a graph where every (a, b) pair is traversable both ways."""
        edges: Dict[Node, List[Node]] = {}
        for a, b in pairs:
            edges.setdefault(a, [])
            edges.setdefault(b, [])
            if b not in edges[a]:
                edges[a].append(b)
            if a not in edges[b]:
                edges[b].append(a)
        return cls(edges=dict(edges))
