# tests/test_bfs.py
"""
Unit tests for breadth_first_search.

Uses the five-node example graph (A-B-C, B-D, D-E) and small grids.
"""

from __future__ import annotations

from typing import List

from interfaces.types import Location
from pathing.bfs import breadth_first_search
from pathing.graphs import AdjacencyGraph
from pathing.grid import SquareGrid


def example_graph() -> AdjacencyGraph[str]:
    return AdjacencyGraph(
        edges={
            "A": ["B"],
            "B": ["A", "C", "D"],
            "C": ["A"],
            "D": ["E", "A"],
            "E": ["B"],
        }
    )


def test_bfs_visits_every_node_once_in_fifo_order() -> None:
    order = breadth_first_search(example_graph(), "A")

    assert order == ["A", "B", "C", "D", "E"]
    assert len(set(order)) == len(order)


def test_bfs_on_undirected_pairs() -> None:
    graph = AdjacencyGraph.undirected([("A", "B"), ("B", "C"), ("B", "D"), ("D", "E")])

    assert graph.neighbors("B") == ("A", "C", "D")
    assert breadth_first_search(graph, "A") == ["A", "B", "C", "D", "E"]


def test_bfs_visit_callback_receives_each_node() -> None:
    seen: List[str] = []

    order = breadth_first_search(example_graph(), "A", visit=seen.append)

    assert seen == order


def test_bfs_from_sink_node() -> None:
    graph = AdjacencyGraph(edges={"A": ["B"]})

    # "B" has no recorded edges
    assert breadth_first_search(graph, "B") == ["B"]
    assert breadth_first_search(graph, "A") == ["A", "B"]


def test_bfs_on_grid_is_deterministic() -> None:
    grid = SquareGrid(width=2, height=2)

    assert breadth_first_search(grid, Location(0, 0)) == [
        Location(0, 0),
        Location(1, 0),
        Location(0, 1),
        Location(1, 1),
    ]


def test_bfs_on_grid_respects_walls() -> None:
    grid = SquareGrid(width=3, height=3)
    grid.add_rect("wall", 1, 0, 1, 2)

    order = breadth_first_search(grid, Location(0, 0))

    assert set(order) == {Location(0, 0), Location(0, 1), Location(0, 2)}
