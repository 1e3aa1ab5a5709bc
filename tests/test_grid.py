# tests/test_grid.py
"""
Unit tests for SquareGrid.

Covers:
- in_bounds / passable
- cost (destination-only, forest = 5)
- neighbor order and filtering
- add_rect / freeze
"""

from __future__ import annotations

import pytest

from interfaces.types import Location
from pathing.grid import DEFAULT_COST, FOREST_COST, SquareGrid


def make_grid() -> SquareGrid:
    grid = SquareGrid(width=3, height=3)
    grid.walls.add(Location(0, 0))
    grid.forests.add(Location(2, 2))
    return grid


def test_in_bounds() -> None:
    grid = make_grid()

    assert grid.in_bounds(Location(0, 0))
    assert grid.in_bounds(Location(2, 2))
    assert not grid.in_bounds(Location(3, 0))
    assert not grid.in_bounds(Location(0, 3))
    assert not grid.in_bounds(Location(-1, 1))


def test_passable_ignores_bounds() -> None:
    grid = make_grid()

    assert not grid.passable(Location(0, 0))
    assert grid.passable(Location(1, 1))
    # outside the grid but not a wall
    assert grid.passable(Location(10, 10))


def test_cost_depends_only_on_destination() -> None:
    grid = make_grid()

    assert grid.cost(Location(1, 2), Location(2, 2)) == FOREST_COST == 5.0
    assert grid.cost(Location(2, 2), Location(1, 2)) == DEFAULT_COST == 1.0
    # source cell is irrelevant
    assert grid.cost(Location(99, 99), Location(2, 2)) == 5.0


def test_neighbors_fixed_direction_order() -> None:
    grid = SquareGrid(width=3, height=3)

    assert list(grid.neighbors(Location(1, 1))) == [
        Location(2, 1),  # +x
        Location(1, 0),  # -y
        Location(0, 1),  # -x
        Location(1, 2),  # +y
    ]


def test_neighbors_skip_walls_and_out_of_bounds() -> None:
    grid = make_grid()

    # (0,0) is a wall, (-1,1) is out of bounds
    assert list(grid.neighbors(Location(0, 1))) == [Location(1, 1), Location(0, 2)]


def test_neighbors_of_out_of_bounds_origin_are_not_rejected() -> None:
    grid = SquareGrid(width=3, height=3)

    # the origin is never bounds-checked; only candidates are
    assert list(grid.neighbors(Location(-1, 0))) == [Location(0, 0)]


def test_location_value_semantics() -> None:
    a = Location(1, 2)
    b = Location(1, 2)

    assert a == b
    assert a is not b
    assert hash(a) == hash(b)
    assert {a: "x"}[b] == "x"
    assert Location(2, 1) != a

    x, y = a
    assert (x, y) == (1, 2)


def test_add_rect_is_inclusive() -> None:
    grid = SquareGrid(width=5, height=5)
    grid.add_rect("wall", 1, 1, 2, 3)
    grid.add_rect("forest", 4, 4, 4, 4)

    assert len(grid.walls) == 6
    assert Location(2, 3) in grid.walls
    assert grid.forests == {Location(4, 4)}


def test_add_rect_rejects_unknown_kind() -> None:
    grid = SquareGrid(width=2, height=2)

    with pytest.raises(ValueError):
        grid.add_rect("lava", 0, 0, 1, 1)


def test_freeze_returns_immutable_copy() -> None:
    grid = make_grid()
    frozen = grid.freeze()

    assert isinstance(frozen.walls, frozenset)
    assert isinstance(frozen.forests, frozenset)
    assert frozen.walls == grid.walls

    # later edits to the source grid do not leak into the frozen copy
    grid.walls.add(Location(1, 1))
    assert Location(1, 1) not in frozen.walls

    with pytest.raises(ValueError):
        frozen.add_rect("wall", 0, 0, 0, 0)


def test_cells_row_major() -> None:
    grid = SquareGrid(width=2, height=2)

    assert list(grid.cells()) == [
        Location(0, 0),
        Location(1, 0),
        Location(0, 1),
        Location(1, 1),
    ]
