"""Tests for GridIndex coordinate/index conversion."""

from __future__ import annotations

import pydantic
import pytest

from domain.board.errors import OutOfBoundsError
from domain.board.grid import GridIndex
from domain.board.value_objects import CoordinatePair

SHAPES = [(1, 1), (1, 7), (7, 1), (4, 3), (5, 5), (16, 9)]


# ===========================================================================
# Bijection
# ===========================================================================
@pytest.mark.parametrize("width,height", SHAPES)
def test_index_to_coord_round_trip(width: int, height: int):
    """index_of(coord_of(i)) == i for every valid index."""
    grid = GridIndex(width=width, height=height)
    for index in range(len(grid)):
        assert grid.index_of(grid.coord_of(index)) == index


@pytest.mark.parametrize("width,height", SHAPES)
def test_coord_to_index_round_trip(width: int, height: int):
    """coord_of(index_of(c)) == c for every valid coordinate."""
    grid = GridIndex(width=width, height=height)
    seen = set()
    for y in range(height):
        for x in range(width):
            coord = CoordinatePair(x=x, y=y)
            index = grid.index_of(coord)
            assert grid.coord_of(index) == coord
            seen.add(index)
    assert seen == set(range(width * height))


def test_row_major_layout():
    grid = GridIndex(width=4, height=3)
    assert grid.index_of(CoordinatePair(x=0, y=0)) == 0
    assert grid.index_of(CoordinatePair(x=3, y=0)) == 3
    assert grid.index_of(CoordinatePair(x=0, y=1)) == 4
    assert grid.index_of(CoordinatePair(x=3, y=2)) == 11
    assert grid.coord_of(6) == CoordinatePair(x=2, y=1)


def test_len_is_width_times_height():
    assert len(GridIndex(width=4, height=3)) == 12


def test_iter_coords_is_row_major():
    grid = GridIndex(width=2, height=2)
    assert [c.as_tuple() for c in grid.iter_coords()] == [
        (0, 0),
        (1, 0),
        (0, 1),
        (1, 1),
    ]


# ===========================================================================
# Bounds
# ===========================================================================
@pytest.mark.parametrize("x,y", [(4, 0), (0, 3), (4, 3), (100, 100)])
def test_index_of_out_of_bounds(x: int, y: int):
    grid = GridIndex(width=4, height=3)
    coord = CoordinatePair(x=x, y=y)

    with pytest.raises(OutOfBoundsError) as exc_info:
        grid.index_of(coord)

    assert exc_info.value.position == coord
    assert exc_info.value.shape == (4, 3)


@pytest.mark.parametrize("index", [12, 13, -1])
def test_coord_of_out_of_bounds(index: int):
    grid = GridIndex(width=4, height=3)
    with pytest.raises(OutOfBoundsError):
        grid.coord_of(index)


def test_contains_accepts_signed_positions():
    grid = GridIndex(width=4, height=3)
    assert grid.contains(0, 0)
    assert grid.contains(3, 2)
    assert not grid.contains(-1, 0)
    assert not grid.contains(0, -1)
    assert not grid.contains(4, 0)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_zero_sized_grid_rejected(width: int, height: int):
    with pytest.raises(pydantic.ValidationError):
        GridIndex(width=width, height=height)
