"""Tests for OccupancyMap placement, removal and lookup."""

from __future__ import annotations

import pytest

from domain.board.errors import (
    AlreadyOccupiedError,
    NotOccupiedError,
    OutOfBoundsError,
)
from domain.board.occupancy_map import OccupancyMap
from domain.board.value_objects import EAST, NORTH, WEST, BotOccupant


@pytest.fixture
def bot_map() -> OccupancyMap:
    return OccupancyMap.new(4, 3)


def test_new_map_is_empty(bot_map: OccupancyMap):
    assert len(bot_map) == 12
    assert bot_map.count() == 0
    assert not any(bot_map.is_occupied(i) for i in range(12))


# ===========================================================================
# Round trip
# ===========================================================================
def test_place_then_remove_returns_same_occupant(bot_map, make_bot):
    occupant = BotOccupant(bot=make_bot(1), facing=EAST)

    bot_map.place(occupant, 5)
    assert bot_map.is_occupied(5)

    removed = bot_map.remove(5)
    assert removed == occupant
    assert not bot_map.is_occupied(5)


def test_get_does_not_mutate(bot_map, make_bot):
    occupant = BotOccupant(bot=make_bot(1))
    bot_map.place(occupant, 0)

    assert bot_map.get(0) == occupant
    assert bot_map.get(0) == occupant
    assert bot_map.is_occupied(0)


def test_place_bot_wraps_with_facing(bot_map, make_bot):
    bot = make_bot(9)
    bot_map.place_bot(bot, 2, facing=WEST)
    assert bot_map.get_bot(2) == bot
    assert bot_map.get(2).facing == WEST


def test_place_bot_defaults_to_north(bot_map, make_bot):
    bot_map.place_bot(make_bot(9), 2)
    assert bot_map.get(2).facing == NORTH


# ===========================================================================
# Exclusive slot
# ===========================================================================
def test_place_into_occupied_cell_raises(bot_map, make_bot):
    first = BotOccupant(bot=make_bot(1))
    bot_map.place(first, 3)

    with pytest.raises(AlreadyOccupiedError) as exc_info:
        bot_map.place(BotOccupant(bot=make_bot(2)), 3)

    assert exc_info.value.position == 3
    assert bot_map.get(3) == first
    assert bot_map.count() == 1


# ===========================================================================
# Failure modes
# ===========================================================================
@pytest.mark.parametrize("index", [12, 40, -1])
def test_out_of_bounds_everywhere(bot_map, make_bot, index: int):
    with pytest.raises(OutOfBoundsError):
        bot_map.place(BotOccupant(bot=make_bot(1)), index)
    with pytest.raises(OutOfBoundsError):
        bot_map.remove(index)
    with pytest.raises(OutOfBoundsError):
        bot_map.get(index)
    with pytest.raises(OutOfBoundsError):
        bot_map.is_occupied(index)


def test_remove_empty_cell_raises(bot_map):
    with pytest.raises(NotOccupiedError):
        bot_map.remove(4)


def test_get_empty_cell_raises(bot_map):
    with pytest.raises(NotOccupiedError):
        bot_map.get(4)


# ===========================================================================
# Facing, scanning, formatting
# ===========================================================================
def test_set_facing_normalises_in_place(bot_map, make_bot):
    bot = make_bot(1)
    bot_map.place_bot(bot, 1)

    updated = bot_map.set_facing(1, -90)

    assert updated.facing == 270
    assert bot_map.get(1).facing == 270
    assert bot_map.get_bot(1) == bot


def test_occupied_indices_ascending(bot_map, make_bot):
    for uid, index in [(1, 9), (2, 0), (3, 4)]:
        bot_map.place_bot(make_bot(uid), index)
    assert list(bot_map.occupied_indices()) == [0, 4, 9]
    assert bot_map.count() == 3


def test_str_reports_shape_and_count(bot_map, make_bot):
    bot_map.place_bot(make_bot(1), 0)
    bot_map.place_bot(make_bot(2), 11)
    assert str(bot_map) == "(width:4, height:3, number of bots:2)"
