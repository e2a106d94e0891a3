"""Board Bounded Context - Domain Services.

BoardController orchestrates bot relocation on a Board: index-to-index moves
and facing-relative forward moves. Moves are composed from the occupancy
map's remove + place; the destination is always checked first, so a refused
move never takes the bot off the board.
"""

from __future__ import annotations

import logging
import math

from domain.board.board import Board
from domain.board.errors import AlreadyOccupiedError, OutOfBoundsError
from domain.board.value_objects import BotOccupant, CoordinatePair

logger = logging.getLogger(__name__)

# Quarter turn in degrees; forward steps snap to the nearest multiple
QUARTER_TURN_DEG = 90


# ---------------------------------------------------------------------------
# Helper: Forward Step
# ---------------------------------------------------------------------------
def forward_delta(facing: float) -> tuple[int, int]:
    """Unit step for a bot moving forward from `facing`.

    0 = north (0, -1), 90 = east (1, 0), 180 = south (0, 1), 270 = west (-1, 0).

    Diagonal steps are not modelled. The facing is snapped to the nearest
    cardinal direction before the trig components are rounded; exact ties
    (45, 135, 225, 315) fall to the vertical axis under round-half-even.

    Returns:
        (dx, dy) relative to the bot's current cell, not its destination
    """
    quadrant = round(facing / QUARTER_TURN_DEG) % 4
    theta = math.radians(quadrant * QUARTER_TURN_DEG)
    dx = int(round(math.sin(theta)))
    dy = -int(round(math.cos(theta)))
    return (dx, dy)


class BoardController:
    """Object responsible for moving bots around a Board."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def move_by_index(self, src_index: int, dest_index: int) -> None:
        """Move the occupant at `src_index` to `dest_index`, keeping its facing.

        Raises:
            OutOfBoundsError: If either index is invalid
            AlreadyOccupiedError: If dest_index holds a bot (src is untouched)
            NotOccupiedError: If src_index holds no bot
        """
        grid = self.board.grid
        grid.check_index(src_index)
        grid.check_index(dest_index)

        if self.board.is_occupied(dest_index):
            raise AlreadyOccupiedError(dest_index)

        occupant = self.board.remove(src_index)
        self.board.place(occupant, dest_index)
        logger.debug("Moved %s from %d to %d", occupant.bot, src_index, dest_index)

    def move_by_coord(
        self, src_coord: CoordinatePair, dest_coord: CoordinatePair
    ) -> None:
        """Coordinate-addressed move; see move_by_index."""
        self.move_by_index(
            self.board.index_of(src_coord), self.board.index_of(dest_coord)
        )

    def move_forward(self, index: int) -> int:
        """Move the bot at `index` one cell in the direction it faces.

        Raises:
            OutOfBoundsError: If index is invalid or the step leaves the grid
            NotOccupiedError: If index holds no bot
            AlreadyOccupiedError: If the cell ahead holds a bot

        Returns:
            Index of the bot's new cell
        """
        occupant = self.board.get(index)
        src = self.board.coord_of(index)
        dest_x, dest_y = src.offset(*forward_delta(occupant.facing))

        if not self.board.grid.contains(dest_x, dest_y):
            raise OutOfBoundsError((dest_x, dest_y), self.board.grid.shape)

        dest_index = self.board.index_of(CoordinatePair(x=dest_x, y=dest_y))
        self.move_by_index(index, dest_index)
        return dest_index

    def turn(self, index: int, degrees: int) -> BotOccupant:
        """Rotate the bot at `index` clockwise by `degrees` (negative = left)."""
        turned = self.board.get(index).turned(degrees)
        return self.board.set_facing(index, turned.facing)
