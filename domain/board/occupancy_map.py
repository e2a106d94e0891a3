"""Board Bounded Context - Occupancy Map.

Dense overlay holding at most one BotOccupant per cell. Empty cells hold None
rather than a placeholder occupant, so a slot is either fully occupied or
fully empty.

All operations are index-addressed; coordinate-addressed callers convert
through the embedded GridIndex first. There is no move operation at this
layer: moves are composed from remove + place by the BoardController.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from domain.board.errors import AlreadyOccupiedError, NotOccupiedError
from domain.board.grid import GridIndex
from domain.board.value_objects import NORTH, BotOccupant

logger = logging.getLogger(__name__)


class OccupancyMap:
    """Bot placement overlay.

    Parameters
    ----------
    grid: GridIndex
        Shared index space; the slot list is sized from it at construction.
    """

    def __init__(self, grid: GridIndex) -> None:
        self.grid = grid
        self._slots: list[BotOccupant | None] = [None] * len(grid)

    @classmethod
    def new(cls, width: int, height: int) -> "OccupancyMap":
        return cls(GridIndex(width=width, height=height))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def place(self, occupant: BotOccupant, index: int) -> None:
        """Store `occupant` at `index`.

        Raises:
            OutOfBoundsError: If index is invalid
            AlreadyOccupiedError: If the cell already holds an occupant
        """
        self.grid.check_index(index)
        if self._slots[index] is not None:
            raise AlreadyOccupiedError(index)
        self._slots[index] = occupant
        logger.debug("Placed %s at index %d", occupant, index)

    def place_bot(self, bot: Any, index: int, facing: int = NORTH) -> None:
        """Wrap a bare bot in a BotOccupant and place it."""
        self.place(BotOccupant(bot=bot, facing=facing), index)

    def remove(self, index: int) -> BotOccupant:
        """Clear the cell at `index` and hand its occupant to the caller.

        Raises:
            OutOfBoundsError: If index is invalid
            NotOccupiedError: If the cell is empty
        """
        occupant = self.get(index)
        self._slots[index] = None
        logger.debug("Removed %s from index %d", occupant, index)
        return occupant

    def set_facing(self, index: int, angle: int) -> BotOccupant:
        """Re-orient the occupant at `index`; the angle is normalised."""
        occupant = self.get(index).with_facing(angle)
        self._slots[index] = occupant
        return occupant

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, index: int) -> BotOccupant:
        """Return the occupant at `index` without removing it.

        Raises:
            OutOfBoundsError: If index is invalid
            NotOccupiedError: If the cell is empty
        """
        self.grid.check_index(index)
        occupant = self._slots[index]
        if occupant is None:
            raise NotOccupiedError(index)
        return occupant

    def get_bot(self, index: int) -> Any:
        return self.get(index).bot

    def is_occupied(self, index: int) -> bool:
        self.grid.check_index(index)
        return self._slots[index] is not None

    def occupied_indices(self) -> Iterator[int]:
        """Yield occupied indices in ascending order."""
        for index, occupant in enumerate(self._slots):
            if occupant is not None:
                yield index

    def count(self) -> int:
        # Scanned on demand; no cached counter to drift out of sync
        return sum(1 for _ in self.occupied_indices())

    def __len__(self) -> int:
        return len(self.grid)

    def __str__(self) -> str:
        return (
            f"(width:{self.grid.width}, height:{self.grid.height}, "
            f"number of bots:{self.count()})"
        )
