"""Board Bounded Context - Board Aggregate.

The Board exclusively owns one OccupancyMap and one SignalMap built over the
same GridIndex. Bot and signal operations pass straight through to the
overlay that owns them; coordinate variants convert through the shared grid.
"""

from __future__ import annotations

from typing import Any

from domain.board.grid import GridIndex
from domain.board.occupancy_map import OccupancyMap
from domain.board.signal_map import SignalMap
from domain.board.value_objects import (
    NORTH,
    BotOccupant,
    CoordinatePair,
    SignalSource,
)


class Board:
    """Field that bots move on and broadcast across.

    For example, Board(4, 3) creates a 4x3 board whose overlays are all
    empty:

        . . . .
        . . . .
        . . . .
    """

    def __init__(self, width: int, height: int) -> None:
        self.grid = GridIndex(width=width, height=height)
        self.bot_map = OccupancyMap(self.grid)
        self.signal_map = SignalMap(self.grid)

    @classmethod
    def new(cls, width: int, height: int) -> "Board":
        return cls(width, height)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def __len__(self) -> int:
        return len(self.grid)

    # --- index math --------------------------------------------------------
    def index_of(self, coord: CoordinatePair) -> int:
        return self.grid.index_of(coord)

    def coord_of(self, index: int) -> CoordinatePair:
        return self.grid.coord_of(index)

    # --- bots (index-addressed) --------------------------------------------
    def place(self, occupant: BotOccupant, index: int) -> None:
        self.bot_map.place(occupant, index)

    def place_bot(self, bot: Any, index: int, facing: int = NORTH) -> None:
        self.bot_map.place_bot(bot, index, facing)

    def remove(self, index: int) -> BotOccupant:
        return self.bot_map.remove(index)

    def get(self, index: int) -> BotOccupant:
        return self.bot_map.get(index)

    def get_bot(self, index: int) -> Any:
        return self.bot_map.get_bot(index)

    def is_occupied(self, index: int) -> bool:
        return self.bot_map.is_occupied(index)

    def set_facing(self, index: int, angle: int) -> BotOccupant:
        return self.bot_map.set_facing(index, angle)

    # --- bots (coordinate-addressed) ---------------------------------------
    def place_at(self, occupant: BotOccupant, coord: CoordinatePair) -> None:
        self.bot_map.place(occupant, self.index_of(coord))

    def remove_at(self, coord: CoordinatePair) -> BotOccupant:
        return self.bot_map.remove(self.index_of(coord))

    def get_at(self, coord: CoordinatePair) -> BotOccupant:
        return self.bot_map.get(self.index_of(coord))

    # --- signals -----------------------------------------------------------
    def add_source(self, source: SignalSource) -> None:
        self.signal_map.add_source(source)

    def remove_source(self, coord: CoordinatePair) -> SignalSource:
        return self.signal_map.remove_source(coord)

    def move_source(
        self, from_coord: CoordinatePair, to_coord: CoordinatePair
    ) -> SignalSource:
        return self.signal_map.move_source(from_coord, to_coord)

    def get_source(self, coord: CoordinatePair) -> SignalSource:
        return self.signal_map.get_source(coord)

    def coverage_at(self, coord: CoordinatePair) -> tuple[CoordinatePair, ...]:
        return self.signal_map.coverage_at(coord)

    def __str__(self) -> str:
        return (
            f"(width:{self.width}, height:{self.height}, "
            f"number of bots:{self.bot_map.count()})"
        )
