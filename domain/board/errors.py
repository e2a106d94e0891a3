"""Board Bounded Context - Error Hierarchy.

Custom exceptions for placement, removal and lookup on grid overlays.

Every fallible board operation raises one of the three location errors to its
immediate caller. There are no retries and no silent recovery; callers decide
whether a failure is fatal to their higher-level operation.
"""

from __future__ import annotations

from typing import Any


class BoardError(Exception):
    """Base error for board operations."""


class OutOfBoundsError(BoardError):
    """Coordinate or linear index falls outside the grid.

    Attributes:
        position: The offending coordinate, index or raw (x, y) tuple
        shape: The grid's (width, height)
    """

    def __init__(self, position: Any, shape: tuple[int, int]) -> None:
        self.position = position
        self.shape = shape
        super().__init__(
            f"Position {position} outside grid "
            f"[width: {shape[0]}, height: {shape[1]}]"
        )


class AlreadyOccupiedError(BoardError):
    """Insertion targets a cell that already holds an occupant or source."""

    def __init__(self, position: Any) -> None:
        self.position = position
        super().__init__(f"Position {position} is already occupied")


class NotOccupiedError(BoardError):
    """Removal or lookup targets a cell that holds nothing."""

    def __init__(self, position: Any) -> None:
        self.position = position
        super().__init__(f"Position {position} is not occupied")
