"""Board Bounded Context - Value Objects.

Immutable data structures placed on, or addressing, the board grid.
All validation occurs at construction time via Pydantic.

Bounds are contextual: a CoordinatePair only knows it is non-negative. Whether
it lies inside a particular grid is decided by that grid's GridIndex.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Facing Constants (degrees clockwise from north)
# ---------------------------------------------------------------------------
NORTH = 0
EAST = 90
SOUTH = 180
WEST = 270
FULL_TURN_DEG = 360


def normalize_facing(angle: int) -> int:
    """Wrap any signed angle into [0, 360).

    Python's modulo already returns a non-negative result for a positive
    divisor, so -90 becomes 270 without a separate branch.
    """
    return int(angle) % FULL_TURN_DEG


# ---------------------------------------------------------------------------
# CoordinatePair
# ---------------------------------------------------------------------------
class CoordinatePair(BaseModel):
    """(x, y) cell address on a grid (Value Object).

    x grows to the east, y grows to the south; (0, 0) is the top-left cell.

    Note on __eq__ and __hash__: Pydantic frozen models compare and hash by
    value, so pairs can be used directly as set members and dict keys.
    """

    x: int = Field(ge=0)
    y: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_tuple(cls, xy: tuple[int, int]) -> "CoordinatePair":
        return cls(x=xy[0], y=xy[1])

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def as_array(self) -> NDArray[np.int64]:
        """Return [x, y] as a numpy vector (for vectorised distance math)."""
        return np.array([self.x, self.y], dtype=np.int64)

    def offset(self, dx: int, dy: int) -> tuple[int, int]:
        """Return the raw (x + dx, y + dy) position.

        The result may be negative, so it is returned as a plain tuple and
        must be bounds-checked before being turned back into a pair.
        """
        return (self.x + dx, self.y + dy)

    def sort_key(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


# ---------------------------------------------------------------------------
# BotOccupant
# ---------------------------------------------------------------------------
class BotOccupant(BaseModel):
    """A bot sitting in exactly one cell, with the direction it faces.

    Invariants:
        BO-1: 0 <= facing < 360
        BO-2: bot is an opaque handle; the board never inspects it beyond
              formatting it for debug output
    """

    bot: Any
    facing: int = Field(default=NORTH, ge=0, lt=FULL_TURN_DEG)

    model_config = ConfigDict(frozen=True)

    def with_facing(self, angle: int) -> "BotOccupant":
        """Return a copy facing `angle`, normalised into [0, 360)."""
        return self.model_copy(update={"facing": normalize_facing(angle)})

    def turned(self, degrees: int) -> "BotOccupant":
        """Return a copy rotated clockwise by `degrees` (negative turns left)."""
        return self.with_facing(self.facing + degrees)

    def __str__(self) -> str:
        return f"[Bot: {self.bot}, Facing: {self.facing}]"


# ---------------------------------------------------------------------------
# SignalSource
# ---------------------------------------------------------------------------
class SignalSource(BaseModel):
    """Point broadcaster with a circular range, in cell units.

    Invariants:
        SS-1: 0 <= radius < inf
        SS-2: at most one source per cell (enforced by SignalMap)
    """

    origin: CoordinatePair
    radius: float = Field(ge=0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)

    def moved_to(self, origin: CoordinatePair) -> "SignalSource":
        """Return the same broadcaster relocated to `origin`."""
        return self.model_copy(update={"origin": origin})

    def __str__(self) -> str:
        return f"[Source: {self.origin}, Radius: {self.radius:g}]"
