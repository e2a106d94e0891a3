"""Board Bounded Context - Grid Indexing.

Every overlay on the board stores its cells in a dense, row-major list. This
module owns the single mapping between (x, y) coordinates and linear indices:

    index = x + y * width
    x = index % width
    y = (index - x) // width

The mapping is bijective over [0, width * height). Overlays embed a GridIndex
rather than inheriting from one, so any overlay can reuse it regardless of
what it stores.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from domain.board.errors import OutOfBoundsError
from domain.board.value_objects import CoordinatePair


class GridIndex(BaseModel):
    """Width x height index space (Value Object).

    Pure functions of (width, height); no side effects.
    """

    width: int = Field(ge=1)
    height: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __len__(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """Check a signed (x, y) position against the grid (no raise)."""
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, coord: CoordinatePair) -> int:
        """Convert a coordinate to its linear index.

        Raises:
            OutOfBoundsError: If coord.x >= width or coord.y >= height
        """
        if not self.contains(coord.x, coord.y):
            raise OutOfBoundsError(coord, self.shape)
        return coord.x + coord.y * self.width

    def coord_of(self, index: int) -> CoordinatePair:
        """Convert a linear index back to its coordinate.

        Raises:
            OutOfBoundsError: If index is negative or >= width * height
        """
        self.check_index(index)
        x = index % self.width
        y = (index - x) // self.width
        return CoordinatePair(x=x, y=y)

    def check_index(self, index: int) -> int:
        """Return `index` unchanged if valid, otherwise raise OutOfBoundsError."""
        if not 0 <= index < len(self):
            raise OutOfBoundsError(index, self.shape)
        return index

    def iter_coords(self) -> Iterator[CoordinatePair]:
        """Yield every coordinate in row-major order (top row first)."""
        for y in range(self.height):
            for x in range(self.width):
                yield CoordinatePair(x=x, y=y)
