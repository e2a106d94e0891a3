"""Board Bounded Context - Signal Map.

Two parallel overlays sharing one index space:

- source slots: at most one SignalSource per cell (None when empty)
- coverage: for every cell, the set of source origins whose broadcast circle
  reaches it (dense-initialised with empty sets)

Coverage is maintained incrementally. Adding a source inserts its origin into
every cell of its footprint; removing it recomputes the same footprint from the
stored radius and erases the origin from exactly those cells. Coverage cells
are sets keyed by origin, so overlapping circles never produce duplicates and
removing one source leaves every other origin untouched.

Footprint cost is proportional to the clamped bounding-box area, i.e. O(r^2)
per add/remove/move, independent of grid size.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

import numpy as np

from domain.board.errors import AlreadyOccupiedError, NotOccupiedError
from domain.board.grid import GridIndex
from domain.board.value_objects import CoordinatePair, SignalSource

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helper: Bounding Box
# ---------------------------------------------------------------------------
def _axis_range(center: int, radius: float, size: int) -> tuple[int, int]:
    """Half-open [lo, hi) range of integer cells within `radius` of `center`.

    Low edge clamps with max(0, ...), high edge with min(size, ...). The high
    edge is floor(center + radius) + 1 so a cell at exactly `radius` is kept.
    """
    lo = max(0, math.ceil(center - radius))
    hi = min(size, math.floor(center + radius) + 1)
    return lo, hi


class SignalMap:
    """Signal source and coverage overlays.

    Parameters
    ----------
    grid: GridIndex
        Shared index space; both overlays are sized from it at construction.
    """

    def __init__(self, grid: GridIndex) -> None:
        self.grid = grid
        n = len(grid)
        self._sources: list[SignalSource | None] = [None] * n
        self._coverage: list[set[CoordinatePair]] = [set() for _ in range(n)]

    @classmethod
    def new(cls, width: int, height: int) -> "SignalMap":
        return cls(GridIndex(width=width, height=height))

    # ------------------------------------------------------------------
    # Footprint
    # ------------------------------------------------------------------
    def footprint(self, origin: CoordinatePair, radius: float) -> tuple[int, ...]:
        """Return indices of every grid cell inside the circle, row-major.

        Membership is the inclusive test (cx - tx)^2 + (cy - ty)^2 <= r^2 in
        real arithmetic. Cells outside the grid are skipped silently.

        Args:
            origin: Circle center
            radius: Non-negative radius in cell units

        Returns:
            Tuple of linear indices (empty if the box clamps away entirely)
        """
        # Nothing lies further than the grid diagonal; keeps r * r finite
        radius = min(float(radius), math.hypot(self.grid.width, self.grid.height))
        x_lo, x_hi = _axis_range(origin.x, radius, self.grid.width)
        y_lo, y_hi = _axis_range(origin.y, radius, self.grid.height)
        if x_lo >= x_hi or y_lo >= y_hi:
            return ()

        ys, xs = np.ogrid[y_lo:y_hi, x_lo:x_hi]
        dist_sq = (xs - origin.x) ** 2 + (ys - origin.y) ** 2
        rows, cols = np.nonzero(dist_sq <= radius**2)

        # np.nonzero walks the box row-major, matching the board's layout
        indices = (cols + x_lo) + (rows + y_lo) * self.grid.width
        return tuple(int(i) for i in indices)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_source(self, source: SignalSource) -> None:
        """Store `source` at its origin and cover its footprint.

        Raises:
            OutOfBoundsError: If source.origin is outside the grid
            AlreadyOccupiedError: If the origin cell already holds a source
        """
        index = self.grid.index_of(source.origin)
        if self._sources[index] is not None:
            raise AlreadyOccupiedError(source.origin)

        cells = self.footprint(source.origin, source.radius)
        for cell in cells:
            self._coverage[cell].add(source.origin)
        self._sources[index] = source
        logger.debug("Added %s covering %d cells", source, len(cells))

    def remove_source(self, coord: CoordinatePair) -> SignalSource:
        """Remove the source at `coord` and erase its origin from coverage.

        Raises:
            OutOfBoundsError: If coord is outside the grid
            NotOccupiedError: If no source sits at coord
        """
        index = self.grid.index_of(coord)
        source = self._sources[index]
        if source is None:
            raise NotOccupiedError(coord)

        cells = self.footprint(source.origin, source.radius)
        for cell in cells:
            self._coverage[cell].discard(source.origin)
        self._sources[index] = None
        logger.debug("Removed %s from %d cells", source, len(cells))
        return source

    def move_source(
        self, from_coord: CoordinatePair, to_coord: CoordinatePair
    ) -> SignalSource:
        """Relocate a source, keeping its radius.

        The destination is checked before anything is removed, so a refused
        move leaves both endpoints and all coverage untouched.

        Raises:
            OutOfBoundsError: If either coordinate is outside the grid
            AlreadyOccupiedError: If to_coord already holds a source
            NotOccupiedError: If from_coord holds no source

        Returns:
            The source at its new origin
        """
        self.grid.index_of(from_coord)
        to_index = self.grid.index_of(to_coord)
        if self._sources[to_index] is not None:
            raise AlreadyOccupiedError(to_coord)

        moved = self.remove_source(from_coord).moved_to(to_coord)
        self.add_source(moved)
        return moved

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_source(self, coord: CoordinatePair) -> SignalSource:
        """Return the source at `coord`.

        Raises:
            OutOfBoundsError: If coord is outside the grid
            NotOccupiedError: If no source sits at coord
        """
        source = self._sources[self.grid.index_of(coord)]
        if source is None:
            raise NotOccupiedError(coord)
        return source

    def has_source(self, coord: CoordinatePair) -> bool:
        return self._sources[self.grid.index_of(coord)] is not None

    def coverage_at(self, coord: CoordinatePair) -> tuple[CoordinatePair, ...]:
        """Return origins covering `coord`, sorted by (x, y).

        An uncovered cell yields an empty tuple.
        """
        origins = self._coverage[self.grid.index_of(coord)]
        return tuple(sorted(origins, key=CoordinatePair.sort_key))

    def is_covered(self, coord: CoordinatePair) -> bool:
        return bool(self._coverage[self.grid.index_of(coord)])

    def sources(self) -> Iterator[SignalSource]:
        """Yield stored sources in row-major order of their origins."""
        for source in self._sources:
            if source is not None:
                yield source

    def __len__(self) -> int:
        return len(self.grid)

    def __str__(self) -> str:
        return (
            f"(width:{self.grid.width}, height:{self.grid.height}, "
            f"number of sources:{sum(1 for _ in self.sources())})"
        )
