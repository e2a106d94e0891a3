"""Single source of truth for the demo board scenario.

This module defines the steps and expectations used by both:
- scripts/run_demo.py (prints the board after each step)
- tests/test_scenario.py (asserts the expectations)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

Coordinates are plain (x, y) tuples so this module stays dependency-free.
"""

from __future__ import annotations

DEMO_WIDTH: int = 5
DEMO_HEIGHT: int = 5

# (uid, x, y, facing) - the second bot targets an occupied cell on purpose
DEMO_BOTS: list[tuple[int, int, int, int]] = [
    (1, 0, 0, 0),
    (2, 0, 0, 0),
    (3, 2, 2, 0),
]

# Added then removed straight away; must leave no residue
TRANSIENT_SOURCE: tuple[tuple[int, int], float] = ((0, 1), 1.5)

MAIN_SOURCE: tuple[tuple[int, int], float] = ((2, 2), 2.0)
MAIN_SOURCE_COVERED: list[tuple[int, int]] = [(2, 0), (0, 2), (4, 2), (2, 4)]
MAIN_SOURCE_UNCOVERED: list[tuple[int, int]] = [(0, 0)]

MOVE_TARGET: tuple[int, int] = (3, 3)
# (4,4) and its in-grid neighbours, all within radius 2.0 of (3,3)
MOVED_SOURCE_COVERED: list[tuple[int, int]] = [(4, 4), (3, 4), (4, 3)]
