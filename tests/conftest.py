"""Root pytest configuration for all tests.

Provides small boards and bots shared across the board, kilobot and
infrastructure test packages. Import paths (domain.*, infrastructure.*,
shared.*) come from `pythonpath` in pyproject.toml.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from domain.board.board import Board
from domain.board.services import BoardController
from domain.board.signal_map import SignalMap
from domain.kilobot.value_objects import Kilobot


@pytest.fixture
def board() -> Board:
    """Empty 5x5 board."""
    return Board(5, 5)


@pytest.fixture
def controller(board: Board) -> BoardController:
    return BoardController(board)


@pytest.fixture
def signal_map() -> SignalMap:
    """Empty 5x5 signal map."""
    return SignalMap.new(5, 5)


@pytest.fixture
def make_bot() -> Callable[[int], Kilobot]:
    """Factory for Kilobots with a given uid."""

    def _make(uid: int) -> Kilobot:
        return Kilobot(uid=uid)

    return _make
