"""Text renderer for Board overlays.

Debug view of a Board: row-major, top row first, left to right within a row,
one token per cell.

Bot overlay tokens:
    <uid>   cell holds a bot (BotIdentity uid, else str(bot))
    .       empty cell

Signal overlay tokens:
    S       cell holds a signal source
    +       cell is covered by at least one source but holds none
    .       neither

Rendering reads through the public overlay API and never raises for an empty
or partially filled board.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from domain.board.board import Board
from domain.board.occupancy_map import OccupancyMap
from domain.board.ports import BotIdentity
from domain.board.signal_map import SignalMap

EMPTY_TOKEN = "."
SOURCE_TOKEN = "S"
COVERED_TOKEN = "+"


def bot_token(bot: Any) -> str:
    """Short token for a bot: its uid when it has one."""
    if isinstance(bot, BotIdentity):
        return str(bot.uid)
    return str(bot)


def _join_rows(rows: list[list[str]]) -> str:
    # Pad to the widest token so columns stay aligned with multi-digit uids
    cell_width = max((len(t) for row in rows for t in row), default=1)
    return "\n".join(" ".join(t.rjust(cell_width) for t in row) for row in rows)


def render_bot_map(bot_map: OccupancyMap) -> str:
    grid = bot_map.grid
    rows: list[list[str]] = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            index = x + y * grid.width
            if bot_map.is_occupied(index):
                row.append(bot_token(bot_map.get_bot(index)))
            else:
                row.append(EMPTY_TOKEN)
        rows.append(row)
    return _join_rows(rows)


def render_signal_map(signal_map: SignalMap) -> str:
    rows: list[list[str]] = []
    for coord in signal_map.grid.iter_coords():
        if coord.x == 0:
            rows.append([])
        if signal_map.has_source(coord):
            rows[-1].append(SOURCE_TOKEN)
        elif signal_map.is_covered(coord):
            rows[-1].append(COVERED_TOKEN)
        else:
            rows[-1].append(EMPTY_TOKEN)
    return _join_rows(rows)


def render_board(board: Board) -> str:
    """Summary line followed by the bot overlay and the signal overlay."""
    return (
        f"{board}\n"
        f"Bots:\n{render_bot_map(board.bot_map)}\n"
        f"Signals:\n{render_signal_map(board.signal_map)}"
    )


def print_board(board: Board, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(render_board(board) + "\n")
