#!/usr/bin/env python3
"""Replay the demo board scenario and print the board after each step.

Places the demo bots (one of them deliberately onto an occupied cell), adds
and removes a transient signal source, adds the main source, checks its
coverage, relocates it, and walks one bot forward until it hits the edge.

Usage:
    python scripts/run_demo.py [--width W] [--height H] [--verbose]

    W and H must be at least 5, the size the scenario coordinates assume.

Dependencies:
    Scenario constants come from shared/scenarios.py (not tests/) so the
    script and the scenario test replay exactly the same steps.
"""

from __future__ import annotations

import argparse
import logging

from domain.board.board import Board
from domain.board.errors import BoardError
from domain.board.services import BoardController
from domain.board.value_objects import EAST, CoordinatePair, SignalSource
from domain.kilobot.value_objects import Kilobot
from infrastructure.board.text_renderer import print_board
from shared.scenarios import (
    DEMO_BOTS,
    DEMO_HEIGHT,
    DEMO_WIDTH,
    MAIN_SOURCE,
    MAIN_SOURCE_COVERED,
    MAIN_SOURCE_UNCOVERED,
    MOVE_TARGET,
    TRANSIENT_SOURCE,
)

logger = logging.getLogger("run_demo")


def _at_least(minimum: int):
    """argparse type: integer no smaller than `minimum`."""

    def _parse(value: str) -> int:
        size = int(value)
        if size < minimum:
            raise argparse.ArgumentTypeError(
                f"{size} is too small for the demo scenario (minimum {minimum})"
            )
        return size

    return _parse


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    # Scenario coordinates in shared/scenarios.py assume at least a 5x5 board
    parser.add_argument("--width", type=_at_least(DEMO_WIDTH), default=DEMO_WIDTH)
    parser.add_argument("--height", type=_at_least(DEMO_HEIGHT), default=DEMO_HEIGHT)
    parser.add_argument(
        "--verbose", action="store_true", help="log every board mutation"
    )
    return parser.parse_args(argv)


def place_bots(board: Board) -> None:
    for uid, x, y, facing in DEMO_BOTS:
        try:
            board.place_bot(
                Kilobot(uid=uid), board.index_of(CoordinatePair(x=x, y=y)), facing
            )
        except BoardError as e:
            logger.info("Bot %d not placed: %s", uid, e)


def run_signals(board: Board) -> int:
    """Run the signal steps; return the number of failed coverage checks."""
    origin, radius = TRANSIENT_SOURCE
    transient = CoordinatePair.from_tuple(origin)
    board.add_source(SignalSource(origin=transient, radius=radius))
    board.remove_source(transient)
    logger.info("Transient source at %s added and removed", transient)

    origin, radius = MAIN_SOURCE
    main_origin = CoordinatePair.from_tuple(origin)
    board.add_source(SignalSource(origin=main_origin, radius=radius))
    print_board(board)

    failures = 0
    for xy in MAIN_SOURCE_COVERED:
        if main_origin not in board.coverage_at(CoordinatePair.from_tuple(xy)):
            logger.error("Expected %s to be covered by %s", xy, main_origin)
            failures += 1
    for xy in MAIN_SOURCE_UNCOVERED:
        if board.coverage_at(CoordinatePair.from_tuple(xy)):
            logger.error("Expected %s to be uncovered", xy)
            failures += 1

    moved = board.move_source(main_origin, CoordinatePair.from_tuple(MOVE_TARGET))
    logger.info("Source relocated to %s", moved.origin)
    print_board(board)
    return failures


def walk_east(board: Board, controller: BoardController, index: int) -> None:
    """Turn the bot at `index` east and step until the board edge stops it."""
    board.set_facing(index, EAST)
    while True:
        try:
            index = controller.move_forward(index)
        except BoardError as e:
            logger.info("Walk stopped at %s: %s", board.coord_of(index), e)
            return


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    board = Board(args.width, args.height)
    controller = BoardController(board)

    place_bots(board)
    print_board(board)

    failures = run_signals(board)

    _, x, y, _ = DEMO_BOTS[-1]
    walk_east(board, controller, board.index_of(CoordinatePair(x=x, y=y)))
    print_board(board)

    if failures:
        print(f"ERROR: {failures} coverage check(s) failed")
        return 1
    print("All coverage checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
