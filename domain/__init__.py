"""Kilobot Board Domain Layer.

This package contains the core logic organized by bounded contexts:
- board: Grid indexing, bot occupancy, signal coverage, movement
- kilobot: Identity of the robots placed on the board
"""

# Imports alphabetized per project style (isort)
from domain import board, kilobot

__all__ = ["board", "kilobot"]
