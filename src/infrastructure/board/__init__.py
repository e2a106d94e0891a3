"""Infrastructure adapters for the board bounded context.

This module provides console-facing helpers for the board, rendering its
overlays as plain text for debugging.
"""

from .text_renderer import print_board, render_board

__all__ = ["print_board", "render_board"]
