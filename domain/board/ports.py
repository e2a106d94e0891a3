"""Domain Port(s) for bots placed on the board.

The board treats a bot as an opaque handle. The actuator model (motors, LED,
transceiver) lives outside this context; all the board needs is an identity it
can show in debug output.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BotIdentity(Protocol):
    """Anything that can sit in an occupancy cell.

    Implementations live outside the board context (e.g. domain.kilobot).
    """

    @property
    def uid(self) -> int:
        """Stable identifier used as the bot's token in text renderings."""
        ...
