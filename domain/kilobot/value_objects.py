"""Kilobot Bounded Context - Value Objects.

Identity of a physical Kilobot as seen by the board. Actuator state (motor
duty cycles, LED colour, transceiver callbacks) belongs to the robot itself
and is not modelled here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Kilobot(BaseModel):
    """Kilobot handle (Value Object).

    Satisfies domain.board.ports.BotIdentity.

    Invariants:
        KB-1: uid >= 0
        KB-2: body_radius > 0 (millimetres, informational only)
    """

    uid: int = Field(ge=0)
    body_radius: int = Field(default=16, gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"(UID:{self.uid})"
