"""Tests for the Kilobot value object."""

from __future__ import annotations

import pydantic
import pytest

from domain.board.ports import BotIdentity
from domain.kilobot.value_objects import Kilobot


def test_kilobot_satisfies_bot_identity():
    assert isinstance(Kilobot(uid=3), BotIdentity)


def test_kilobot_equality_by_value():
    assert Kilobot(uid=3) == Kilobot(uid=3)
    assert Kilobot(uid=3) != Kilobot(uid=4)


def test_kilobot_str():
    assert str(Kilobot(uid=12)) == "(UID:12)"


@pytest.mark.parametrize("kwargs", [{"uid": -1}, {"uid": 1, "body_radius": 0}])
def test_kilobot_invalid(kwargs):
    with pytest.raises(pydantic.ValidationError):
        Kilobot(**kwargs)
