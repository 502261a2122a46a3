"""Wire enumerations exchanged between peers.

These sets are deliberately flatter than the domain model: they say which
kind of thing is meant without exposing how the rule engine represents it.
Values equal names so a payload stays readable.  Adding or renaming a member
changes the protocol and has to be rolled out to every peer at once.
"""

from __future__ import annotations

from enum import StrEnum


class CardType(StrEnum):
    """Kinds of zen card."""

    TOOL = "TOOL"
    GROWTH = "GROWTH"
    PARCHMENT = "PARCHMENT"
    HELPER = "HELPER"
    MASTER = "MASTER"


class ColorType(StrEnum):
    """Pot colours."""

    PURPLE = "PURPLE"
    BLACK = "BLACK"
    BLUE = "BLUE"
    RED = "RED"


class GoalTileType(StrEnum):
    """Goal tiles, named after the colour printed on them."""

    GREEN = "GREEN"
    BROWN = "BROWN"
    PINK = "PINK"
    ORANGE = "ORANGE"
    BLUE = "BLUE"


class GoalType(StrEnum):
    """Goal categories; same colour vocabulary as :class:`GoalTileType`."""

    GREEN = "GREEN"
    BROWN = "BROWN"
    PINK = "PINK"
    ORANGE = "ORANGE"
    BLUE = "BLUE"


class TileType(StrEnum):
    """Concrete tile kinds; there is no wildcard on the wire."""

    WOOD = "WOOD"
    LEAF = "LEAF"
    FLOWER = "FLOWER"
    FRUIT = "FRUIT"
