"""Enumerations used by the in-process bonsai game model."""

from __future__ import annotations

from enum import StrEnum


class BonsaiTileType(StrEnum):
    """Tile kinds that make up a bonsai tree.

    ``ANY`` is a wildcard printed on helper and master cards; it must be
    resolved to a concrete kind before a tile exists on a tree.
    """

    WOOD = "wood"
    LEAF = "leaf"
    FLOWER = "flower"
    FRUIT = "fruit"
    ANY = "any"


class PotColor(StrEnum):
    """Pot colours a player can be assigned."""

    RED = "red"
    BLUE = "blue"
    BLACK = "black"
    PURPLE = "purple"


class GoalTileType(StrEnum):
    """Patterns a goal tile asks the tree to show."""

    WOOD = "wood"
    LEAF = "leaf"
    FRUIT = "fruit"
    FLOWER = "flower"
    POSITION = "position"


class ParchmentCardType(StrEnum):
    """What a parchment card awards points for."""

    HELPER = "helper"
    MASTER = "master"
    GROWTH = "growth"
    WOOD = "wood"
    LEAF = "leaf"
    FRUIT = "fruit"
    FLOWER = "flower"
