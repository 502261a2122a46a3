"""Dataclasses describing the bonsai entities that cross the wire boundary.

The rule engine owns richer state (trees, supplies, scores).  Only the
entities that are translated into wire messages are modelled here, as
immutable values so they can be shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass

from bonsai_wire.utils.hex_math import HexCoord

from .enums import BonsaiTileType, GoalTileType, ParchmentCardType, PotColor

# --- Zen cards ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GrowthCard:
    """Raises the number of tiles a player may place per cultivate."""

    tile: BonsaiTileType
    id: int


@dataclass(frozen=True, slots=True)
class HelperCard:
    """Lets the player place the listed tiles right away."""

    tiles: tuple[BonsaiTileType, ...]
    id: int


@dataclass(frozen=True, slots=True)
class MasterCard:
    """Grants the listed tiles into the player's supply."""

    tiles: tuple[BonsaiTileType, ...]
    id: int


@dataclass(frozen=True, slots=True)
class ParchmentCard:
    """End-of-game scoring card."""

    points: int
    type: ParchmentCardType
    id: int


@dataclass(frozen=True, slots=True)
class ToolCard:
    """Extends the player's supply capacity."""

    id: int
    capacity: int = 2


ZenCard = GrowthCard | HelperCard | MasterCard | ParchmentCard | ToolCard


# --- Board and setup values -----------------------------------------------------


@dataclass(frozen=True, slots=True)
class GoalTile:
    """A claimable goal; ``threshold`` is what the tree has to reach."""

    points: int
    threshold: int
    type: GoalTileType


@dataclass(frozen=True, slots=True)
class BonsaiTile:
    """A tile, optionally placed at ``coord`` on a tree."""

    type: BonsaiTileType
    coord: HexCoord | None = None


@dataclass(frozen=True, slots=True)
class PlayerSeat:
    """A player's name and pot colour, in turn order."""

    name: str
    color: PotColor
