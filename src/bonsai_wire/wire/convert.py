"""Conversions between domain values and wire enumerations.

Each family has two functions with different guarantees:

* ``*_to_wire`` may fail when the domain has more variants than the wire
  (only the wildcard tile today).  Failure raises
  :class:`UnrepresentableValueError` and never substitutes a default.
* ``*_to_domain`` is total: anything a peer can send was produced by the
  matching ``*_to_wire``.
"""

from __future__ import annotations

import logging

from bonsai_wire.domain import catalogue
from bonsai_wire.domain import enums as de
from bonsai_wire.domain.models import (
    GrowthCard,
    HelperCard,
    MasterCard,
    ParchmentCard,
    ToolCard,
    ZenCard,
)

from .enums import CardType, ColorType, GoalTileType, GoalType, TileType
from .errors import MalformedMessageError, UnrepresentableValueError

logger = logging.getLogger(__name__)


_COLOR_TO_WIRE: dict[de.PotColor, ColorType] = {
    de.PotColor.PURPLE: ColorType.PURPLE,
    de.PotColor.RED: ColorType.RED,
    de.PotColor.BLACK: ColorType.BLACK,
    de.PotColor.BLUE: ColorType.BLUE,
}
_COLOR_TO_DOMAIN = {wire: color for color, wire in _COLOR_TO_WIRE.items()}

_GOAL_TILE_TO_WIRE: dict[de.GoalTileType, GoalTileType] = {
    de.GoalTileType.WOOD: GoalTileType.BROWN,
    de.GoalTileType.LEAF: GoalTileType.GREEN,
    de.GoalTileType.FRUIT: GoalTileType.ORANGE,
    de.GoalTileType.FLOWER: GoalTileType.PINK,
    de.GoalTileType.POSITION: GoalTileType.BLUE,
}
_GOAL_TILE_TO_DOMAIN = {wire: goal for goal, wire in _GOAL_TILE_TO_WIRE.items()}

_GOAL_TYPE_TO_WIRE: dict[de.GoalTileType, GoalType] = {
    goal: GoalType(wire.value) for goal, wire in _GOAL_TILE_TO_WIRE.items()
}
_GOAL_TYPE_TO_DOMAIN = {wire: goal for goal, wire in _GOAL_TYPE_TO_WIRE.items()}

_TILE_TO_WIRE: dict[de.BonsaiTileType, TileType] = {
    de.BonsaiTileType.WOOD: TileType.WOOD,
    de.BonsaiTileType.LEAF: TileType.LEAF,
    de.BonsaiTileType.FLOWER: TileType.FLOWER,
    de.BonsaiTileType.FRUIT: TileType.FRUIT,
}
_TILE_TO_DOMAIN = {wire: tile for tile, wire in _TILE_TO_WIRE.items()}


def card_to_wire(card: ZenCard) -> CardType:
    """Classify a zen card by its kind."""
    match card:
        case GrowthCard():
            return CardType.GROWTH
        case HelperCard():
            return CardType.HELPER
        case MasterCard():
            return CardType.MASTER
        case ParchmentCard():
            return CardType.PARCHMENT
        case ToolCard():
            return CardType.TOOL
        case _:
            raise TypeError(f"Unhandled zen card variant: {type(card).__name__}")


def card_to_domain(card_type: CardType, index: int) -> ZenCard:
    """Resolve a ``(card type, catalogue index)`` pair to its card.

    Raises:
        MalformedMessageError: If the index is unknown or names a card of
            another kind
    """
    try:
        card = catalogue.card_by_index(index)
    except catalogue.UnknownCardError as exc:
        raise MalformedMessageError(f"Unknown card index {index}") from exc
    actual = card_to_wire(card)
    if actual is not card_type:
        raise MalformedMessageError(
            f"Card {index} is a {actual.name} card, message says {card_type.name}"
        )
    return card


def color_to_wire(color: de.PotColor) -> ColorType:
    return _COLOR_TO_WIRE[color]


def color_to_domain(color: ColorType) -> de.PotColor:
    return _COLOR_TO_DOMAIN[color]


def goal_tile_to_wire(goal: de.GoalTileType) -> GoalTileType:
    return _GOAL_TILE_TO_WIRE[goal]


def goal_tile_to_domain(goal: GoalTileType) -> de.GoalTileType:
    return _GOAL_TILE_TO_DOMAIN[goal]


def goal_type_to_wire(goal: de.GoalTileType) -> GoalType:
    return _GOAL_TYPE_TO_WIRE[goal]


def goal_type_to_domain(goal: GoalType) -> de.GoalTileType:
    return _GOAL_TYPE_TO_DOMAIN[goal]


def tile_to_wire(tile: de.BonsaiTileType) -> TileType:
    """Convert a concrete tile kind.

    Raises:
        UnrepresentableValueError: For the ``ANY`` wildcard
    """
    wire = _TILE_TO_WIRE.get(tile)
    if wire is None:
        logger.error("Refusing to send unresolved %s tile", tile.name)
        raise UnrepresentableValueError(f"Can't send {tile.name} tile.")
    return wire


def tile_to_domain(tile: TileType) -> de.BonsaiTileType:
    return _TILE_TO_DOMAIN[tile]
