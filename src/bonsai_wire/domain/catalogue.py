"""Fixed card and goal-tile catalogues shared by every peer.

Start-game messages refer to zen cards by their catalogue index only, so all
peers must agree on this exact list.  The catalogue is read-only process-wide
reference data.
"""

from __future__ import annotations

from types import MappingProxyType

from .enums import BonsaiTileType as T
from .enums import GoalTileType, ParchmentCardType
from .models import (
    GoalTile,
    GrowthCard,
    HelperCard,
    MasterCard,
    ParchmentCard,
    ToolCard,
    ZenCard,
)

TIERS_PER_GOAL = 3


class UnknownCardError(KeyError):
    """Raised when a catalogue index does not name a card."""


# Comments mark cards only used with 3 or 4 players.
CARD_CATALOGUE: tuple[ZenCard, ...] = (
    GrowthCard(T.WOOD, id=0),
    GrowthCard(T.WOOD, id=1),
    GrowthCard(T.LEAF, id=2),
    GrowthCard(T.LEAF, id=3),
    GrowthCard(T.FLOWER, id=4),
    GrowthCard(T.FLOWER, id=5),
    GrowthCard(T.FRUIT, id=6),
    GrowthCard(T.FRUIT, id=7),
    GrowthCard(T.WOOD, id=8),  # 3
    GrowthCard(T.LEAF, id=9),  # 3
    GrowthCard(T.LEAF, id=10),  # 3
    GrowthCard(T.FLOWER, id=11),  # 3
    GrowthCard(T.WOOD, id=12),  # 4
    GrowthCard(T.FRUIT, id=13),  # 4
    HelperCard((T.ANY, T.WOOD), id=14),
    HelperCard((T.ANY, T.WOOD), id=15),
    HelperCard((T.ANY, T.WOOD), id=16),
    HelperCard((T.ANY, T.LEAF), id=17),
    HelperCard((T.ANY, T.LEAF), id=18),
    HelperCard((T.ANY, T.FLOWER), id=19),
    HelperCard((T.ANY, T.FRUIT), id=20),
    MasterCard((T.WOOD, T.WOOD), id=21),
    MasterCard((T.LEAF, T.LEAF), id=22),
    MasterCard((T.WOOD, T.LEAF), id=23),
    MasterCard((T.ANY,), id=24),
    MasterCard((T.ANY,), id=25),
    MasterCard((T.LEAF, T.LEAF), id=26),
    MasterCard((T.LEAF, T.FRUIT), id=27),
    MasterCard((T.ANY,), id=28),  # 3
    MasterCard((T.WOOD, T.LEAF), id=29),  # 3
    MasterCard((T.WOOD, T.LEAF), id=30),  # 3
    MasterCard((T.WOOD, T.LEAF, T.FLOWER), id=31),  # 3
    MasterCard((T.WOOD, T.LEAF, T.FRUIT), id=32),  # 3
    MasterCard((T.LEAF, T.FLOWER, T.FLOWER), id=33),  # 4
    ParchmentCard(2, ParchmentCardType.MASTER, id=34),
    ParchmentCard(2, ParchmentCardType.GROWTH, id=35),
    ParchmentCard(2, ParchmentCardType.HELPER, id=36),
    ParchmentCard(2, ParchmentCardType.FLOWER, id=37),
    ParchmentCard(2, ParchmentCardType.FRUIT, id=38),
    ParchmentCard(1, ParchmentCardType.LEAF, id=39),
    ParchmentCard(1, ParchmentCardType.WOOD, id=40),
    ToolCard(id=41),
    ToolCard(id=42),
    ToolCard(id=43),
    ToolCard(id=44),  # 3
    ToolCard(id=45),  # 3
    ToolCard(id=46),  # 4
)


def _goal_tiers(goal_type: GoalTileType, *tiers: tuple[int, int]) -> tuple[GoalTile, ...]:
    return tuple(GoalTile(points=p, threshold=t, type=goal_type) for p, t in tiers)


# Tiles per type, ordered from the lowest tier (0) to the highest.
GOAL_CATALOGUE: MappingProxyType[GoalTileType, tuple[GoalTile, ...]] = MappingProxyType(
    {
        GoalTileType.WOOD: _goal_tiers(GoalTileType.WOOD, (5, 8), (10, 10), (15, 12)),
        GoalTileType.FRUIT: _goal_tiers(GoalTileType.FRUIT, (9, 3), (11, 4), (13, 5)),
        GoalTileType.LEAF: _goal_tiers(GoalTileType.LEAF, (6, 5), (9, 7), (12, 9)),
        GoalTileType.FLOWER: _goal_tiers(GoalTileType.FLOWER, (8, 3), (12, 4), (16, 5)),
        GoalTileType.POSITION: _goal_tiers(GoalTileType.POSITION, (7, 1), (10, 2), (14, 3)),
    }
)


def card_by_index(index: int) -> ZenCard:
    """Return the catalogue card at ``index``.

    Raises:
        UnknownCardError: If no card has that index
    """
    if not 0 <= index < len(CARD_CATALOGUE):
        raise UnknownCardError(f"No card with catalogue index {index}")
    return CARD_CATALOGUE[index]


def goal_tier(goal: GoalTile) -> int:
    """Return the 0-based tier of a catalogue goal tile."""
    try:
        return GOAL_CATALOGUE[goal.type].index(goal)
    except ValueError as exc:
        raise ValueError(f"{goal} is not a catalogue goal tile") from exc


def goal_tile_for(goal_type: GoalTileType, tier: int) -> GoalTile:
    """Return the catalogue goal tile of ``goal_type`` at ``tier``."""
    if not 0 <= tier < TIERS_PER_GOAL:
        raise ValueError(f"Goal tier must be in [0, {TIERS_PER_GOAL}), got {tier}")
    return GOAL_CATALOGUE[goal_type][tier]
