"""Assemble messages from domain values and read them back.

Outgoing: the rule engine records a turn in a :class:`TurnRecord` while the
player acts; once the move is final the record is frozen into a message.

Incoming: a received message is turned back into domain values
(:class:`GameSetup`, :class:`TurnEffect`) for the rule engine to apply.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from bonsai_wire.domain import catalogue
from bonsai_wire.domain.enums import BonsaiTileType, GoalTileType
from bonsai_wire.domain.models import BonsaiTile, GoalTile, PlayerSeat, ZenCard
from bonsai_wire.utils.hex_math import HexCoord

from . import convert
from .errors import MalformedMessageError
from .messages import (
    FACE_UP_CARDS,
    NO_CARD_CHOSEN,
    CultivateMessage,
    GoalRef,
    MeditateMessage,
    PlacedTile,
    StartGameMessage,
)

logger = logging.getLogger(__name__)

# Face-up slots that hand out tiles in addition to their card.
SLOT_BONUS_TILES: dict[int, tuple[BonsaiTileType, ...]] = {
    2: (BonsaiTileType.WOOD, BonsaiTileType.FLOWER),
    3: (BonsaiTileType.FRUIT, BonsaiTileType.LEAF),
}


@dataclass(slots=True)
class TurnRecord:
    """Everything a player did during the current turn.

    ``goals`` pairs each decided goal tile with ``True`` when it was claimed
    and ``False`` when it was renounced.
    """

    removed_tiles: list[HexCoord] = field(default_factory=list)
    card_index: int = NO_CARD_CHOSEN
    placed_tiles: list[tuple[BonsaiTileType, HexCoord]] = field(default_factory=list)
    drawn_tiles: list[BonsaiTileType] = field(default_factory=list)
    goals: list[tuple[GoalTile, bool]] = field(default_factory=list)
    discarded_tiles: list[BonsaiTileType] = field(default_factory=list)

    def clear(self) -> None:
        """Reset the record so it can be reused for the next turn."""
        self.removed_tiles.clear()
        self.card_index = NO_CARD_CHOSEN
        self.placed_tiles.clear()
        self.drawn_tiles.clear()
        self.goals.clear()
        self.discarded_tiles.clear()

    def record_drawn_from_slot(self, card_index: int) -> None:
        """Add the bonus tiles granted by taking the card at ``card_index``."""
        self.drawn_tiles.extend(SLOT_BONUS_TILES.get(card_index, ()))


@dataclass(frozen=True, slots=True)
class GameSetup:
    """Domain view of a start-game message."""

    seats: tuple[PlayerSeat, ...]
    goal_types: tuple[GoalTileType, ...]
    draw_stack: tuple[ZenCard, ...]
    revealed_cards: tuple[ZenCard, ...]


@dataclass(frozen=True, slots=True)
class TurnEffect:
    """Domain view of a cultivate or meditate message."""

    removed_tiles: tuple[HexCoord, ...]
    placed_tiles: tuple[BonsaiTile, ...]
    claimed_goals: tuple[GoalTile, ...]
    renounced_goals: tuple[GoalTile, ...]
    chosen_card_position: int | None = None
    drawn_tiles: tuple[BonsaiTileType, ...] = ()
    discarded_tiles: tuple[BonsaiTileType, ...] = ()


# --- Outgoing -------------------------------------------------------------------


def _placed(record: TurnRecord) -> list[PlacedTile]:
    return [(convert.tile_to_wire(tile), coord.as_pair()) for tile, coord in record.placed_tiles]


def _split_goals(goals: Iterable[tuple[GoalTile, bool]]) -> tuple[list[GoalRef], list[GoalRef]]:
    claimed: list[GoalRef] = []
    renounced: list[GoalRef] = []
    for goal, was_claimed in goals:
        ref = (convert.goal_tile_to_wire(goal.type), catalogue.goal_tier(goal))
        (claimed if was_claimed else renounced).append(ref)
    return claimed, renounced


def cultivate_message(record: TurnRecord) -> CultivateMessage:
    """Freeze a cultivate turn into its message."""

    claimed, renounced = _split_goals(record.goals)
    message = CultivateMessage(
        removed_tiles_axial_coordinates=[coord.as_pair() for coord in record.removed_tiles],
        played_tiles=_placed(record),
        claimed_goals=claimed,
        renounced_goals=renounced,
    )
    logger.debug("Built cultivate message: %s", message)
    return message


def meditate_message(record: TurnRecord) -> MeditateMessage:
    """Freeze a meditate turn into its message."""

    claimed, renounced = _split_goals(record.goals)
    message = MeditateMessage(
        removed_tiles_axial_coordinates=[coord.as_pair() for coord in record.removed_tiles],
        chosen_card_position=record.card_index,
        played_tiles=_placed(record),
        drawn_tiles=[convert.tile_to_wire(tile) for tile in record.drawn_tiles],
        claimed_goals=claimed,
        renounced_goals=renounced,
        discarded_tiles=[convert.tile_to_wire(tile) for tile in record.discarded_tiles],
    )
    logger.debug("Built meditate message: %s", message)
    return message


def start_game_message(
    seats: Sequence[PlayerSeat],
    goal_types: Sequence[GoalTileType],
    draw_stack: Sequence[ZenCard],
    center_cards: Sequence[ZenCard | None],
) -> StartGameMessage:
    """Describe a freshly dealt game.

    ``draw_stack`` runs from bottom to top; ``center_cards`` are the face-up
    cards from left to right and are appended after it.
    """

    if any(card is None for card in center_cards):
        raise ValueError("All face-up slots must hold a card when the game starts")
    deck = [*draw_stack, *center_cards]
    message = StartGameMessage(
        ordered_player_names=[(seat.name, convert.color_to_wire(seat.color)) for seat in seats],
        chosen_goal_tiles=[convert.goal_tile_to_wire(goal) for goal in goal_types],
        ordered_cards=[(convert.card_to_wire(card), card.id) for card in deck],
    )
    logger.debug("Built start game message:\n%s", message)
    return message


# --- Incoming -------------------------------------------------------------------


def _goal_tiles(refs: Iterable[GoalRef]) -> tuple[GoalTile, ...]:
    goals = []
    for wire_goal, tier in refs:
        try:
            goals.append(catalogue.goal_tile_for(convert.goal_tile_to_domain(wire_goal), tier))
        except ValueError as exc:
            raise MalformedMessageError(str(exc)) from exc
    return tuple(goals)


def _bonsai_tiles(tiles: Iterable[PlacedTile]) -> tuple[BonsaiTile, ...]:
    return tuple(
        BonsaiTile(convert.tile_to_domain(tile), HexCoord.from_pair(coord)) for tile, coord in tiles
    )


def start_game_setup(message: StartGameMessage) -> GameSetup:
    """Rebuild the dealt game from a start-game message.

    Raises:
        MalformedMessageError: If a card entry does not match the catalogue
    """

    cards = [convert.card_to_domain(card_type, index) for card_type, index in message.ordered_cards]
    split = max(len(cards) - FACE_UP_CARDS, 0)
    return GameSetup(
        seats=tuple(
            PlayerSeat(name, convert.color_to_domain(color))
            for name, color in message.ordered_player_names
        ),
        goal_types=tuple(convert.goal_tile_to_domain(goal) for goal in message.chosen_goal_tiles),
        draw_stack=tuple(cards[:split]),
        revealed_cards=tuple(cards[split:]),
    )


def turn_effect(message: CultivateMessage | MeditateMessage) -> TurnEffect:
    """Rebuild the domain effect of a received turn.

    Raises:
        MalformedMessageError: If a goal reference names no catalogue tile
        TypeError: If ``message`` is not a cultivate or meditate message
    """

    match message:
        case CultivateMessage():
            return TurnEffect(*_shared_effect(message))
        case MeditateMessage():
            position = message.chosen_card_position
            return TurnEffect(
                *_shared_effect(message),
                chosen_card_position=None if position == NO_CARD_CHOSEN else position,
                drawn_tiles=tuple(convert.tile_to_domain(tile) for tile in message.drawn_tiles),
                discarded_tiles=tuple(
                    convert.tile_to_domain(tile) for tile in message.discarded_tiles
                ),
            )
        case _:
            raise TypeError(f"Not a turn message: {type(message).__name__}")


def _shared_effect(
    message: CultivateMessage | MeditateMessage,
) -> tuple[tuple[HexCoord, ...], tuple[BonsaiTile, ...], tuple[GoalTile, ...], tuple[GoalTile, ...]]:
    removed = tuple(HexCoord.from_pair(pair) for pair in message.removed_tiles_axial_coordinates)
    return (
        removed,
        _bonsai_tiles(message.played_tiles),
        _goal_tiles(message.claimed_goals),
        _goal_tiles(message.renounced_goals),
    )
