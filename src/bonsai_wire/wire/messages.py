"""Action messages exchanged between peers.

A message is built once, when a move is final, and never changes afterwards.
Models only check shape (field presence, pair arity, enum tags); whether a
move is legal is decided by the rule engine.

Coordinates are axial ``(q, r)`` pairs relative to the tree root at
``(0, 0)``.  Goals are ``(goal tile, tier)`` pairs with a 0-based tier.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import CardType, ColorType, GoalTileType, TileType

FACE_UP_CARDS = 4
NO_CARD_CHOSEN = -1
GOAL_TIERS = 3

AxialPair = tuple[int, int]
PlacedTile = tuple[TileType, AxialPair]
GoalRef = tuple[GoalTileType, int]
SeatEntry = tuple[str, ColorType]
DeckEntry = tuple[CardType, int]


class WireMessage(BaseModel):
    """Base for every message: immutable, strict about unknown fields."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @abstractmethod
    def describe(self) -> str:
        """Return the human-readable summary used in logs."""

    def __str__(self) -> str:
        return self.describe()


def _pair(coord: AxialPair) -> str:
    q, r = coord
    return f"({q}, {r})"


def _listing(items: list[str]) -> str:
    return "[" + ", ".join(items) + "]"


def _tier_label(goal: GoalRef) -> str:
    tile, tier = goal
    return f"{tile.name} as Tier {tier + 1}/{GOAL_TIERS}"


class CultivateMessage(WireMessage):
    """Sent when a player finishes a cultivate turn."""

    kind: Literal["cultivate"] = "cultivate"
    removed_tiles_axial_coordinates: tuple[AxialPair, ...]
    played_tiles: tuple[PlacedTile, ...]
    claimed_goals: tuple[GoalRef, ...]
    renounced_goals: tuple[GoalRef, ...]

    def describe(self) -> str:
        removed = ", ".join(_pair(coord) for coord in self.removed_tiles_axial_coordinates)
        played = ", ".join(f"{tile.name} {_pair(coord)}" for tile, coord in self.played_tiles)
        claimed = ", ".join(f"{goal.name} ({tier})" for goal, tier in self.claimed_goals)
        renounced = ", ".join(f"{goal.name} ({tier})" for goal, tier in self.renounced_goals)
        return (
            "Played Cultivate:"
            f"\n\tremoved tiles: {removed}"
            f"\n\tplayed tiles: {played}"
            f"\n\tclaimed goals: {claimed}"
            f"\n\trenounced goals: {renounced}"
        )


class MeditateMessage(WireMessage):
    """Sent when a player finishes a meditate turn.

    ``chosen_card_position`` counts face-up cards from the left and should
    satisfy ``0 <= position < FACE_UP_CARDS``; ``NO_CARD_CHOSEN`` marks a
    turn without a card.  ``drawn_tiles`` lists tiles gained from the chosen
    card or its slot; ``discarded_tiles`` the tiles returned to the supply
    because storage was full.
    """

    kind: Literal["meditate"] = "meditate"
    removed_tiles_axial_coordinates: tuple[AxialPair, ...]
    chosen_card_position: int
    played_tiles: tuple[PlacedTile, ...]
    drawn_tiles: tuple[TileType, ...]
    claimed_goals: tuple[GoalRef, ...]
    renounced_goals: tuple[GoalRef, ...]
    discarded_tiles: tuple[TileType, ...]

    @property
    def is_pass(self) -> bool:
        """True when no card was taken and no list field carries anything."""
        return self.chosen_card_position == NO_CARD_CHOSEN and not (
            self.removed_tiles_axial_coordinates
            or self.played_tiles
            or self.drawn_tiles
            or self.claimed_goals
            or self.renounced_goals
            or self.discarded_tiles
        )

    def describe(self) -> str:
        if self.is_pass:
            return "Did nothing (Pass)."

        lines: list[str] = []
        if self.removed_tiles_axial_coordinates:
            prunes = [_pair(coord) for coord in self.removed_tiles_axial_coordinates]
            lines.append(f"Pruned tiles at {_listing(prunes)}.")
        if self.chosen_card_position != NO_CARD_CHOSEN:
            lines.append(f"Drawn Card at position {self.chosen_card_position}.")
        if self.played_tiles:
            plays = [f"{tile.name}@{_pair(coord)}" for tile, coord in self.played_tiles]
            lines.append(f"Played tiles from Helper Card: {' & '.join(plays)}.")
        if self.drawn_tiles:
            drawn = [tile.name for tile in self.drawn_tiles]
            lines.append(f"Drawn following tiles: {_listing(drawn)}.")
        if self.claimed_goals:
            claims = [_tier_label(goal) for goal in self.claimed_goals]
            lines.append(f"Claimed following goals: {_listing(claims)}.")
        if self.renounced_goals:
            rejects = [_tier_label(goal) for goal in self.renounced_goals]
            lines.append(f"Rejected following goals: {_listing(rejects)}.")
        if self.discarded_tiles:
            discarded = [tile.name for tile in self.discarded_tiles]
            lines.append(f"Discarded following tiles from supply: {_listing(discarded)}.")
        return "\n".join(lines)


class StartGameMessage(WireMessage):
    """Sent by the host once to set up a session.

    ``ordered_cards`` lists ``(card type, catalogue index)`` from the bottom
    of the deck to the top; the last ``FACE_UP_CARDS`` entries are the cards
    revealed at the start.
    """

    kind: Literal["start_game"] = "start_game"
    ordered_player_names: tuple[SeatEntry, ...]
    chosen_goal_tiles: tuple[GoalTileType, ...]
    ordered_cards: tuple[DeckEntry, ...]

    @property
    def draw_stack(self) -> tuple[DeckEntry, ...]:
        return self.ordered_cards[:-FACE_UP_CARDS]

    @property
    def revealed_cards(self) -> tuple[DeckEntry, ...]:
        return self.ordered_cards[-FACE_UP_CARDS:]

    def describe(self) -> str:
        lines = ["StartGameMessage(", "\torderedPlayerNames="]
        lines.extend(f"\t\t{name} ({color.name})" for name, color in self.ordered_player_names)
        lines.append("\tchosenGoalTiles=")
        lines.extend(f"\t\t{goal.name}" for goal in self.chosen_goal_tiles)
        lines.append("\torderedCards=")
        lines.extend(f"\t\t{card.name} ({index})" for card, index in self.ordered_cards)
        lines.append(")")
        return "\n".join(lines)


GameAction = Annotated[
    CultivateMessage | MeditateMessage | StartGameMessage,
    Field(discriminator="kind"),
]
