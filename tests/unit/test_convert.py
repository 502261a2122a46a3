"""Tests for domain <-> wire conversions."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bonsai_wire.domain import catalogue
from bonsai_wire.domain import enums as de
from bonsai_wire.domain.models import GrowthCard, HelperCard, MasterCard, ParchmentCard, ToolCard
from bonsai_wire.wire import convert
from bonsai_wire.wire.enums import CardType, ColorType, GoalTileType, GoalType, TileType
from bonsai_wire.wire.errors import MalformedMessageError, UnrepresentableValueError

CONCRETE_TILES = [tile for tile in de.BonsaiTileType if tile is not de.BonsaiTileType.ANY]


@given(st.sampled_from(list(de.PotColor)))
def test_color_round_trip(color):
    assert convert.color_to_domain(convert.color_to_wire(color)) is color


@given(st.sampled_from(list(ColorType)))
def test_color_inverse_round_trip(color):
    assert convert.color_to_wire(convert.color_to_domain(color)) is color


def test_blue_survives_round_trip():
    assert convert.color_to_wire(convert.color_to_domain(ColorType.BLUE)) is ColorType.BLUE


@given(st.sampled_from(CONCRETE_TILES))
def test_tile_round_trip(tile):
    assert convert.tile_to_domain(convert.tile_to_wire(tile)) is tile


@given(st.sampled_from(list(TileType)))
def test_tile_inverse_round_trip(tile):
    assert convert.tile_to_wire(convert.tile_to_domain(tile)) is tile


def test_any_tile_cannot_be_sent(caplog):
    with caplog.at_level(logging.ERROR, logger="bonsai_wire.wire.convert"):
        with pytest.raises(UnrepresentableValueError, match="Can't send ANY tile"):
            convert.tile_to_wire(de.BonsaiTileType.ANY)
    assert "ANY" in caplog.text


def test_unrepresentable_is_a_value_error():
    with pytest.raises(ValueError):
        convert.tile_to_wire(de.BonsaiTileType.ANY)


@pytest.mark.parametrize(
    ("domain", "wire"),
    [
        (de.GoalTileType.WOOD, GoalTileType.BROWN),
        (de.GoalTileType.LEAF, GoalTileType.GREEN),
        (de.GoalTileType.FRUIT, GoalTileType.ORANGE),
        (de.GoalTileType.FLOWER, GoalTileType.PINK),
        (de.GoalTileType.POSITION, GoalTileType.BLUE),
    ],
)
def test_goal_tile_mapping(domain, wire):
    assert convert.goal_tile_to_wire(domain) is wire
    assert convert.goal_tile_to_domain(wire) is domain
    assert convert.goal_type_to_wire(domain) is GoalType(wire.value)
    assert convert.goal_type_to_domain(GoalType(wire.value)) is domain


@given(st.sampled_from(list(GoalType)))
def test_goal_type_inverse_round_trip(goal):
    assert convert.goal_type_to_wire(convert.goal_type_to_domain(goal)) is goal


@pytest.mark.parametrize(
    ("card", "expected"),
    [
        (GrowthCard(de.BonsaiTileType.LEAF, id=2), CardType.GROWTH),
        (HelperCard((de.BonsaiTileType.ANY, de.BonsaiTileType.WOOD), id=14), CardType.HELPER),
        (MasterCard((de.BonsaiTileType.ANY,), id=24), CardType.MASTER),
        (ParchmentCard(2, de.ParchmentCardType.FRUIT, id=38), CardType.PARCHMENT),
        (ToolCard(id=41), CardType.TOOL),
    ],
)
def test_card_to_wire(card, expected):
    assert convert.card_to_wire(card) is expected


def test_card_to_wire_rejects_unknown_variant():
    with pytest.raises(TypeError, match="Unhandled zen card variant"):
        convert.card_to_wire(object())  # type: ignore[arg-type]


def test_every_card_kind_is_classified():
    kinds = {convert.card_to_wire(card) for card in catalogue.CARD_CATALOGUE}
    assert kinds == set(CardType)


@given(st.sampled_from(catalogue.CARD_CATALOGUE))
def test_card_round_trip_through_catalogue(card):
    assert convert.card_to_domain(convert.card_to_wire(card), card.id) == card


def test_card_to_domain_rejects_kind_mismatch():
    with pytest.raises(MalformedMessageError, match="GROWTH card"):
        convert.card_to_domain(CardType.TOOL, 0)


def test_card_to_domain_rejects_unknown_index():
    with pytest.raises(MalformedMessageError, match="Unknown card index"):
        convert.card_to_domain(CardType.TOOL, 47)


def test_wire_sets_cover_domain_sets():
    assert {convert.color_to_wire(c) for c in de.PotColor} == set(ColorType)
    assert {convert.goal_tile_to_wire(g) for g in de.GoalTileType} == set(GoalTileType)
    assert {convert.tile_to_wire(t) for t in CONCRETE_TILES} == set(TileType)
