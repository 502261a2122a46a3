"""Wire vocabulary, conversions, and action messages for bonsai peers."""

from .codec import decode, encode, from_payload, to_payload
from .enums import CardType, ColorType, GoalTileType, GoalType, TileType
from .errors import MalformedMessageError, UnrepresentableValueError
from .messages import CultivateMessage, GameAction, MeditateMessage, StartGameMessage

__all__ = [
    "CardType",
    "ColorType",
    "CultivateMessage",
    "GameAction",
    "GoalTileType",
    "GoalType",
    "MalformedMessageError",
    "MeditateMessage",
    "StartGameMessage",
    "TileType",
    "UnrepresentableValueError",
    "decode",
    "encode",
    "from_payload",
    "to_payload",
]
