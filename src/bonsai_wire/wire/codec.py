"""JSON form of action messages.

Framing and delivery belong to the transport; this module only turns a
message into bytes and back.  Decoding fails closed: anything that does not
validate as exactly one of the message shapes raises
:class:`MalformedMessageError`.  By default values of the wrong JSON type
(``"2"`` or ``true`` for an integer) are rejected rather than coerced.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from bonsai_wire.config import Settings, get_settings

from .errors import MalformedMessageError
from .messages import CultivateMessage, GameAction, MeditateMessage, StartGameMessage

logger = logging.getLogger(__name__)

GAME_ACTION_ADAPTER: TypeAdapter[GameAction] = TypeAdapter(GameAction)

AnyMessage = CultivateMessage | MeditateMessage | StartGameMessage


def to_payload(message: AnyMessage) -> dict[str, Any]:
    """Return the JSON-compatible dict for ``message``."""

    return GAME_ACTION_ADAPTER.dump_python(message, mode="json", by_alias=True)


def from_payload(payload: Any, *, settings: Settings | None = None) -> AnyMessage:
    """Validate an already parsed JSON object into a message.

    The payload is checked under the same JSON rules as :func:`decode`.
    """

    try:
        data = json.dumps(payload)
    except (TypeError, ValueError) as exc:
        logger.warning("Rejected malformed payload: %s", exc)
        raise MalformedMessageError(f"Payload is not JSON data: {exc}") from exc
    return _validate(data, settings or get_settings(), "payload")


def encode(message: AnyMessage, *, settings: Settings | None = None) -> bytes:
    """Serialize ``message`` to UTF-8 JSON."""

    settings = settings or get_settings()
    return GAME_ACTION_ADAPTER.dump_json(message, by_alias=True, indent=settings.wire_indent)


def decode(data: bytes | str, *, settings: Settings | None = None) -> AnyMessage:
    """Parse and validate a JSON message.

    Raises:
        MalformedMessageError: On invalid JSON, an unknown ``kind`` or enum
            tag, wrong pair arity, wrongly typed values, and missing or
            extra fields
    """

    return _validate(data, settings or get_settings(), "message")


def _validate(data: bytes | str, settings: Settings, what: str) -> AnyMessage:
    try:
        return GAME_ACTION_ADAPTER.validate_json(data, strict=settings.strict_decoding)
    except ValidationError as exc:
        logger.warning("Rejected malformed %s: %s", what, exc.errors(include_url=False))
        raise MalformedMessageError(str(exc)) from exc
