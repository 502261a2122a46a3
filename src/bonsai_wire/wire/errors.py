"""Exceptions raised by the wire layer."""

from __future__ import annotations


class UnrepresentableValueError(ValueError):
    """A domain value has no wire counterpart (e.g. the ``ANY`` tile).

    Sending such a value is a programming error; the caller has to resolve it
    to a concrete value first.
    """


class MalformedMessageError(ValueError):
    """A received payload does not describe a valid message."""
