"""In-process bonsai model used on the rule-engine side of the wire.

* Enumerations mirroring the game's concepts (see :mod:`enums`).
* Immutable entity dataclasses (see :mod:`models`).
* The shared card and goal catalogues (see :mod:`catalogue`).
"""

from . import catalogue, enums, models

__all__ = [
    "catalogue",
    "enums",
    "models",
]
