"""
Hexagonal coordinates for the bonsai board.

Tiles of a bonsai tree are placed on a hex grid whose root tile (the trunk
base inside the pot) sits at the origin.  Every position exchanged between
peers is an axial ``(q, r)`` pair relative to that root.

References:
-----------
Based on the guide at: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HexCoord:
    """
    A position on the bonsai grid in axial coordinates.

    Attributes:
        q: Column coordinate (horizontal axis)
        r: Row coordinate (diagonal axis)

    Example:
        >>> HexCoord.from_pair((1, -1)).as_pair()
        (1, -1)
    """

    q: int
    r: int

    def as_pair(self) -> tuple[int, int]:
        """Return the ``(q, r)`` pair used on the wire."""
        return (self.q, self.r)

    @classmethod
    def from_pair(cls, pair: tuple[int, int]) -> HexCoord:
        """Build a coordinate from a wire ``(q, r)`` pair."""
        q, r = pair
        return cls(q=q, r=r)


ROOT = HexCoord(0, 0)
