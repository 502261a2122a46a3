"""Utility functions for the bonsai wire layer."""

from bonsai_wire.utils.hex_math import ROOT, HexCoord

__all__ = [
    "ROOT",
    "HexCoord",
]
