"""Message layer of the bonsai network protocol."""

__version__ = "0.1.0"
