"""Decode FEN chess positions into an immutable board model."""

__version__ = "0.1.0"
