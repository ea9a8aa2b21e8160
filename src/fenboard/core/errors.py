"""Errors raised by the core layer."""

from __future__ import annotations


class MalformedFen(ValueError):
    """FEN text that cannot be decoded into a :class:`~fenboard.core.board.Board`."""
