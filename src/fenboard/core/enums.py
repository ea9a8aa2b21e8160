"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    # Neutral aliases: the side that moves first / second.
    FIRST = 0
    SECOND = 1


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
