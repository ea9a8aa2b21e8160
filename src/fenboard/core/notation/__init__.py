"""Notation package: FEN decoding."""

from fenboard.core.notation.fen import STARTING_FEN, board_from_fen, rank_from_fen

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "rank_from_fen",
]
