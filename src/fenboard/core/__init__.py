"""Core domain layer — FEN decoding and the board model, no external dependencies.

Quick start::

    from fenboard.core import Board

    board = Board.from_fen("8/8/4k3/8/8/4K3/8/8 w - - 0 1")
    print(board.piece_at("e3"))
"""

from fenboard.core.board import Board, Rank
from fenboard.core.enums import PieceKind, Side
from fenboard.core.errors import MalformedFen
from fenboard.core.notation import STARTING_FEN, board_from_fen, rank_from_fen
from fenboard.core.piece import Piece
from fenboard.core.types import BOARD_SIZE, parse_square, square_name

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Rank",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "rank_from_fen",
    # Errors
    "MalformedFen",
]
