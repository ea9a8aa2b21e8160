"""FEN decoding: piece placement into a :class:`Board`, metadata kept raw."""

from __future__ import annotations

from fenboard.core.board import Board, Rank
from fenboard.core.errors import MalformedFen
from fenboard.core.piece import Piece
from fenboard.core.types import BOARD_SIZE

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def rank_from_fen(descriptor: str) -> Rank:
    """Expand one rank descriptor (e.g. ``"4P3"``) into a :class:`Rank`."""
    squares: list[Piece | None] = []
    for ch in descriptor:
        if ch.isascii() and ch.isdigit():
            run = int(ch)
            if not (1 <= run <= BOARD_SIZE):
                raise MalformedFen(f"Invalid FEN digit {ch!r} in rank {descriptor!r}")
            if len(squares) + run > BOARD_SIZE:
                raise MalformedFen(f"Invalid FEN rank width: {descriptor!r}")
            squares.extend([None] * run)
        elif ch.isascii() and ch.isalpha():
            piece = Piece.from_char(ch)
            if piece is None:
                raise MalformedFen(
                    f"Invalid FEN piece letter {ch!r} in rank {descriptor!r}"
                )
            if len(squares) >= BOARD_SIZE:
                raise MalformedFen(f"Invalid FEN rank width: {descriptor!r}")
            squares.append(piece)
        # anything else is ignored

    if len(squares) != BOARD_SIZE:
        raise MalformedFen(f"Invalid FEN rank width: {descriptor!r}")
    return Rank(squares)


def board_from_fen(text: str) -> Board:
    """Parse a FEN string into a :class:`Board`.

    Only the first space separates the placement field from the metadata
    tail; the tail is stored unmodified.
    """
    placement, sep, metadata = text.partition(" ")
    if not sep:
        raise MalformedFen(f"Invalid FEN (missing field separator): {text!r}")

    descriptors = placement.split("/")
    if len(descriptors) != BOARD_SIZE:
        raise MalformedFen(
            f"Invalid FEN board (must contain {BOARD_SIZE} ranks, "
            f"got {len(descriptors)}): {text!r}"
        )

    return Board([rank_from_fen(d) for d in descriptors], metadata)
