"""Board - fixed 8x8 grid of squares decoded from FEN."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fenboard.core.enums import Side
from fenboard.core.piece import Piece
from fenboard.core.types import BOARD_SIZE, parse_square, square_name


class Rank:
    """Immutable row of exactly 8 squares, ordered file a → h.

    Each square is either ``None`` (empty) or a :class:`Piece`.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None]) -> None:
        cells = tuple(squares)
        if len(cells) != BOARD_SIZE:
            raise ValueError(
                f"Rank must contain {BOARD_SIZE} squares, got {len(cells)}"
            )
        for cell in cells:
            if cell is not None and not isinstance(cell, Piece):
                raise ValueError(f"Square must be empty or a Piece, got {cell!r}")
        self._squares: tuple[Piece | None, ...] = cells

    @classmethod
    def empty(cls) -> Rank:
        return cls([None] * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, file_index: int) -> Piece | None:
        return self._squares[file_index]

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def is_empty(self) -> bool:
        return all(cell is None for cell in self._squares)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        cells = "".join(str(p) if p else "." for p in self._squares)
        return f"Rank({cells!r})"


class Board:
    """Immutable board: 8 ranks (rank 8 first) plus the raw FEN metadata tail.

    The metadata (side to move, castling, en passant, clocks) is stored
    verbatim and never interpreted here.
    """

    __slots__ = ("_ranks", "_metadata")

    def __init__(self, ranks: Iterable[Rank], metadata: str = "") -> None:
        rows = tuple(ranks)
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Board must contain {BOARD_SIZE} ranks, got {len(rows)}")
        for row in rows:
            if not isinstance(row, Rank):
                raise ValueError(f"Board rows must be Rank instances, got {row!r}")
        self._ranks: tuple[Rank, ...] = rows
        self._metadata = metadata

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_fen(cls, text: str) -> Board:
        """Decode a FEN string. Raises :class:`MalformedFen` on bad input."""
        from fenboard.core.notation.fen import board_from_fen

        return board_from_fen(text)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        from fenboard.core.notation.fen import STARTING_FEN

        return cls.from_fen(STARTING_FEN)

    # -- Element access -----------------------------------------------------

    @property
    def ranks(self) -> tuple[Rank, ...]:
        return self._ranks

    @property
    def metadata(self) -> str:
        return self._metadata

    def __getitem__(self, rank_index: int) -> Rank:
        return self._ranks[rank_index]

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[Rank]:
        return iter(self._ranks)

    def piece_at(self, name: str) -> Piece | None:
        """Piece on the named square (e.g. ``"e1"``), or ``None`` if empty."""
        rank_index, file_index = parse_square(name)
        return self._ranks[rank_index][file_index]

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side | None = None) -> list[tuple[str, Piece]]:
        """``(square name, piece)`` for every occupied square, in FEN order."""
        found: list[tuple[str, Piece]] = []
        for rank_index, rank in enumerate(self._ranks):
            for file_index, piece in enumerate(rank):
                if piece is None:
                    continue
                if side is not None and piece.side != side:
                    continue
                found.append((square_name(rank_index, file_index), piece))
        return found

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._ranks == other._ranks and self._metadata == other._metadata

    def __hash__(self) -> int:
        return hash((self._ranks, self._metadata))

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank_index, rank in enumerate(self._ranks):
            cells = [str(p) if p else "." for p in rank]
            rows.append(f"{BOARD_SIZE - rank_index} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        rows.append(f"metadata: {self._metadata!r}")
        return "\n".join(rows)
