"""Piece value object and the FEN letter decoder."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.enums import PieceKind, Side

# Lowercase FEN letter -> kind. Case carries the side.
_KIND_BY_LETTER: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "r": PieceKind.ROOK,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

_LETTER_BY_KIND: dict[PieceKind, str] = {v: k for k, v in _KIND_BY_LETTER.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    kind: PieceKind
    side: Side

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _LETTER_BY_KIND[self.kind]
        return letter.upper() if self.side == Side.WHITE else letter

    def __repr__(self) -> str:
        return f"Piece({self.kind.name}, {self.side.name})"

    @classmethod
    def from_char(cls, char: str) -> Piece | None:
        """Decode a single FEN letter, e.g. 'N' → white knight.

        Returns ``None`` for anything that is not a piece letter (digits,
        '/', spaces, other letters). That is a normal answer, not an error:
        callers use it to tell piece letters apart from other tokens.
        """
        if len(char) != 1 or not char.isascii():
            return None
        side = Side.WHITE if char.isupper() else Side.BLACK
        kind = _KIND_BY_LETTER.get(char.lower())
        if kind is None:
            return None
        return cls(kind, side)
