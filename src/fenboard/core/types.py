"""Square coordinates and naming helpers.

Grid layout follows FEN reading order:
    rank_index 0 is rank 8 (top), rank_index 7 is rank 1 (bottom);
    file_index 0 is file a (left), file_index 7 is file h (right).
"""

from __future__ import annotations

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


def square_name(rank_index: int, file_index: int) -> str:
    """Algebraic name of a grid cell, e.g. (7, 4) → 'e1'."""
    if not (0 <= rank_index < BOARD_SIZE and 0 <= file_index < BOARD_SIZE):
        raise ValueError(f"Square out of range: ({rank_index}, {file_index})")
    return _FILES[file_index] + str(BOARD_SIZE - rank_index)


def parse_square(name: str) -> tuple[int, int]:
    """Parse a square name into ``(rank_index, file_index)``, e.g. 'e1' → (7, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return BOARD_SIZE - int(name[1]), _FILES.index(name[0])
