"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from fenboard.core import Board

EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"


@pytest.fixture()
def initial_board() -> Board:
    """Board for the standard starting position."""
    return Board.initial()


@pytest.fixture()
def empty_board() -> Board:
    """Board with all 64 squares empty."""
    return Board.from_fen(EMPTY_FEN)
