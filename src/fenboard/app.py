"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from fenboard.core import STARTING_FEN, Board, MalformedFen

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fenboard",
        description="Decode a FEN position and print the board.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=STARTING_FEN,
        help="FEN text to decode (default: the standard starting position)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Decode the given (or starting) position and print it."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    _LOGGER.debug("Decoding FEN %r", args.fen)
    try:
        board = Board.from_fen(args.fen)
    except MalformedFen as exc:
        _LOGGER.error("Cannot decode position: %s", exc)
        return 1

    print(repr(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())
