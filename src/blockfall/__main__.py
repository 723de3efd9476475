"""Simple ASCII demo for the data model.

Run with: `python -m blockfall`

Prints a freshly spawned piece as JSON followed by a single frame of an empty
board with the piece's cells marked.  The board itself is left untouched.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional, Sequence

from . import Board, Piece, PieceFactory, create_board


def _frame(board: Board, piece: Piece) -> List[str]:
    marked = set(piece.cells())
    return [
        "".join(
            "#" if (r, c) in marked else "."
            for c in range(len(row))
        )
        for r, row in enumerate(board.to_list())
    ]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    board = create_board()
    piece = PieceFactory(seed=args.seed).next_piece()
    print(json.dumps(piece.to_dict()))
    for line in _frame(board, piece):
        print(line)


if __name__ == "__main__":
    main()
