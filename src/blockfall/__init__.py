"""Static data model for a falling-block puzzle game."""

from .board import CELL_SIZE, HEIGHT, WIDTH, Board, create_board
from .tetromino import (
    CATALOGUE,
    COLORS,
    PIECE_VALUES,
    SHAPES,
    Piece,
    PieceKind,
    TetrominoType,
)
from .spawn import SPAWN_X, SPAWN_Y, PieceFactory, random_piece

__all__ = [
    "WIDTH",
    "HEIGHT",
    "CELL_SIZE",
    "Board",
    "create_board",
    "TetrominoType",
    "PieceKind",
    "Piece",
    "CATALOGUE",
    "SHAPES",
    "COLORS",
    "PIECE_VALUES",
    "SPAWN_X",
    "SPAWN_Y",
    "PieceFactory",
    "random_piece",
]
