"""Tetromino catalogue and the piece value handed to the game loop.

Each of the seven shapes is described once, as a :class:`PieceKind` pairing
its occupancy matrix with its display colour.  ``SHAPES`` and ``COLORS`` are
index-parallel views derived from that single table, so shape ``i`` always
goes with colour ``i``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

Shape = Tuple[Tuple[int, ...], ...]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


def _occupied(shape: Shape) -> List[Tuple[int, int]]:
    return [
        (r, c)
        for r, row in enumerate(shape)
        for c, cell in enumerate(row)
        if cell
    ]


@dataclass(frozen=True)
class PieceKind:
    """One catalogue entry: a shape in its spawn orientation and its colour."""

    type: TetrominoType
    shape: Shape
    color: str

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> List[Tuple[int, int]]:
        """Return the ``(row, col)`` offsets of the occupied cells."""

        return _occupied(self.shape)


CATALOGUE: Tuple[PieceKind, ...] = (
    PieceKind(TetrominoType.I, ((1, 1, 1, 1),), "#00f0f0"),
    PieceKind(TetrominoType.O, ((1, 1), (1, 1)), "#f0f000"),
    PieceKind(TetrominoType.T, ((0, 1, 0), (1, 1, 1)), "#a000f0"),
    PieceKind(TetrominoType.S, ((1, 1, 0), (0, 1, 1)), "#00f000"),
    PieceKind(TetrominoType.Z, ((0, 1, 1), (1, 1, 0)), "#f00000"),
    PieceKind(TetrominoType.J, ((1, 0, 0), (1, 1, 1)), "#0000f0"),
    PieceKind(TetrominoType.L, ((0, 0, 1), (1, 1, 1)), "#f0a000"),
)

SHAPES: Tuple[Shape, ...] = tuple(kind.shape for kind in CATALOGUE)
COLORS: Tuple[str, ...] = tuple(kind.color for kind in CATALOGUE)

# Integer written into the board for a settled piece of each type.  ``0`` is
# reserved for empty cells.
PIECE_VALUES: Dict[TetrominoType, int] = {
    kind.type: i + 1 for i, kind in enumerate(CATALOGUE)
}

_KINDS: Dict[TetrominoType, PieceKind] = {kind.type: kind for kind in CATALOGUE}


def kind_of(shape: TetrominoType) -> PieceKind:
    """Return the catalogue entry for ``shape``."""

    return _KINDS[shape]


@dataclass
class Piece:
    """A spawned piece: shape, colour and top-left anchor in board cells.

    The piece holds no reference to any board.  Settling it is up to the
    caller, typically by writing :data:`PIECE_VALUES` into the board cells
    returned by :meth:`cells`.
    """

    kind: PieceKind
    x: int = 0
    y: int = 0

    @property
    def shape(self) -> Shape:
        return self.kind.shape

    @property
    def color(self) -> str:
        return self.kind.color

    def cells(self) -> List[Tuple[int, int]]:
        """Return the board ``(row, col)`` coordinates covered by the piece."""

        return [(self.y + dr, self.x + dc) for dr, dc in self.kind.cells()]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly mapping of the piece."""

        return {
            "shape": [list(row) for row in self.shape],
            "color": self.color,
            "x": self.x,
            "y": self.y,
        }


__all__ = [
    "TetrominoType",
    "PieceKind",
    "Piece",
    "CATALOGUE",
    "SHAPES",
    "COLORS",
    "PIECE_VALUES",
    "kind_of",
]
