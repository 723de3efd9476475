"""Board representation for the playfield."""

from __future__ import annotations

import logging
import operator
from typing import Iterator, List

import numpy as np
from numpy.typing import NDArray


LOGGER = logging.getLogger(__name__)

# Dimensions of the playfield in cells.
WIDTH = 10
HEIGHT = 20
# Edge length of one cell in pixels.  Only renderers care about this.
CELL_SIZE = 30

# Largest occupancy marker a cell can hold.
MAX_CELL_VALUE = np.iinfo(np.uint8).max

Grid = NDArray[np.uint8]


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


class Board:
    """Playfield holding the occupied cells.

    The grid is exposed as an ordered sequence of rows: ``len(board)`` is the
    number of rows, ``board[row]`` returns one row and iterating yields every
    row from top to bottom.  ``0`` marks an empty cell.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, row: int) -> Grid:
        return self.grid[row]

    def __iter__(self) -> Iterator[Grid]:
        return iter(self.grid)

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
            ValueError: If ``value`` is not a valid occupancy marker.
        """
        if isinstance(value, bool):
            raise ValueError(f"Cell value must be an integer, got {value!r}")
        try:
            value = operator.index(value)
        except TypeError:
            raise ValueError(f"Cell value must be an integer, got {value!r}") from None
        if not 0 <= value <= MAX_CELL_VALUE:
            raise ValueError(f"Cell value must be in 0..{MAX_CELL_VALUE}, got {value}")
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def to_list(self) -> List[List[int]]:
        """Return the grid as nested Python lists."""

        return self.grid.tolist()


def create_board() -> Board:
    """Return a fresh, empty board.

    Every call allocates a new grid so boards never share rows.
    """

    board = Board()
    LOGGER.debug("Allocated %dx%d board", board.height, board.width)
    return board


__all__ = [
    "WIDTH",
    "HEIGHT",
    "CELL_SIZE",
    "MAX_CELL_VALUE",
    "Board",
    "create_board",
    "create_empty_grid",
]
