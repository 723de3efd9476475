from __future__ import annotations

import logging

import numpy as np
import pytest

from blockfall.board import CELL_SIZE, HEIGHT, WIDTH, Board, create_board


def test_create_board_dimensions_and_zeroes() -> None:
    board = create_board()
    assert len(board) == HEIGHT == 20
    assert all(len(row) == WIDTH == 10 for row in board)
    assert all(cell == 0 for row in board for cell in row)
    assert board.to_list()[0] == [0] * 10
    assert CELL_SIZE == 30


def test_boards_are_independent() -> None:
    first = create_board()
    second = create_board()
    assert first is not second

    first.set_cell(0, 0, 3)
    first[5][7] = 1

    assert second.get_cell(0, 0) == 0
    assert second.to_list() == [[0] * WIDTH for _ in range(HEIGHT)]


def test_rows_of_one_board_are_not_aliased() -> None:
    board = create_board()
    board.set_cell(0, 4, 2)
    assert board.get_cell(1, 4) == 0


def test_to_list_returns_plain_ints() -> None:
    rows = create_board().to_list()
    assert isinstance(rows, list)
    assert type(rows[0][0]) is int


def test_cell_accessors_reject_out_of_bounds() -> None:
    board = Board()
    with pytest.raises(IndexError):
        board.get_cell(HEIGHT, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, 1)
    with pytest.raises(IndexError):
        board.get_cell(0, WIDTH)


def test_set_cell_rejects_invalid_marker() -> None:
    board = Board()
    with pytest.raises(ValueError):
        board.set_cell(0, 0, -1)
    with pytest.raises(ValueError):
        board.set_cell(0, 0, 256)
    with pytest.raises(ValueError):
        board.set_cell(0, 0, 0.9)
    with pytest.raises(ValueError):
        board.set_cell(0, 0, "1")
    with pytest.raises(ValueError):
        board.set_cell(0, 0, True)
    assert board.get_cell(0, 0) == 0

    board.set_cell(0, 0, 255)
    board.set_cell(0, 1, np.uint8(3))
    assert board.get_cell(0, 0) == 255
    assert board.get_cell(0, 1) == 3


def test_create_board_logs_allocation(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="blockfall.board"):
        create_board()
    assert "20x10" in caplog.text
