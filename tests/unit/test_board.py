import numpy as np
import pytest

from quadrax.core import Board, Cell, clone
from quadrax.core.board import check_player
from quadrax.errors import IndexOutOfRangeError


class TestBoard:

    def test_empty_board(self, empty_board):
        assert len(empty_board) == 16
        assert empty_board.empty_indices() == list(range(16))
        assert all(cell is Cell.EMPTY for cell in empty_board)

    def test_from_list_and_get(self):
        board = Board.from_list([1, 2] + [0] * 14)
        assert board.get(0) is Cell.PLAYER_ONE
        assert board[1] is Cell.PLAYER_TWO
        assert board.is_empty(2)
        assert not board.is_empty(0)

    def test_row_major_grid(self):
        board = Board.from_list([0] * 7 + [1] + [0] * 8)
        grid = board.grid()
        assert grid.shape == (4, 4)
        assert grid[1, 3] == 1  # index 7 = row 1, col 3

    def test_grid_is_read_only(self, empty_board):
        with pytest.raises(ValueError):
            empty_board.grid()[0, 0] = 1

    @pytest.mark.parametrize("index", [-1, 16, 100])
    def test_get_out_of_range(self, empty_board, index):
        with pytest.raises(IndexOutOfRangeError):
            empty_board.get(index)
        with pytest.raises(IndexError):
            empty_board.is_empty(index)

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            Board.from_list([0] * 15)
        with pytest.raises(ValueError):
            Board.from_list([0] * 17)

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            Board.from_list([3] + [0] * 15)
        with pytest.raises(ValueError):
            Board.from_list([-1] + [0] * 15)

    def test_clone_is_deep(self):
        board = Board.from_list([1] + [0] * 15)
        copy = clone(board)
        copy.cells[1] = 2

        assert board.get(1) is Cell.EMPTY
        assert copy == Board.from_list([1, 2] + [0] * 14)
        assert copy != board

    def test_constructor_copies_input(self):
        source = np.zeros(16, dtype=np.int8)
        board = Board(source)
        source[0] = 1
        assert board.is_empty(0)

    def test_indices_and_counts(self):
        board = Board.from_list([1, 2, 1, 0] + [0] * 12)
        assert board.indices_of(Cell.PLAYER_ONE) == [0, 2]
        assert board.indices_of(Cell.PLAYER_TWO) == [1]
        assert board.count(Cell.EMPTY) == 13
        assert not board.is_full()

    def test_equality_by_contents(self):
        a = Board.from_list([1] + [0] * 15)
        b = Board.from_list([1] + [0] * 15)
        assert a == b
        b.cells[1] = 2
        assert a != b

    def test_not_hashable(self, empty_board):
        with pytest.raises(TypeError):
            hash(empty_board)

    def test_render(self):
        board = Board.from_list([1, 2] + [0] * 14)
        assert board.render().splitlines()[0] == "X O . ."
        assert len(board.render().splitlines()) == 4


class TestCell:

    def test_opponent(self):
        assert Cell.PLAYER_ONE.opponent() is Cell.PLAYER_TWO
        assert Cell.PLAYER_TWO.opponent() is Cell.PLAYER_ONE

    def test_empty_has_no_opponent(self):
        with pytest.raises(ValueError):
            Cell.EMPTY.opponent()


class TestCheckPlayer:

    @pytest.mark.parametrize("value", [1, 2, Cell.PLAYER_ONE, np.int8(2)])
    def test_accepts_players(self, value):
        assert check_player(value) in (Cell.PLAYER_ONE, Cell.PLAYER_TWO)
        assert check_player(value) == int(value)

    @pytest.mark.parametrize("value", [0, Cell.EMPTY, 3, 7, -1, True, None, "1"])
    def test_rejects_non_players(self, value):
        with pytest.raises(ValueError):
            check_player(value)
