import pytest

from quadrax.core import Board, Cell, Movement, Placement, apply_move, apply_movement, apply_placement
from quadrax.errors import (
    CellOccupiedError,
    IndexOutOfRangeError,
    InvalidMoveError,
    NotOwnerError,
    SamePositionError,
)

P1 = Cell.PLAYER_ONE
P2 = Cell.PLAYER_TWO


class TestApplyPlacement:

    def test_places_piece(self, empty_board):
        after = apply_placement(empty_board, 6, P1)
        assert after.get(6) is P1
        assert after.count(Cell.EMPTY) == 15

    def test_input_unchanged(self, make_board):
        board = make_board(p1=[0], p2=[1])
        before = board.to_list()
        apply_placement(board, 2, P1)
        assert board.to_list() == before
        assert board.get(2) is Cell.EMPTY

    def test_occupied(self, make_board):
        board = make_board(p2=[9])
        with pytest.raises(CellOccupiedError):
            apply_placement(board, 9, P1)

    def test_out_of_range(self, empty_board):
        with pytest.raises(IndexOutOfRangeError):
            apply_placement(empty_board, 16, P1)


class TestApplyMovement:

    def test_moves_anywhere(self, make_board):
        # No adjacency requirement: corner to opposite corner
        board = make_board(p1=[0], p2=[5])
        after = apply_movement(board, 0, 15, P1)
        assert after.get(0) is Cell.EMPTY
        assert after.get(15) is P1
        assert board.get(0) is P1

    def test_not_owner_empty_source(self, make_board):
        board = make_board(p1=[0])
        with pytest.raises(NotOwnerError):
            apply_movement(board, 3, 4, P1)

    def test_not_owner_opponent_piece(self, make_board):
        board = make_board(p1=[0], p2=[1])
        with pytest.raises(NotOwnerError):
            apply_movement(board, 1, 4, P1)

    def test_destination_occupied(self, make_board):
        board = make_board(p1=[0], p2=[1])
        with pytest.raises(CellOccupiedError):
            apply_movement(board, 0, 1, P1)

    @pytest.mark.parametrize("index", [0, 7])
    def test_same_position_regardless_of_occupancy(self, make_board, index):
        board = make_board(p1=[0])
        with pytest.raises(SamePositionError):
            apply_movement(board, index, index, P1)

    def test_errors_share_base_class(self, make_board):
        board = make_board(p1=[0], p2=[1])
        for args in [(1, 4), (0, 1), (0, 0)]:
            with pytest.raises(InvalidMoveError):
                apply_movement(board, *args, P1)


class TestApplyMove:

    def test_dispatches_on_shape(self, make_board):
        board = make_board(p1=[0])
        assert apply_move(board, Placement(3), P2).get(3) is P2
        assert apply_move(board, Movement(0, 3), P1).get(3) is P1

    def test_rejects_non_moves(self, empty_board):
        with pytest.raises(TypeError):
            apply_move(empty_board, 3, P1)


def test_placement_never_mutates(rng):
    """Simulation on random boards leaves the input untouched."""
    for _ in range(50):
        board = Board(rng.integers(0, 3, size=16))
        for index in board.empty_indices():
            before = board.get(index)
            apply_placement(board, index, P1)
            assert board.get(index) == before


class TestPlayerValidation:

    @pytest.mark.parametrize("player", [7, 0, Cell.EMPTY])
    def test_placement_rejects_non_player(self, empty_board, player):
        with pytest.raises(ValueError):
            apply_placement(empty_board, 0, player)
        assert empty_board.count(Cell.EMPTY) == 16

    def test_movement_rejects_non_player(self, make_board):
        board = make_board(p1=[0])
        with pytest.raises(ValueError):
            apply_movement(board, 0, 1, 3)

    def test_result_is_a_valid_board(self, empty_board):
        after = apply_placement(empty_board, 0, 2)
        assert Board(after.cells) == after
        assert after.get(0) is P2
