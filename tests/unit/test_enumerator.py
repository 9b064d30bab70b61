import pytest

from quadrax.core import Board, Cell, Movement, Phase, Placement, is_legal, legal_moves

P1 = Cell.PLAYER_ONE
P2 = Cell.PLAYER_TWO


class TestLegalMoves:

    def test_placement_on_empty_board(self, empty_board):
        moves = legal_moves(empty_board, P1, Phase.PLACEMENT)
        assert moves == [Placement(i) for i in range(16)]

    def test_placement_skips_occupied(self, make_board):
        board = make_board(p1=[0, 5], p2=[3])
        moves = legal_moves(board, P2, Phase.PLACEMENT)
        positions = [m.position for m in moves]
        assert positions == [i for i in range(16) if i not in (0, 3, 5)]

    def test_movement_order(self, make_board):
        board = make_board(p1=[1, 9], p2=[0, 2, 3, 4, 5, 6, 7, 8, 10, 11, 12])
        moves = legal_moves(board, P1, Phase.MOVEMENT)
        assert moves == [
            Movement(1, 13), Movement(1, 14), Movement(1, 15),
            Movement(9, 13), Movement(9, 14), Movement(9, 15),
        ]

    def test_movement_only_own_pieces(self, make_board):
        board = make_board(p1=[0], p2=[1, 2])
        moves = legal_moves(board, P2, Phase.MOVEMENT)
        assert {m.from_ for m in moves} == {1, 2}
        assert all(board.is_empty(m.to) for m in moves)

    def test_counts_on_random_boards(self, rng):
        for _ in range(100):
            board = Board(rng.integers(0, 3, size=16))
            empties = board.count(Cell.EMPTY)
            assert len(legal_moves(board, P1, Phase.PLACEMENT)) == empties
            assert len(legal_moves(board, P2, Phase.MOVEMENT)) == board.count(P2) * empties

    def test_full_board_has_no_moves(self, no_win_full_board):
        assert legal_moves(no_win_full_board, P1, Phase.MOVEMENT) == []
        assert legal_moves(no_win_full_board, P2, Phase.PLACEMENT) == []

    def test_unknown_phase(self, empty_board):
        with pytest.raises(ValueError):
            legal_moves(empty_board, P1, "placement")


class TestIsLegal:

    def test_agrees_with_enumeration(self, rng):
        for _ in range(30):
            board = Board(rng.integers(0, 3, size=16))
            for phase in Phase:
                listed = set(legal_moves(board, P1, phase))
                for a in range(16):
                    assert is_legal(board, P1, phase, Placement(a)) == (Placement(a) in listed)
                    for b in range(16):
                        if a != b:
                            move = Movement(a, b)
                            assert is_legal(board, P1, phase, move) == (move in listed)


def test_legal_moves_rejects_non_player(empty_board):
    with pytest.raises(ValueError):
        legal_moves(empty_board, Cell.EMPTY, Phase.MOVEMENT)
    with pytest.raises(ValueError):
        legal_moves(empty_board, 5, Phase.PLACEMENT)
