import pytest

from quadrax.config import get_rules
from quadrax.core import Cell, Placement
from quadrax.game import Winner, apply_move, new_game
from quadrax.selfplay import play_game, play_match, random_agent, scripted_agent, search_agent


def fixed_agent(positions):
    moves = iter(positions)

    def choose(state):
        return Placement(next(moves))

    return choose


class TestPlayGame:

    def test_scripted_sequence(self):
        record = play_game(fixed_agent([0, 1, 2, 3]), fixed_agent([4, 5, 6]))
        assert record.winner is Winner.PLAYER_ONE
        assert record.num_moves == 7
        assert not record.truncated
        assert record.moves[0] == (Cell.PLAYER_ONE, Placement(0))

    def test_truncation(self):
        record = play_game(random_agent(1), random_agent(2), max_moves=3)
        assert record.truncated
        assert record.winner is None
        assert record.num_moves == 3

    def test_invalid_max_moves(self):
        with pytest.raises(ValueError):
            play_game(random_agent(), random_agent(), max_moves=0)

    def test_random_agent_reproducible(self):
        first = play_game(random_agent(7), random_agent(8))
        second = play_game(random_agent(7), random_agent(8))
        assert first.moves == second.moves

    def test_scripted_agent_takes_win(self):
        agent = scripted_agent()
        state = new_game()
        for pos in [0, 15, 1, 14, 4, 11]:
            apply_move(state, Placement(pos))
        assert agent(state) == Placement(5)


def test_play_match_tally():
    rules = get_rules("full_board")
    tally = play_match(random_agent(3), random_agent(4), num_games=5,
                       rules=rules, disable_tqdm=True)
    assert set(tally) == {"player_one", "player_two", "tie", "truncated"}
    assert sum(tally.values()) == 5
    assert tally["truncated"] == 0


def test_search_agent_plays_legal_moves():
    rules = get_rules("full_board")
    record = play_game(search_agent(depth=1), random_agent(5), rules)
    assert not record.truncated
    assert record.winner is not None
    assert record.num_moves <= 16


def test_search_agent_takes_win():
    state = new_game()
    for pos in [0, 15, 1, 14, 4, 11]:
        apply_move(state, Placement(pos))
    assert search_agent(depth=2)(state) == Placement(5)
