"""Pytest configuration and shared fixtures."""

import logging

import numpy as np
import pytest

from quadrax.config import get_rules
from quadrax.core import Board, Placement
from quadrax.game import apply_move, new_game

# Full board with 8 pieces each and no completed pattern for either player
NO_WIN_FULL_BOARD = [1, 1, 2, 2,
                     2, 2, 1, 1,
                     1, 1, 2, 2,
                     2, 2, 1, 1]

# Placement order reaching NO_WIN_FULL_BOARD, player one first
NO_WIN_PLACEMENTS = [0, 2, 1, 3, 6, 4, 7, 5, 8, 10, 9, 11, 14, 12, 15, 13]


def board_with(p1=(), p2=()) -> Board:
    """Board with player one on p1 and player two on p2."""
    values = [0] * 16
    for i in p1:
        values[i] = 1
    for i in p2:
        values[i] = 2
    return Board.from_list(values)


@pytest.fixture
def make_board():
    return board_with


@pytest.fixture
def empty_board():
    return Board.empty()


@pytest.fixture
def fork_board():
    """Movement-phase board where 5 or 9 can move onto row 12..15."""
    return Board.from_list([0, 2, 0, 0, 0, 1, 2, 0, 2, 1, 2, 0, 0, 1, 1, 0])


@pytest.fixture
def no_win_full_board():
    return Board.from_list(NO_WIN_FULL_BOARD)


@pytest.fixture
def no_win_placements():
    return list(NO_WIN_PLACEMENTS)


@pytest.fixture
def full_board_rules():
    return get_rules("full_board")


@pytest.fixture
def classic_game():
    return new_game(get_rules("classic"))


@pytest.fixture
def movement_game(classic_game):
    """Classic game right after placement: P1 on 0,1,6,7 and P2 on 2,3,4,5."""
    for pos in NO_WIN_PLACEMENTS[:8]:
        apply_move(classic_game, Placement(pos))
    return classic_game


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def capture_engine_logs(caplog):
    """Capture engine logs at DEBUG so tests can assert on them."""
    caplog.set_level(logging.DEBUG, logger="quadrax")
    yield


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit test")
    config.addinivalue_line("markers", "integration: Integration test")
    config.addinivalue_line("markers", "slow: Slow test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add automatic markers."""
    for item in items:
        # Add markers based on file path
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
