"""
Pytest configuration and shared fixtures for tic-tac-toe tests.
"""

from typing import Iterable, Optional

import pytest

from tictactoe.core import apply_move, restart
from tictactoe.models import GameState


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks exhaustive game-tree tests"
    )


def play(indices: Iterable[int], state: Optional[GameState] = None) -> GameState:
    """Apply a sequence of moves starting from a fresh game (or the given state)."""
    if state is None:
        state = restart()
    for index in indices:
        state = apply_move(state, index)
    return state


@pytest.fixture
def fresh_state() -> GameState:
    return restart()


@pytest.fixture
def x_won_state() -> GameState:
    """X wins down the first column."""
    return play([0, 1, 3, 4, 6])


@pytest.fixture
def draw_state() -> GameState:
    return play([0, 1, 2, 4, 3, 5, 7, 6, 8])


@pytest.fixture
def play_moves():
    """Helper for tests that build their own move sequences."""
    return play
