"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src and the command line script to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, BoardLayout, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its only mine in the middle."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with one mine in the top-right corner.

    Counts:
        0 0 0 1 *
        0 0 0 1 1
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
    """
    return Board.from_mines(5, 5, [(0, 4)])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board split by a vertical wall of mines in column 2.

    Counts:
        0 2 * 2 0
        0 3 * 3 0
        0 3 * 3 0
        0 3 * 3 0
        0 2 * 2 0
    """
    return Board.from_mines(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Layout and Session Fixtures
# ============================================================================

@pytest.fixture
def layout() -> BoardLayout:
    """3x4 layout with 10-unit cells and 2-unit gaps."""
    return BoardLayout(rows=3, columns=4, cell_size=10.0, gap=2.0)


@pytest.fixture
def session(layout: BoardLayout) -> GameSession:
    """Session on a 3x4 board with 2 mines and a fixed seed."""
    return GameSession(
        BoardConfig(3, 4, 2), layout=layout, rng=random.Random(7)
    )


@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
