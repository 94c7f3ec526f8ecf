"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 beginner board."""
    return Board(BoardConfig(seed=1234))


@pytest.fixture
def small_board() -> Board:
    """Create a seeded 3x3 board with 1 mine."""
    return Board(BoardConfig(3, 3, 1 / 9, seed=7))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0.0, seed=0))


@pytest.fixture
def single_mine_board() -> Board:
    """
    5x5 board with one mine at (0, 0).

    The mine's 8 wrapped neighbours count 1, every other safe cell
    counts 0 and they form a single zero region.
    """
    board = Board(BoardConfig(5, 5, 1 / 25))
    board.plant_mines_at([(0, 0)])
    return board


@pytest.fixture
def line_board() -> Board:
    """
    7x1 board with mines at x=0 and x=3.

    Counts along the row are [*, 1, 1, *, 1, 0, 1]; the zero at x=5
    absorbs x=4 and x=6, leaving x=1 and x=2 isolated. 3BV is 3.
    """
    board = Board(BoardConfig(7, 1, 2 / 7))
    board.plant_mines_at([(0, 0), (3, 0)])
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(2, 3)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10 / 81)
