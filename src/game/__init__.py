"""
Minesweeper game module.

Provides core game logic: toroidal board management, cell state,
scoring, and text display helpers.
"""
from .cell import Cell, MAX_NEIGHBOURS
from .board import (
    Board,
    BoardConfig,
    GameStatus,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .errors import (
    MinesweeperError,
    ConfigError,
    InvalidDimensions,
    InvalidFraction,
    MinesAlreadyPlanted,
    InvalidCount,
    TerminalStateViolation,
)
from .display import render_board, format_elapsed
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "MAX_NEIGHBOURS",
    "Board",
    "BoardConfig",
    "GameStatus",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinesweeperError",
    "ConfigError",
    "InvalidDimensions",
    "InvalidFraction",
    "MinesAlreadyPlanted",
    "InvalidCount",
    "TerminalStateViolation",
    "render_board",
    "format_elapsed",
    "MinesweeperEnv",
]
