"""
Error types raised by the Minesweeper game core.
"""


class MinesweeperError(Exception):
    """Base class for all game errors."""


class ConfigError(MinesweeperError, ValueError):
    """Invalid board configuration."""


class InvalidDimensions(ConfigError):
    """Board width or height is not positive."""


class InvalidFraction(ConfigError):
    """Mine fraction outside [0, 1], or too many mines for the board."""


class MinesAlreadyPlanted(ConfigError):
    """Mines can only be planted once per game."""


class InvalidCount(MinesweeperError, ValueError):
    """
    Adjacent mine count outside [0, 8].

    Only raised when board invariants are broken; callers should treat
    it as a bug rather than recover from it.
    """


class TerminalStateViolation(MinesweeperError, RuntimeError):
    """A move was attempted after the game was won or lost."""
