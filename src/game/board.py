"""
Board module for Minesweeper game.

Implements the game board with toroidal addressing, lazy mine
placement, mine-count propagation, and game status management.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Set

import numpy as np

from . import scoring
from .cell import Cell, Position
from .errors import (
    ConfigError,
    InvalidDimensions,
    InvalidFraction,
    MinesAlreadyPlanted,
    TerminalStateViolation,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Result of applying a move."""

    CONTINUING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if no further moves are allowed."""
        return self is not GameStatus.CONTINUING


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_fraction: Share of cells holding a mine, in [0, 1].
        seed: Seed for mine placement (None for a random layout).
    """

    width: int = 9
    height: int = 9
    mine_fraction: float = 10 / 81
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidDimensions(
                f"Board dimensions must be positive: {self.width}x{self.height}"
            )
        if not 0.0 <= self.mine_fraction <= 1.0:
            raise InvalidFraction(
                f"Fraction of mines must be between 0 and 1: {self.mine_fraction}"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def mines_count(self) -> int:
        """Number of mines the board will hold once planted."""
        return scoring.round_half_up(self.mine_fraction * self.total_cells)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10 / 81)
INTERMEDIATE = BoardConfig(16, 16, 40 / 256)
EXPERT = BoardConfig(30, 16, 99 / 480)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    The grid wraps around on both axes, so every coordinate pair maps
    onto a cell and edge cells have neighbours on the opposite edge.
    Mines are planted on the first update so the first click is safe.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines: List[Cell] = field(default_factory=list, repr=False)
    _status: GameStatus = GameStatus.CONTINUING
    _mines_planted: bool = False
    _first_move_taken: bool = False
    _move_count: int = 0
    _difficulty: Optional[int] = None

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        self._init_grid()

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        mine_fraction: float,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Build a board from raw dimensions.

        Raises:
            ConfigError: If dimensions or mine fraction are invalid.
        """
        return cls(BoardConfig(width, height, mine_fraction, seed))

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]

    def scratch_copy(self) -> "Board":
        """
        Copy the mine layout onto a fresh board.

        The copy shares no cells with this board and carries none of
        the player's reveals or marks.
        """
        scratch = Board(self.config, rng=random.Random(0))
        if self._mines_planted:
            scratch.plant_mines_at(mine.position for mine in self._mines)
        return scratch

    # ========================================================================
    # Coordinate Access (Low-level)
    # ========================================================================

    def get(self, x: int, y: int) -> Cell:
        """
        Get the cell at (x, y), wrapping around both axes.

        Any integers are accepted: get(-1, 0) is the last cell of row 0.
        """
        return self._grid[y % self.height][x % self.width]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._grid:
            yield from row

    def neighbours(self, x: int, y: int) -> List[Cell]:
        """
        Get the distinct neighbours of a cell.

        Offsets are visited row by row (dy outer, dx inner). Wrapped
        offsets landing on the cell itself or on an earlier neighbour
        are skipped, so only boards smaller than 3x3 yield fewer than 8.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of neighbouring cells.
        """
        origin = self.get(x, y)
        seen = {origin.position}
        neighbours = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                cell = self.get(origin.x + delta_x, origin.y + delta_y)
                if cell.position in seen:
                    continue
                seen.add(cell.position)
                neighbours.append(cell)
        return neighbours

    def _count_adjacent_mines(self, cell: Cell) -> int:
        """Count mines adjacent to a cell."""
        return sum(
            1 for neighbour in self.neighbours(cell.x, cell.y)
            if neighbour.is_mine
        )

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def plant_mines(self, initial: Optional[Position] = None) -> None:
        """
        Place mines at random, keeping one cell clear.

        Args:
            initial: (x, y) position that must not receive a mine.

        Raises:
            MinesAlreadyPlanted: If mines were planted before.
            InvalidFraction: If the protected cell leaves too few cells.
        """
        self._check_can_plant()
        protected = None
        if initial is not None:
            protected = self.get(*initial).position

        available = self.config.total_cells
        if protected is not None:
            available -= 1
        if self.mines_count > available:
            raise InvalidFraction(
                f"Cannot place {self.mines_count} mines while keeping "
                f"{protected} clear"
            )

        while len(self._mines) < self.mines_count:
            cell = self.get(
                self.rng.randrange(self.width),
                self.rng.randrange(self.height),
            )
            if cell.position == protected:
                continue
            if cell.set_mine():
                self._mines.append(cell.copy(keep_status=True))

        self._mines_planted = True
        self._difficulty = None
        logger.debug(
            "Planted %d mines on %dx%d board, protecting %s",
            self.mines_count, self.width, self.height, protected,
        )

    def plant_mines_at(self, positions: Iterable[Position]) -> None:
        """
        Place mines at fixed positions.

        Args:
            positions: (x, y) positions, wrapped onto the board.

        Raises:
            MinesAlreadyPlanted: If mines were planted before.
            ConfigError: If the distinct positions don't match mines_count.
        """
        self._check_can_plant()
        cells = {}
        for x, y in positions:
            cell = self.get(x, y)
            cells[cell.position] = cell
        if len(cells) != self.mines_count:
            raise ConfigError(
                f"Expected {self.mines_count} mine positions, got {len(cells)}"
            )

        for cell in cells.values():
            cell.set_mine()
            self._mines.append(cell.copy(keep_status=True))

        self._mines_planted = True
        self._difficulty = None

    def _check_can_plant(self) -> None:
        """Reject a second planting."""
        if self._mines_planted:
            raise MinesAlreadyPlanted("Mines have already been planted")

    # ========================================================================
    # Propagation (Mid-level)
    # ========================================================================

    def update_count(self, x: int, y: int) -> None:
        """
        Assign mine counts outward from a cell.

        The start cell gets its count. Whenever a cell has no adjacent
        mines, its unrevealed, unmarked neighbours are processed too,
        which discloses the whole zero region and its numbered border.
        Mines and marked cells are left untouched.
        """
        start = self.get(x, y)
        if start.is_mine or start.is_marked:
            return

        visited: Set[Position] = {start.position}
        stack = [start]
        while stack:
            cell = stack.pop()
            neighbours = self.neighbours(cell.x, cell.y)
            count = sum(1 for neighbour in neighbours if neighbour.is_mine)
            cell.set_adjacent_mine_count(count)
            if count:
                continue
            for neighbour in neighbours:
                if neighbour.position in visited:
                    continue
                if neighbour.is_marked or neighbour.is_revealed:
                    continue
                visited.add(neighbour.position)
                stack.append(neighbour)

    def reveal_all(self) -> None:
        """Reveal every cell, giving each safe cell its true count."""
        for cell in self.cells():
            if cell.is_mine:
                cell.reveal()
            else:
                cell.set_adjacent_mine_count(self._count_adjacent_mines(cell))

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def update(self, x: int, y: int) -> GameStatus:
        """
        Apply the player's selection of a cell.

        On the first move, mines are planted around the selected cell.
        Selecting a mine loses. Otherwise, if the win condition already
        holds, the game is won; if not, the cell is revealed and counts
        propagate from it.

        Args:
            x: Column of the selected cell.
            y: Row of the selected cell.

        Returns:
            The game status after the move.

        Raises:
            TerminalStateViolation: If the game is already won or lost.
        """
        if self._status.is_terminal:
            raise TerminalStateViolation(
                f"Game is over ({self._status.name}), no further moves allowed"
            )

        selected = self.get(x, y)
        if not self._first_move_taken:
            if not self._mines_planted:
                self.plant_mines(selected.position)
            self._first_move_taken = True

        self._move_count += 1

        if selected.is_mine:
            selected.reveal()
            self.reveal_all()
            self._status = GameStatus.LOST
            logger.info(
                "Lost after %d moves at %s", self._move_count, selected.position
            )
        elif self._win_condition_holds():
            selected.reveal()
            self.reveal_all()
            self._status = GameStatus.WON
            logger.info("Won after %d moves", self._move_count)
        else:
            selected.set_marked(False)
            selected.reveal()
            self.update_count(selected.x, selected.y)

        return self._status

    def _win_condition_holds(self) -> bool:
        """
        Check for a win.

        Either every safe cell is revealed, or the marked cells are
        exactly the mines.
        """
        if self.all_safe_revealed:
            return True
        marked = {cell.position for cell in self.cells() if cell.is_marked}
        return marked == self._mine_positions()

    def _mine_positions(self) -> Set[Position]:
        """Positions of all planted mines."""
        return {mine.position for mine in self._mines}

    def mark(self, x: int, y: int) -> bool:
        """
        Toggle the mark on a cell.

        Returns:
            True if the mark was toggled, False if the cell is revealed
            or the game is over.
        """
        if self._status.is_terminal:
            return False
        cell = self.get(x, y)
        if cell.is_revealed:
            return False
        return cell.toggle_mark()

    # ========================================================================
    # Scoring (High-level)
    # ========================================================================

    def difficulty_value(self) -> int:
        """3BV of the current mine layout, cached once mines are planted."""
        if self._difficulty is not None:
            return self._difficulty
        value = scoring.difficulty_value(self)
        if self._mines_planted:
            self._difficulty = value
        return value

    def click_score(self) -> float:
        """Moves taken per 3BV point. Lower is better."""
        return scoring.click_score(self._move_count, self.difficulty_value())

    def presentable_score(self, time_taken: int) -> int:
        """Click score scaled by time taken, rounded. Lower is better."""
        return scoring.presentable_score(self.click_score(), time_taken)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def mine_fraction(self) -> float:
        """Requested share of mined cells."""
        return self.config.mine_fraction

    @property
    def mines_count(self) -> int:
        """Number of mines on the board once planted."""
        return self.config.mines_count

    @property
    def effective_mine_fraction(self) -> float:
        """Share of cells actually holding a mine, after rounding."""
        return self.mines_count / self.config.total_cells

    @property
    def mines(self) -> List[Cell]:
        """Copies of the planted mine cells, as of planting time."""
        return [mine.copy(keep_status=True) for mine in self._mines]

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.CONTINUING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def first_move_taken(self) -> bool:
        """Check if the first move has been played."""
        return self._first_move_taken

    @property
    def move_count(self) -> int:
        """Number of updates applied so far."""
        return self._move_count

    @property
    def all_safe_revealed(self) -> bool:
        """Check if every cell without a mine has been revealed."""
        return all(cell.is_mine or cell.is_revealed for cell in self.cells())

    def has_mine(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) holds a mine."""
        return self.get(x, y).is_mine

    def is_marked(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) is marked."""
        return self.get(x, y).is_marked

    def has_been_revealed(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) has been revealed."""
        return self.get(x, y).is_revealed

    def marked_cells(self) -> List[Cell]:
        """Copies of all marked cells."""
        return [
            cell.copy(keep_status=True)
            for cell in self.cells() if cell.is_marked
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D array indexed [y, x] where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.cells():
            obs[cell.y, cell.x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells worth selecting.

        Returns:
            List of (x, y) positions that are neither revealed nor marked.
        """
        return [cell.position for cell in self.cells() if cell.is_hidden]

    def reset(self) -> None:
        """Reset board to initial state for new game."""
        self._init_grid()
        self._mines = []
        self._status = GameStatus.CONTINUING
        self._mines_planted = False
        self._first_move_taken = False
        self._move_count = 0
        self._difficulty = None
