"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
content (mine/adjacent count) and display flags (revealed/marked).
"""
from dataclasses import dataclass, field
from typing import Tuple

from .errors import InvalidCount


# ============================================================================
# Constants
# ============================================================================

MAX_NEIGHBOURS = 8

Position = Tuple[int, int]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Equality only looks at position and content, never at the
    revealed/marked flags.

    Attributes:
        x: Column index, fixed at creation.
        y: Row index, fixed at creation.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        is_revealed: Whether the cell has been shown to the player.
        is_marked: Whether the player has marked the cell as a mine.
    """

    x: int
    y: int
    is_mine: bool = False
    adjacent_mines: int = 0
    is_revealed: bool = field(default=False, compare=False)
    is_marked: bool = field(default=False, compare=False)

    @property
    def position(self) -> Position:
        """(x, y) coordinates of this cell."""
        return self.x, self.y

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor marked."""
        return not (self.is_revealed or self.is_marked)

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was newly revealed, False if it was
            already revealed.
        """
        if self.is_revealed:
            return False
        self.is_revealed = True
        return True

    def mark(self) -> bool:
        """Mark this cell. Returns False if it was already marked."""
        return self.set_marked(True)

    def set_marked(self, marked: bool) -> bool:
        """
        Set the marked flag.

        Returns:
            True if the flag changed.
        """
        if self.is_marked == marked:
            return False
        self.is_marked = marked
        return True

    def toggle_mark(self) -> bool:
        """Flip the marked flag. Always succeeds."""
        return self.set_marked(not self.is_marked)

    def set_mine(self) -> bool:
        """
        Turn this cell into a mine.

        Returns:
            True if the cell became a mine, False if it already was one.
        """
        if self.is_mine:
            return False
        self.is_mine = True
        self.adjacent_mines = 0
        return True

    def set_adjacent_mine_count(self, count: int) -> None:
        """
        Store the number of neighbouring mines and reveal the cell.

        Args:
            count: Mines among the neighbours, 0 to MAX_NEIGHBOURS.

        Raises:
            InvalidCount: If count is outside [0, MAX_NEIGHBOURS].
        """
        if count < 0:
            raise InvalidCount(
                f"Number of neighbouring mines can't be negative: {count}"
            )
        if count > MAX_NEIGHBOURS:
            raise InvalidCount(
                f"Number of neighbouring mines can't exceed "
                f"{MAX_NEIGHBOURS}: {count}"
            )
        self.is_mine = False
        self.adjacent_mines = count
        self.reveal()

    def copy(self, keep_status: bool = False) -> "Cell":
        """
        Copy this cell.

        Args:
            keep_status: Also copy the revealed/marked flags.
        """
        cell = Cell(self.x, self.y, self.is_mine, self.adjacent_mines)
        if keep_status:
            cell.is_revealed = self.is_revealed
            cell.is_marked = self.is_marked
        return cell

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            -2: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if not self.is_revealed:
            return -2 if self.is_marked else -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
