"""
Scoring module for Minesweeper game.

Computes the 3BV difficulty of a mine layout and the click-based
scores derived from it. All functions are pure: the board passed in
is never modified.
"""
import math
from typing import TYPE_CHECKING, Set, Tuple

if TYPE_CHECKING:
    from .board import Board
    from .cell import Cell


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


# ============================================================================
# 3BV Difficulty
# ============================================================================

def difficulty_value(board: "Board") -> int:
    """
    Compute the 3BV value of the board's mine layout.

    3BV approximates the minimum number of clicks needed to clear the
    board: one per connected region of zero cells (the region also
    absorbs the numbered cells bordering it) plus one per remaining
    non-mine cell.

    Args:
        board: Board whose mine layout is measured.

    Returns:
        The 3BV value. Player reveals and marks have no influence.
    """
    scratch = board.scratch_copy()
    for cell in scratch.cells():
        scratch.update_count(cell.x, cell.y)

    absorbed: Set[Tuple[int, int]] = set()
    value = 0
    for cell in scratch.cells():
        if cell.is_mine or cell.adjacent_mines or cell.position in absorbed:
            continue
        value += 1
        absorbed |= _zero_region(scratch, cell)

    for cell in scratch.cells():
        if not cell.is_mine and cell.position not in absorbed:
            value += 1
    return value


def _zero_region(board: "Board", start: "Cell") -> Set[Tuple[int, int]]:
    """Positions of the zero region containing start, with its border."""
    region = {start.position}
    stack = [start]
    while stack:
        cell = stack.pop()
        for neighbour in board.neighbours(cell.x, cell.y):
            if neighbour.position in region:
                continue
            region.add(neighbour.position)
            if neighbour.adjacent_mines == 0 and not neighbour.is_mine:
                stack.append(neighbour)
    return region


# ============================================================================
# Scores
# ============================================================================

def click_score(moves: int, difficulty: int) -> float:
    """
    Clicks taken per 3BV point. Lower is better.

    Usually above 1 for a won game and below 1 for a lost one.
    Returns 0.0 for a layout with no safe cells.
    """
    if difficulty == 0:
        return 0.0
    return moves / difficulty


def presentable_score(score: float, time_taken: int) -> int:
    """
    Scale a click score by elapsed time. Lower is better.

    Raises:
        ValueError: If time_taken is negative.
    """
    if time_taken < 0:
        raise ValueError(f"Time taken can't be negative: {time_taken}")
    return round_half_up(score * time_taken)
