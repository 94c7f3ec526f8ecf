"""
Text display helpers for Minesweeper game.

Renders the board as an indexed ASCII grid and formats elapsed
play time for the terminal driver.
"""
from .board import Board


_GLYPHS = {-1: ".", -2: "F", 9: "*", 0: " "}


def render_board(board: Board) -> str:
    """
    Render board as an ASCII grid with column and row indices.

    Hidden cells show ".", marked cells "F", revealed mines "*",
    revealed empty cells a blank and numbered cells their count.
    """
    obs = board.get_observation()
    cell_width = len(str(board.width - 1))
    label_width = len(str(board.height - 1))

    header = " " * (label_width + 1) + " ".join(
        str(x).rjust(cell_width) for x in range(board.width)
    )
    lines = [header]
    for y in range(board.height):
        glyphs = " ".join(
            _GLYPHS.get(int(value), str(int(value))).rjust(cell_width)
            for value in obs[y]
        )
        lines.append(f"{str(y).rjust(label_width)} {glyphs}")
    return "\n".join(lines)


def format_elapsed(seconds: float) -> str:
    """
    Format a duration as minutes and seconds.

    Minutes are omitted when zero: 65 -> "1 minute 5 seconds",
    1 -> "1 second".
    """
    total = int(seconds)
    minutes, secs = divmod(total, 60)
    parts = []
    if minutes > 0:
        parts.append(f"{minutes} minute{'' if minutes == 1 else 's'}")
    parts.append(f"{secs} second{'' if secs == 1 else 's'}")
    return " ".join(parts)
