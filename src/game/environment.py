"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the toroidal board.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameStatus
from .display import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden cell
        - -2 = marked cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i selects the cell at (i % width, i // width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for selecting an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 beginner density).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.board = Board(self.config, rng=random.Random(board_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to select (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.board.get_observation()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return action % self.config.width, action // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """
        Apply the move and score its outcome.

        The board only reports a win on the move after the last safe
        cell opens, so that follow-up move is made here on the same
        cell. Otherwise the mask would leave only mines to select.
        """
        if self.board.has_been_revealed(x, y):
            return -0.1

        status = self.board.update(x, y)
        if status == GameStatus.CONTINUING and self.board.all_safe_revealed:
            status = self.board.update(x, y)
        if status == GameStatus.WON:
            return 10.0
        if status == GameStatus.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(1 for cell in self.board.cells() if cell.is_revealed)
        info = {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self.config.total_cells - self.config.mines_count,
            "game_status": self.board.status.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }
        if not self.board.is_playing:
            info["difficulty"] = self.board.difficulty_value()
            info["click_score"] = self.board.click_score()
        return info

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.board.get_valid_actions():
            mask[y * self.config.width + x] = True
        return mask
