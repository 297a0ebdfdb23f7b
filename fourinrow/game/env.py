"""
env.py - Gymnasium environment over a GameSession

ConnectFourEnv lets a caller drive the engine through the standard
reset/step protocol. Both players move through step(); rewards are from
player one's point of view.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from fourinrow.debug import debug
from fourinrow.exceptions import MoveError
from fourinrow.game.rules import GameSession
from fourinrow.utils import ROWS, COLS, WinState


class ConnectFourEnv(gym.Env):
    """
    Four-in-a-row environment following the Gymnasium interface.

    A rejected move does not change the board; the episode is truncated and
    info['invalid_move'] is set.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, session: Optional[GameSession] = None):
        """
        Initialize the environment.

        Args:
            render_mode: "ascii", "human" or None
            session: Session to drive; a new one is created if omitted
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        # 6x7 board, row 0 at the bottom, cells 0 (empty), 1 or 2
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.session = session if session is not None else GameSession()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Start a new game and return the initial observation and info."""
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.session.reset_board()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Play the current player's piece in column `action`.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.trace(f"Environment step with action {action}", "env")

        try:
            self.session.play_piece(action)
        except MoveError as err:
            debug.warning(f"Invalid action {action!r}: {err}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = type(err).__name__
            return self._get_observation(), self.reward_invalid_move, False, True, info

        state = self.session.check_for_win()
        terminated = state.is_game_over()
        if state == WinState.PLAYER_ONE_WIN:
            reward = self.reward_win
        elif state == WinState.PLAYER_TWO_WIN:
            reward = self.reward_lose
        elif state == WinState.TIE:
            reward = self.reward_draw
        else:
            reward = self.reward_step

        if terminated:
            debug.info(f"Game over: {state.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.session.render()
        if self.render_mode == "human":
            print(self.session.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.session.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.session.valid_moves()
        line = self.session.winning_line()
        history = self.session.move_history()

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.session.current_turn_player().value,
            'game_result': self.session.check_for_win().name,
            'moves_made': self.session.current_turn(),
            'winning_line': list(line.indices) if line is not None else [],
            'last_move': history[-1] if history else None
        }
