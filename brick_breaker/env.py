import logging
import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from .config import DEFAULT_CONFIG
from .game import Game
from .render import Renderer
from .state import GameState

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

logger = logging.getLogger(__name__)


class GameEnv(gym.Env):
    """Brick breaker as a Gymnasium environment.

    One episode is one game: ``reset`` presses start on a fresh session seeded
    from ``self.np_random`` and ``step`` runs a single tick. The episode ends
    on game over or when the board is cleared.
    """
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = "Controls: ← to move left, → to move right. Space starts a new game."

    # Must be a short, user-facing description of the game:
    game_description = "Deflect the ball with your paddle and break every brick before you run out of lives."

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    MAX_STEPS = 10000

    # Rewards
    REWARD_PER_POINT = 0.1
    REWARD_LIFE_LOST = -10.0
    REWARD_WIN = 100.0
    REWARD_LOSE = -100.0

    def __init__(self, render_mode="rgb_array", config=None):
        super().__init__()
        self.render_mode = render_mode
        self.config = config or DEFAULT_CONFIG

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.config.height, self.config.width, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.config.width, self.config.height))
        self.renderer = Renderer(self.config)

        # State variables are initialized in reset()
        self.game = None
        self.steps = 0

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.game = Game(self.config, rng=self.np_random)
        self.game.handle_start()
        self.steps = 0
        logger.debug("Environment reset with seed %s", seed)

        return self._get_observation(), self._get_info()

    def step(self, action):
        game = self.game
        score_before = game.score
        lives_before = game.lives

        self._apply_action(action)
        state_before = game.state
        game.update()
        self.steps += 1

        reward = (game.score - score_before) * self.REWARD_PER_POINT
        if game.lives < lives_before:
            reward += self.REWARD_LIFE_LOST

        terminated = game.state in (GameState.GAMEOVER, GameState.WIN)
        truncated = not terminated and self.steps >= self.MAX_STEPS
        # Terminal rewards are paid once, on the step that ends the game
        if terminated and state_before is GameState.PLAYING:
            if game.state is GameState.WIN:
                reward += self.REWARD_WIN
            else:
                reward += self.REWARD_LOSE

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info()
        )

    def _apply_action(self, action):
        movement = action[0]
        space_pressed = action[1] == 1

        inp = self.game.input
        left, right = self.config.left_keys[0], self.config.right_keys[0]
        inp.keys[left] = movement == 3
        inp.keys[right] = movement == 4

        if space_pressed:
            self.game.handle_start()

    def _get_observation(self):
        self.renderer.draw(self.screen, self.game)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.game.score,
            "steps": self.steps,
            "lives": self.game.lives,
            "bricks_left": self.game.session.bricks.alive_count(),
            "state": self.game.state.value,
        }

    def render(self):
        return self._get_observation()

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Check the spaces and the reset/step contract.
        '''
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        obs, info = self.reset()
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)

        logger.info("Implementation validated successfully")
