import logging

import numpy as np

from .ball import Ball, BallEvent
from .bricks import BrickGrid
from .config import DEFAULT_CONFIG
from .input_state import InputState
from .paddle import Paddle
from .particles import ParticleSystem
from .render import Renderer
from .state import GameEvent, GameState, can_transition, transition
from .trail import Trail

logger = logging.getLogger(__name__)


class Session:
    """Everything one game mutates; handed to the components that need it."""

    def __init__(self, config, rng):
        self.config = config
        self.rng = rng
        self.score = 0
        self.lives = config.lives
        self.paddle = Paddle(config)
        self.ball = Ball(config)
        self.bricks = BrickGrid(config)
        self.particles = ParticleSystem(rng, config)
        self.trail = Trail(config)
        self.reposition()

    def add_score(self, points):
        self.score += points

    def reposition(self):
        self.paddle.reset()
        self.ball.reset(self.paddle, self.rng)
        self.trail.clear()


class Game:
    """Brick breaker controller.

    The host calls ``update()`` then ``render(surface)`` once per tick and
    forwards input through ``self.input`` and ``handle_start()``. Pass ``rng``
    (a ``numpy.random.Generator``) or ``seed`` for reproducible launches and
    particle bursts.
    """

    def __init__(self, config=None, rng=None, seed=None):
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.input = InputState(self.config)
        self.session = Session(self.config, self.rng)
        self.state = GameState.START
        self._renderer = None

    @property
    def score(self):
        return self.session.score

    @property
    def lives(self):
        return self.session.lives

    @property
    def is_playing(self):
        return self.state is GameState.PLAYING

    def _fire(self, event):
        new_state = transition(self.state, event)
        logger.debug("State %s -> %s on %s", self.state.value, new_state.value, event.name)
        self.state = new_state

    def handle_start(self):
        if not can_transition(self.state, GameEvent.START_PRESSED):
            return False
        self.reset()
        self._fire(GameEvent.START_PRESSED)
        return True

    def reset(self):
        s = self.session
        s.score = 0
        s.lives = self.config.lives
        s.bricks.create()
        s.reposition()
        logger.info("New game: %d bricks, %d lives", s.bricks.alive_count(), s.lives)

    def lose_life(self):
        s = self.session
        s.lives -= 1
        # sfx: life_lost
        if s.lives <= 0:
            logger.info("Game over with score %d", s.score)
            self._fire(GameEvent.LAST_LIFE_LOST)
        else:
            logger.info("Life lost, %d remaining", s.lives)
            s.reposition()

    def add_score(self, points):
        self.session.add_score(points)

    def update(self):
        s = self.session
        # Particles keep fading after the game ends
        s.particles.update()
        if not self.is_playing:
            return BallEvent.NONE

        s.paddle.update(self.input)
        event = s.ball.update(s)
        if event is BallEvent.LIFE_LOST:
            self.lose_life()
        elif event is BallEvent.CLEARED:
            logger.info("Board cleared with score %d", s.score)
            self._fire(GameEvent.BOARD_CLEARED)
        s.trail.update(s.ball.x, s.ball.y)
        return event

    def render(self, surface):
        if self._renderer is None:
            self._renderer = Renderer(self.config)
        self._renderer.draw(surface, self)
