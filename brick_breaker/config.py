"""Tunable constants for the game.

Every component takes its table from a ``GameConfig``; ``DEFAULT_CONFIG`` is
used when none is passed, which keeps tests free to shrink the board.
"""

import math
from dataclasses import dataclass, field
from typing import Tuple

from .errors import ConfigError

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class PaddleConfig:
    width: int = 120
    height: int = 14
    speed: float = 7
    bottom_offset: int = 30
    color: Color = (0, 217, 255)
    # 1.0 snaps the paddle center to the pointer, smaller values ease toward it
    pointer_smoothing: float = 1.0


@dataclass(frozen=True)
class BallConfig:
    radius: int = 8
    initial_dx: float = 4
    initial_dy: float = -4
    color: Color = (255, 255, 255)
    max_deflection: float = 6


@dataclass(frozen=True)
class BrickConfig:
    rows: int = 5
    cols: int = 10
    width: int = 68
    height: int = 20
    padding: int = 6
    offset_top: int = 50
    offset_left: int = 35
    colors: Tuple[Color, ...] = (
        (255, 0, 110), (251, 86, 7), (255, 190, 11),
        (131, 56, 236), (58, 134, 255)
    )
    points: Tuple[int, ...] = (50, 40, 30, 20, 10)


@dataclass(frozen=True)
class ParticleConfig:
    count: int = 8
    speed: float = 6
    decay: float = 0.03
    max_radius: float = 3
    min_radius: float = 1


@dataclass(frozen=True)
class TrailConfig:
    max_length: int = 10
    max_alpha: float = 0.3


@dataclass(frozen=True)
class GameConfig:
    width: int = 800
    height: int = 600
    lives: int = 3
    paddle: PaddleConfig = field(default_factory=PaddleConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    bricks: BrickConfig = field(default_factory=BrickConfig)
    particles: ParticleConfig = field(default_factory=ParticleConfig)
    trail: TrailConfig = field(default_factory=TrailConfig)

    # Pygame key names (see ``pygame.key.name``)
    left_keys: Tuple[str, ...] = ("left", "a")
    right_keys: Tuple[str, ...] = ("right", "d")
    start_keys: Tuple[str, ...] = ("space", "return", "enter")

    # Colors
    background: Color = (0, 0, 0)
    text_color: Color = (255, 255, 255)
    title_color: Color = (0, 217, 255)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Field size must be positive, got {self.width}x{self.height}")
        if self.lives < 1:
            raise ConfigError(f"A game needs at least one life, got {self.lives}")
        if self.paddle.width <= 0 or self.paddle.width > self.width:
            raise ConfigError(f"Paddle width {self.paddle.width} does not fit a field {self.width} wide")
        if not 0 < self.paddle.pointer_smoothing <= 1:
            raise ConfigError(f"Pointer smoothing must be in (0, 1], got {self.paddle.pointer_smoothing}")
        if self.ball.radius <= 0:
            raise ConfigError(f"Ball radius must be positive, got {self.ball.radius}")
        if self.ball_speed == 0:
            raise ConfigError("Ball launch velocity must be non-zero")
        bricks = self.bricks
        if bricks.rows < 1 or bricks.cols < 1:
            raise ConfigError(f"Brick grid must have at least one cell, got {bricks.rows}x{bricks.cols}")
        if len(bricks.colors) < bricks.rows or len(bricks.points) < bricks.rows:
            raise ConfigError(
                f"Brick tiers cover {min(len(bricks.colors), len(bricks.points))} rows, "
                f"grid has {bricks.rows}"
            )
        if self.trail.max_length < 1:
            raise ConfigError(f"Trail length must be positive, got {self.trail.max_length}")

    @property
    def ball_speed(self):
        """Launch speed; paddle bounces renormalise the ball to this magnitude."""
        return math.hypot(self.ball.initial_dx, self.ball.initial_dy)


DEFAULT_CONFIG = GameConfig()
