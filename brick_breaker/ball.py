import enum
import math

import pygame

from .config import DEFAULT_CONFIG


class BallEvent(enum.Enum):
    """What the ball ran into this frame; the controller acts on the last three."""
    NONE = enum.auto()
    WALL = enum.auto()
    PADDLE = enum.auto()
    BRICK = enum.auto()
    LIFE_LOST = enum.auto()
    CLEARED = enum.auto()


class Ball:
    def __init__(self, config=None):
        self.game_config = config or DEFAULT_CONFIG
        self.config = self.game_config.ball
        self.radius = self.config.radius
        self.speed = self.game_config.ball_speed
        self.x = 0.0
        self.y = 0.0
        self.dx = 0.0
        self.dy = 0.0

    @property
    def rect(self):
        r = self.radius
        return pygame.Rect(round(self.x - r), round(self.y - r), r * 2, r * 2)

    @property
    def velocity(self):
        return math.hypot(self.dx, self.dy)

    def reset(self, paddle, rng):
        self.x = self.game_config.width / 2
        self.y = paddle.y - self.radius - 4
        direction = 1 if rng.random() > 0.5 else -1
        self.dx = self.config.initial_dx * direction
        self.dy = self.config.initial_dy

    def normalize_speed(self):
        speed = self.velocity
        if speed == 0:
            return
        scale = self.speed / speed
        self.dx *= scale
        self.dy *= scale

    def update(self, session):
        self.x += self.dx
        self.y += self.dy
        event = self._collide_walls()

        # Floor: the rest of the frame is skipped
        if self.y + self.radius >= self.game_config.height:
            return BallEvent.LIFE_LOST

        if self._collide_paddle(session.paddle):
            event = BallEvent.PADDLE
        return self._collide_bricks(session) or event

    def _collide_walls(self):
        r = self.radius
        event = BallEvent.NONE
        if self.x - r <= 0:
            self.dx = abs(self.dx)
            self.x = r
            event = BallEvent.WALL
        elif self.x + r >= self.game_config.width:
            self.dx = -abs(self.dx)
            self.x = self.game_config.width - r
            event = BallEvent.WALL
        if self.y - r <= 0:
            self.dy = abs(self.dy)
            self.y = r
            event = BallEvent.WALL
        return event

    def _collide_paddle(self, paddle):
        bottom = self.y + self.radius
        if (
            self.dy > 0
            and paddle.y <= bottom <= paddle.y + paddle.height
            and paddle.x <= self.x <= paddle.x + paddle.width
        ):
            self.y = paddle.y - self.radius
            hit_pos = (self.x - paddle.x) / paddle.width
            self.dx = self.config.max_deflection * (hit_pos - 0.5)
            self.dy = -abs(self.dy)
            self.normalize_speed()
            # sfx: paddle_hit
            return True
        return False

    def _collide_bricks(self, session):
        r = self.radius
        for brick in session.bricks:
            if not brick.alive:
                continue
            b = brick.rect
            if (
                self.x + r > b.left
                and self.x - r < b.right
                and self.y + r > b.top
                and self.y - r < b.bottom
            ):
                brick.alive = False

                # The shallower penetration axis is the face that was struck
                overlap_x = min(self.x + r - b.left, b.right - (self.x - r))
                overlap_y = min(self.y + r - b.top, b.bottom - (self.y - r))
                if overlap_x < overlap_y:
                    self.dx = -self.dx
                else:
                    self.dy = -self.dy

                session.add_score(brick.points)
                session.particles.spawn(b.x + b.width / 2, b.y + b.height / 2, brick.color)
                # sfx: brick_break

                if session.bricks.all_destroyed():
                    return BallEvent.CLEARED
                return BallEvent.BRICK
        return None
