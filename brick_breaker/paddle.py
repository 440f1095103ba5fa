import pygame

from .config import DEFAULT_CONFIG


class Paddle:
    def __init__(self, config=None):
        self.game_config = config or DEFAULT_CONFIG
        self.config = self.game_config.paddle
        self.width = self.config.width
        self.height = self.config.height
        self.y = self.game_config.height - self.config.bottom_offset
        self.x = 0.0
        self.reset()

    @property
    def max_x(self):
        return self.game_config.width - self.width

    @property
    def center_x(self):
        return self.x + self.width / 2

    @property
    def rect(self):
        return pygame.Rect(round(self.x), self.y, self.width, self.height)

    def reset(self):
        self.x = (self.game_config.width - self.width) / 2

    def update(self, input_state):
        if input_state.is_left():
            self.x -= self.config.speed
        if input_state.is_right():
            self.x += self.config.speed
        if input_state.pointer_active:
            target = input_state.pointer_x - self.width / 2
            self.x += (target - self.x) * self.config.pointer_smoothing
        self.x = max(0, min(self.max_x, self.x))
