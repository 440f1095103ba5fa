import pygame

from .config import DEFAULT_CONFIG


class Brick:
    def __init__(self, row, col, rect, color, points):
        self.row = row
        self.col = col
        self.rect = rect
        self.color = color
        self.points = points
        self.alive = True

    def __repr__(self):
        state = "alive" if self.alive else "dead"
        return f"Brick(row={self.row}, col={self.col}, points={self.points}, {state})"


class BrickGrid:
    """rows x cols bricks; the row index picks the color and point tier."""

    def __init__(self, config=None):
        self.config = (config or DEFAULT_CONFIG).bricks
        self.bricks = []
        self.create()

    def create(self):
        cfg = self.config
        self.bricks = []
        for r in range(cfg.rows):
            row = []
            for c in range(cfg.cols):
                rect = pygame.Rect(
                    cfg.offset_left + c * (cfg.width + cfg.padding),
                    cfg.offset_top + r * (cfg.height + cfg.padding),
                    cfg.width,
                    cfg.height
                )
                row.append(Brick(r, c, rect, cfg.colors[r], cfg.points[r]))
            self.bricks.append(row)

    def __iter__(self):
        # Row-major, which is also the collision scan order
        for row in self.bricks:
            yield from row

    def __getitem__(self, index):
        r, c = index
        return self.bricks[r][c]

    def alive(self):
        return [b for b in self if b.alive]

    def alive_count(self):
        return sum(1 for b in self if b.alive)

    def all_destroyed(self):
        return not any(b.alive for b in self)
