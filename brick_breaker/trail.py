from collections import deque

from .config import DEFAULT_CONFIG


class Trail:
    """Most recent ball positions, oldest first."""

    def __init__(self, config=None):
        self.config = (config or DEFAULT_CONFIG).trail
        self.points = deque(maxlen=self.config.max_length)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def update(self, x, y):
        self.points.append((x, y))

    def clear(self):
        self.points.clear()

    def fade(self):
        """Yield ``(x, y, alpha, scale)`` for each point; older points are fainter and smaller."""
        n = len(self.points)
        for i, (x, y) in enumerate(self.points):
            yield x, y, (i / n) * self.config.max_alpha, i / n
