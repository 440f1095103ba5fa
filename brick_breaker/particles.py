from dataclasses import dataclass

from .config import DEFAULT_CONFIG, Color


@dataclass
class Particle:
    x: float
    y: float
    dx: float
    dy: float
    radius: float
    color: Color
    life: float = 1.0


class ParticleSystem:
    """Short-lived dots thrown out when a brick breaks.

    There is no cap on the number of live particles; each one fades out after
    ``1 / decay`` frames.
    """

    def __init__(self, rng, config=None):
        self.rng = rng
        self.config = (config or DEFAULT_CONFIG).particles
        self.items = []

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def spawn(self, x, y, color):
        cfg = self.config
        for _ in range(cfg.count):
            self.items.append(Particle(
                x=x,
                y=y,
                dx=(self.rng.random() - 0.5) * cfg.speed,
                dy=(self.rng.random() - 0.5) * cfg.speed,
                radius=self.rng.random() * cfg.max_radius + cfg.min_radius,
                color=color,
            ))

    def update(self):
        for p in self.items:
            p.x += p.dx
            p.y += p.dy
            p.life -= self.config.decay
        self.items = [p for p in self.items if p.life > 0]

    def clear(self):
        self.items.clear()
