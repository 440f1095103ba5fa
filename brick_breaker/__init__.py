from .config import DEFAULT_CONFIG, GameConfig
from .errors import BrickBreakerError, ConfigError, InvalidTransition
from .game import Game, Session
from .state import GameEvent, GameState

__all__ = [
    "DEFAULT_CONFIG",
    "BrickBreakerError",
    "ConfigError",
    "Game",
    "GameConfig",
    "GameEvent",
    "GameState",
    "InvalidTransition",
    "Session",
]
