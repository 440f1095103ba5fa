import enum

from .errors import InvalidTransition


class GameState(enum.Enum):
    START = "start"
    PLAYING = "playing"
    GAMEOVER = "gameover"
    WIN = "win"


class GameEvent(enum.Enum):
    START_PRESSED = enum.auto()
    LAST_LIFE_LOST = enum.auto()
    BOARD_CLEARED = enum.auto()


TRANSITIONS = {
    (GameState.START, GameEvent.START_PRESSED): GameState.PLAYING,
    (GameState.GAMEOVER, GameEvent.START_PRESSED): GameState.PLAYING,
    (GameState.WIN, GameEvent.START_PRESSED): GameState.PLAYING,
    (GameState.PLAYING, GameEvent.LAST_LIFE_LOST): GameState.GAMEOVER,
    (GameState.PLAYING, GameEvent.BOARD_CLEARED): GameState.WIN,
}


def can_transition(state, event):
    return (state, event) in TRANSITIONS


def transition(state, event):
    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransition(state, event) from None
