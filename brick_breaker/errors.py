class BrickBreakerError(Exception):
    """Base class for errors raised by the game package."""


class ConfigError(BrickBreakerError, ValueError):
    """A configuration table is inconsistent or out of range."""


class InvalidTransition(BrickBreakerError):
    """A state machine event is not defined for the current state."""

    def __init__(self, state, event):
        super().__init__(f"No transition from {state.value!r} on {event.name}")
        self.state = state
        self.event = event
