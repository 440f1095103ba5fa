# tests/test_state.py
import unittest

from brick_breaker.errors import InvalidTransition
from brick_breaker.state import GameEvent, GameState, TRANSITIONS, can_transition, transition


class TestTransitions(unittest.TestCase):
    def test_start_press_from_idle_states(self):
        for state in (GameState.START, GameState.GAMEOVER, GameState.WIN):
            self.assertEqual(transition(state, GameEvent.START_PRESSED), GameState.PLAYING)

    def test_playing_outcomes(self):
        self.assertEqual(transition(GameState.PLAYING, GameEvent.LAST_LIFE_LOST), GameState.GAMEOVER)
        self.assertEqual(transition(GameState.PLAYING, GameEvent.BOARD_CLEARED), GameState.WIN)

    def test_undefined_transitions_raise(self):
        with self.assertRaises(InvalidTransition) as ctx:
            transition(GameState.PLAYING, GameEvent.START_PRESSED)
        self.assertIs(ctx.exception.state, GameState.PLAYING)
        self.assertIs(ctx.exception.event, GameEvent.START_PRESSED)
        with self.assertRaises(InvalidTransition):
            transition(GameState.WIN, GameEvent.LAST_LIFE_LOST)

    def test_can_transition_matches_table(self):
        for state in GameState:
            for event in GameEvent:
                self.assertEqual(can_transition(state, event), (state, event) in TRANSITIONS)

    def test_terminal_states_only_leave_on_start(self):
        for state in (GameState.GAMEOVER, GameState.WIN):
            allowed = [e for e in GameEvent if can_transition(state, e)]
            self.assertEqual(allowed, [GameEvent.START_PRESSED])


if __name__ == "__main__":
    unittest.main()
