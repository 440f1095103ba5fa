# tests/test_render.py
import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from brick_breaker.game import Game
from brick_breaker.render import Renderer, shade_color
from brick_breaker.state import GameState


class TestShadeColor(unittest.TestCase):
    def test_clamps_channels(self):
        self.assertEqual(shade_color((10, 250, 100), -30), (0, 220, 70))
        self.assertEqual(shade_color((10, 250, 100), 30), (40, 255, 130))


class TestOverlayText(unittest.TestCase):
    def test_titles(self):
        self.assertEqual(Renderer.overlay_text(GameState.START, 0)[0], "BRICK BREAKER")
        self.assertIn("Final Score: 70", Renderer.overlay_text(GameState.GAMEOVER, 70)[1])
        self.assertEqual(Renderer.overlay_text(GameState.WIN, 300)[0], "YOU WIN!")
        self.assertIn("Score: 300", Renderer.overlay_text(GameState.WIN, 300)[1])
        self.assertIsNone(Renderer.overlay_text(GameState.PLAYING, 10))

    def test_subtitles_use_an_em_dash(self):
        self.assertEqual(
            Renderer.overlay_text(GameState.GAMEOVER, 70)[1],
            "Final Score: 70 — Click or press Space to retry"
        )
        self.assertEqual(
            Renderer.overlay_text(GameState.WIN, 300)[1],
            "Score: 300 — Click or press Space to play again"
        )


class TestRenderer(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    def setUp(self):
        self.game = Game(seed=2)
        self.surface = pygame.Surface((self.game.config.width, self.game.config.height))

    def pixel(self, x, y):
        return tuple(self.surface.get_at((x, y)))[:3]

    def test_every_state_has_a_layer_stack(self):
        for state in GameState:
            self.assertIn(state, Renderer.LAYERS)
        self.assertEqual(Renderer.LAYERS[GameState.PLAYING][-1], "hud")
        self.assertEqual(Renderer.LAYERS[GameState.WIN], ("particles",))

    def test_playing_draws_bricks_and_paddle(self):
        self.game.handle_start()
        self.game.render(self.surface)
        # Lower half of brick (0, 0), below the highlight
        self.assertNotEqual(self.pixel(69, 64), (0, 0, 0))
        paddle = self.game.session.paddle.rect
        self.assertEqual(self.pixel(*paddle.center), self.game.config.paddle.color)

    def test_dead_bricks_are_not_drawn(self):
        self.game.handle_start()
        self.game.session.bricks[0, 0].alive = False
        self.game.render(self.surface)
        self.assertEqual(self.pixel(69, 64), (0, 0, 0))

    def test_start_screen_is_veiled(self):
        self.game.render(self.surface)
        veiled = self.pixel(69, 64)
        self.game.handle_start()
        self.game.render(self.surface)
        bright = self.pixel(69, 64)
        self.assertNotEqual(veiled, (0, 0, 0))
        self.assertLess(sum(veiled), sum(bright))

    def test_win_screen_hides_the_board(self):
        self.game.handle_start()
        self.game.state = GameState.WIN
        self.game.render(self.surface)
        self.assertEqual(self.pixel(69, 64), (0, 0, 0))
        self.assertEqual(self.pixel(*self.game.session.paddle.rect.center), (0, 0, 0))

    def test_rendering_with_particles_and_trail(self):
        self.game.handle_start()
        self.game.session.particles.spawn(400, 300, (255, 190, 11))
        for _ in range(12):
            self.game.update()
        self.game.render(self.surface)
        self.assertEqual(len(self.game.session.trail), 10)


if __name__ == "__main__":
    unittest.main()
