import pygame
import pygame.gfxdraw

from .config import DEFAULT_CONFIG
from .state import GameState

FONT_NAME = "segoeui,arial,sans"


def shade_color(color, amt):
    return tuple(max(0, min(255, c + amt)) for c in color)


class Renderer:
    """Draws a game onto a surface the size of the field, back to front."""

    # Layers per state; non-playing states end with an overlay
    LAYERS = {
        GameState.PLAYING: ("bricks", "trail", "paddle", "ball", "particles", "hud"),
        GameState.START: ("bricks", "paddle", "ball", "particles"),
        GameState.GAMEOVER: ("bricks", "paddle", "particles"),
        GameState.WIN: ("particles",),
    }

    GLOW_SIZE = 6

    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG
        pygame.font.init()
        self.font_hud = pygame.font.SysFont(FONT_NAME, 16)
        self.font_title = pygame.font.SysFont(FONT_NAME, 48, bold=True)
        self.font_subtitle = pygame.font.SysFont(FONT_NAME, 18)
        self._brick_surfaces = {}
        self._veil = None

    def draw(self, surface, game):
        surface.fill(self.config.background)
        for layer in self.LAYERS[game.state]:
            getattr(self, f"_draw_{layer}")(surface, game.session)

        overlay = self.overlay_text(game.state, game.score)
        if overlay:
            self._draw_overlay(surface, *overlay)

    @staticmethod
    def overlay_text(state, score):
        if state is GameState.START:
            return "BRICK BREAKER", "Click or press Space to start"
        if state is GameState.GAMEOVER:
            return "GAME OVER", f"Final Score: {score} \u2014 Click or press Space to retry"
        if state is GameState.WIN:
            return "YOU WIN!", f"Score: {score} \u2014 Click or press Space to play again"
        return None

    # --- Layers ---

    def _draw_bricks(self, surface, session):
        for brick in session.bricks:
            if not brick.alive:
                continue
            surface.blit(self._brick_surface(brick.color, brick.rect.size), brick.rect.topleft)

    def _brick_surface(self, color, size):
        key = (color, size)
        if key in self._brick_surfaces:
            return self._brick_surfaces[key]

        w, h = size
        surf = pygame.Surface(size, pygame.SRCALPHA)
        # Vertical gradient from the tier color to a darker shade
        bottom = shade_color(color, -30)
        for y in range(h):
            t = y / max(1, h - 1)
            line = tuple(int(a * (1 - t) + b * t) for a, b in zip(color, bottom))
            pygame.draw.line(surf, (*line, 255), (0, y), (w, y))

        # Round the corners by clipping the alpha against a rounded mask
        mask = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.rect(mask, (255, 255, 255, 255), mask.get_rect(), border_radius=4)
        surf.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)

        # Top highlight
        highlight = pygame.Surface((max(1, w - 4), max(1, h // 2 - 2)), pygame.SRCALPHA)
        pygame.draw.rect(highlight, (255, 255, 255, 38), highlight.get_rect(), border_radius=2)
        surf.blit(highlight, (2, 2))

        self._brick_surfaces[key] = surf
        return surf

    def _draw_trail(self, surface, session):
        color = self.config.ball.color
        radius = self.config.ball.radius
        for x, y, alpha, scale in session.trail.fade():
            self._blit_circle(surface, color, x, y, radius * scale, alpha)

    def _draw_paddle(self, surface, session):
        paddle = session.paddle
        color = self.config.paddle.color
        rect = paddle.rect

        g = self.GLOW_SIZE
        glow = pygame.Surface((rect.width + g * 2, rect.height + g * 2), pygame.SRCALPHA)
        for i in range(g, 0, -1):
            alpha = int(60 * (1 - i / (g + 1)))
            glow_rect = pygame.Rect(g - i, g - i, rect.width + i * 2, rect.height + i * 2)
            pygame.draw.rect(glow, (*color, alpha), glow_rect, border_radius=6 + i)
        surface.blit(glow, (rect.x - g, rect.y - g))

        pygame.draw.rect(surface, color, rect, border_radius=6)

    def _draw_ball(self, surface, session):
        ball = session.ball
        x, y = int(ball.x), int(ball.y)
        pygame.gfxdraw.filled_circle(surface, x, y, ball.radius, self.config.ball.color)
        pygame.gfxdraw.aacircle(surface, x, y, ball.radius, self.config.ball.color)

    def _draw_particles(self, surface, session):
        for p in session.particles:
            self._blit_circle(surface, p.color, p.x, p.y, p.radius, p.life)

    def _draw_hud(self, surface, session):
        color = self.config.text_color
        score_text = self.font_hud.render(f"Score: {session.score}", True, color)
        surface.blit(score_text, score_text.get_rect(bottomleft=(15, 25)))

        lives_text = self.font_hud.render(f"Lives: {session.lives}", True, color)
        surface.blit(lives_text, lives_text.get_rect(bottomright=(self.config.width - 15, 25)))

    def _draw_overlay(self, surface, title, subtitle):
        w, h = self.config.width, self.config.height
        if self._veil is None:
            self._veil = pygame.Surface((w, h), pygame.SRCALPHA)
            self._veil.fill((0, 0, 0, 178))
        surface.blit(self._veil, (0, 0))

        title_text = self.font_title.render(title, True, self.config.title_color)
        surface.blit(title_text, title_text.get_rect(midbottom=(w // 2, h // 2 - 20)))

        subtitle_text = self.font_subtitle.render(subtitle, True, self.config.text_color)
        surface.blit(subtitle_text, subtitle_text.get_rect(midbottom=(w // 2, h // 2 + 25)))

    @staticmethod
    def _blit_circle(surface, color, x, y, radius, alpha):
        r = max(1, round(radius))
        a = int(255 * max(0.0, min(1.0, alpha)))
        if a == 0:
            return
        dot = pygame.Surface((r * 2 + 1, r * 2 + 1), pygame.SRCALPHA)
        pygame.gfxdraw.filled_circle(dot, r, r, r, (*color, a))
        surface.blit(dot, (int(x) - r, int(y) - r))
