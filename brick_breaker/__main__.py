import argparse
import logging
import sys

import pygame

from .game import Game

logger = logging.getLogger("brick_breaker")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Brick Breaker - deflect the ball, break the bricks")
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for ball launches and particle bursts (default: random)')
    parser.add_argument('--fps', type=int, default=60,
                        help='Frame rate cap (default: 60)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def handle_event(game, event):
    """Forward one pygame event to the game. Returns False when the player quits."""
    inp = game.input
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        key = pygame.key.name(event.key)
        inp.key_down(key)
        if inp.is_start(key):
            game.handle_start()
    elif event.type == pygame.KEYUP:
        inp.key_up(pygame.key.name(event.key))
    elif event.type == pygame.MOUSEMOTION:
        inp.pointer_move(event.pos[0])
    elif event.type == pygame.WINDOWENTER:
        inp.pointer_enter()
    elif event.type == pygame.WINDOWLEAVE:
        inp.pointer_leave()
    elif event.type == pygame.WINDOWFOCUSLOST:
        inp.release_all()
    elif event.type == pygame.MOUSEBUTTONDOWN:
        game.handle_start()
    return True


def main(argv=None):
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = Game(seed=args.seed)

    pygame.init()
    screen = pygame.display.set_mode((game.config.width, game.config.height))
    pygame.display.set_caption("Brick Breaker")
    clock = pygame.time.Clock()
    logger.info("Window opened at %dx%d, %d fps", game.config.width, game.config.height, args.fps)

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(game, event):
                running = False

        game.update()
        game.render(screen)
        pygame.display.flip()

        clock.tick(args.fps)

    logger.info("Exiting with score %d", game.score)
    pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
