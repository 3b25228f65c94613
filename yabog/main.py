#!/usr/bin/env python3
"""YABOG - Standalone Entry Point.

Usage:
    python -m yabog.main
    python -m yabog.main --seed 42
    python -m yabog.main --resizable --bonus-spawn
"""

import argparse
import sys
from typing import List, Optional

import pygame

from yabog.config import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from yabog.game_mode import BreakoutMode, GameConfig
from yabog.input import KeyboardControlSource
from yabog.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the standalone game."""
    parser = argparse.ArgumentParser(description="YABOG - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap (0=uncapped)')
    parser.add_argument('--resizable', action='store_true', help='Allow resizing the window')

    # Game options
    parser.add_argument('--seed', type=int, default=None, help='Random seed for the board and balls')
    parser.add_argument('--bonus-spawn', action='store_true',
                        help='Destroying a bonus block adds a ball')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Default log level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run YABOG standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()

    try:
        flags = pygame.RESIZABLE if args.resizable else 0
        pygame.display.set_mode((args.width, args.height), flags)
        pygame.display.set_caption(WINDOW_TITLE)

        game = BreakoutMode(
            screen_size=lambda: pygame.display.get_surface().get_size(),
            config=GameConfig(spawn_ball_on_bonus_death=args.bonus_spawn),
            seed=args.seed,
        )
        controls = KeyboardControlSource()

        clock = pygame.time.Clock()
        running = True

        log.info("Controls: LEFT/RIGHT move, SPACE adds a ball, R restarts, ESC quits")

        while running:
            dt = clock.tick(args.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                        controls.clear()
                controls.handle_event(event)

            game.handle_input(controls.poll())
            game.update(dt)

            game.render(pygame.display.get_surface())
            pygame.display.flip()
    except Exception:
        log.exception("Game crashed")
        raise
    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
