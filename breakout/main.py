#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    breakout
    breakout --width 600 --height 900     # compact viewport
    breakout --levels my_levels.yaml
    breakout --log-level DEBUG
"""

import argparse
import sys
from typing import List, Optional

import pygame

from breakout.config import REFERENCE_WIDTH, REFERENCE_HEIGHT
from breakout.game_mode import BreakoutMode
from breakout.input.sources import KeyboardPointerSource
from breakout.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from the game's declared arguments."""
    parser = argparse.ArgumentParser(description="Breakout - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=REFERENCE_WIDTH, help='Viewport width')
    parser.add_argument('--height', type=int, default=REFERENCE_HEIGHT, help='Viewport height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=60, help='Target ticks per second')

    for arg in BreakoutMode.get_arguments():
        kwargs = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **kwargs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Breakout standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()
    pygame.font.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    width, height = screen.get_size()

    pygame.display.set_caption("Breakout")

    game = BreakoutMode(
        skin=args.skin,
        levels=args.levels,
        transition_delay=args.transition_delay,
        width=width,
        height=height,
    )
    source = KeyboardPointerSource()

    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print("BREAKOUT")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right arrows or mouse/touch to move the paddle")
    print("  - R to restart")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    while running:
        dt = clock.tick(args.fps) / 1000.0

        # Paddle input first; everything else is re-posted for us
        source.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.reset()
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                game.resize(*event.size)

        game.handle_input(source.poll_events())
        game.update(dt)

        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
