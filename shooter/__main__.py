"""
Command line entry point

    python -m shooter                      # play the space theme
    python -m shooter --theme tropical
    python -m shooter --random-episode --no-render
"""

import argparse
import logging

from .themes import THEMES, get_theme


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Arcade shooter")
    parser.add_argument("--theme", type=str, default="space", choices=sorted(THEMES),
                        help="Visual theme")
    parser.add_argument("--random-episode", action="store_true",
                        help="Let a random agent play one episode instead")
    parser.add_argument("--no-render", action="store_true",
                        help="Run the random episode without a window")
    parser.add_argument("--seed", type=int, default=42,
                        help="Random seed for the random episode")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.random_episode:
        from .shooter_env import run_random_episode
        run_random_episode(render=not args.no_render, seed=args.seed, theme=args.theme)
        return

    from .game import ShooterGame
    from .window import arcade_frame_loop, play

    theme = get_theme(args.theme)
    play(ShooterGame(theme=theme, loop=arcade_frame_loop()))


if __name__ == "__main__":
    main()
