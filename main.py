#!/usr/bin/env python3
"""Baduk - Terminal Entry Point."""

import argparse
import logging
import sys
from baduk.config import Config
from baduk.console import run
from baduk.game import GoGame


def main(argv=None):
    """Run a terminal game."""
    parser = argparse.ArgumentParser(description="Play Go in the terminal")
    parser.add_argument('--config', default='config.json', help="Path to config file")
    parser.add_argument('--size', type=int, help="Board size (overrides config)")
    args = parser.parse_args(argv)

    config = Config(args.config)
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        game = GoGame(args.size or config.get_board_size())
    except ValueError as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        run(game, sys.stdin, show_coordinates=config.show_coordinates())
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
