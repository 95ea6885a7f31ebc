#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py [--width W --height H] [--seed N] [--verbose]
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from src.minefield.board import BoardConfig, GameState
from src.minefield.session import run


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; player text stays on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minefield - reveal every cell that is not a mine"
    )
    parser.add_argument(
        "--width", type=int, default=None, help="Board width (prompted if omitted)"
    )
    parser.add_argument(
        "--height", type=int, default=None, help="Board height (prompted if omitted)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible mine layout"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and play one game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    config = None
    if (args.width is None) != (args.height is None):
        parser.error("--width and --height must be given together")
    if args.width is not None:
        try:
            config = BoardConfig(args.width, args.height)
        except ValueError as exc:
            parser.error(str(exc))

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        state = run(rng=rng, config=config)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 130

    return 0 if state == GameState.WON else 1


if __name__ == "__main__":
    sys.exit(main())
