#!/usr/bin/env python3
"""
Play TicTacToe against the alpha-beta AI on the standard 3x3 board.

Usage:
    python play.py                 # asks whether you play X or O
    python play.py --first o       # AI opens
    python play.py --auto-forced   # your last forced move is played for you
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tttab import Game, GameConfig
from tttab.cli import play_interactive


def ask_side() -> bool:
    """Ask the human for a side. Returns True when they play first."""
    answer = input("First (crosses) or second (circles)? [x/o] ").strip().lower()
    if answer not in ("x", "o"):
        sys.exit("Please enter a valid symbol next time ('x' or 'o')!")
    return answer == "x"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play TicTacToe against the AI")
    parser.add_argument("--first", choices=["x", "o"], default=None, help="Your mark (x moves first)")
    parser.add_argument("--no-corner-opening", action="store_true", help="AI searches its opening move")
    parser.add_argument("--auto-forced", action="store_true", help="Play your only remaining move for you")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser


def main():
    args = build_parser().parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    human_first = ask_side() if args.first is None else args.first == "x"

    config = GameConfig(
        human_first=human_first,
        ai_opens_corner=not args.no_corner_opening,
        auto_forced_move=args.auto_forced,
    )
    play_interactive(Game(config))


if __name__ == "__main__":
    main()
