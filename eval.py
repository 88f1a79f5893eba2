#!/usr/bin/env python3
"""
Evaluate the alpha-beta AI on the standard 3x3 board.

Usage:
    python eval.py                         # 200 games vs random
    python eval.py --games 1000 --exhaustive
    python eval.py --out runs/eval.json
"""

import sys
import json
import argparse
import logging
from dataclasses import asdict
from pathlib import Path

from tqdm.auto import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tttab import (
    EvalConfig,
    eval_vs_random,
    eval_self_play,
    eval_exhaustive,
)


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe AI")
    parser.add_argument("--games", type=positive_int, default=200, help="Number of games vs random")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--exhaustive", action="store_true", help="Play every opponent line")
    parser.add_argument("--out", type=str, default=None, help="Write a JSON report here")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser


def main():
    args = build_parser().parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = EvalConfig(seed=args.seed, games=args.games, exhaustive=args.exhaustive)
    results = {}

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({config.games} games)...")
    r = eval_vs_random(games=config.games, size=config.size, seed=config.seed, show_progress=True)
    tqdm.write(f"  Wins:   {r['ai_w']:.2%}")
    tqdm.write(f"  Draws:  {r['ai_d']:.2%}")
    tqdm.write(f"  Losses: {r['ai_l']:.2%}")
    results["vs_random"] = r

    # Self-play
    print("\nSelf-play...")
    outcome = eval_self_play(size=config.size)
    print(f"  X result: {outcome.name}")
    results["self_play"] = outcome.name

    # Exhaustive
    if config.exhaustive:
        for ai_first in (True, False):
            side = "X" if ai_first else "O"
            print(f"\nExhaustive (AI plays {side})...")
            e = eval_exhaustive(ai_first=ai_first, size=config.size)
            print(f"  Games:  {e['games']}")
            print(f"  Wins:   {e['ai_w']}")
            print(f"  Draws:  {e['ai_d']}")
            print(f"  Losses: {e['ai_l']}")
            results[f"exhaustive_{side}"] = e

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            json.dump({"config": asdict(config), "results": results}, f, indent=2)
        print(f"\n✓ Report saved to {out_path}")


if __name__ == "__main__":
    main()
