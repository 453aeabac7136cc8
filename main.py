from __future__ import annotations

import argparse
import random

from game.errors import InvalidConfiguration
from game.locale import resolve_locale
from game.ruleset import make_rules
from ui.cli import gameloop


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    ap.add_argument("--lang", default=None, help="Language: en or fr. Asked when omitted.")
    ap.add_argument("--colors", type=int, default=None,
                    help="Number of colors in the secret (4-10). Asked when omitted.")
    ap.add_argument("--attempts", type=int, default=None,
                    help="Number of attempts (10-100). Asked when omitted.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for a reproducible secret.")
    ap.add_argument("--debug", action="store_true", help="Print the secret at start.")
    ap.add_argument("--plot", default=None, metavar="PATH",
                    help="Write a PNG chart of the feedback history to PATH.")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    locale = resolve_locale(args.lang) if args.lang is not None else None

    # Reject out of range options before any prompt is shown
    try:
        make_rules(
            code_length=args.colors,
            max_attempts=args.attempts,
        )
    except InvalidConfiguration as e:
        ap.error(str(e))

    rng = random.Random(args.seed) if args.seed is not None else None
    gameloop(
        locale=locale,
        code_length=args.colors,
        max_attempts=args.attempts,
        rng=rng,
        debug=args.debug,
        plot_path=args.plot,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
