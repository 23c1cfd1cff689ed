from __future__ import annotations

import argparse
import os
from typing import List, Optional

from .logging_utils import setup_logging
from .plane import build
from .primes import ConfigurationError
from .symbols import render_card, status_text
from .verify import verify

DEFAULT_ORDER = int(os.getenv("SPOTIT_ORDER", "7"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Spot-it deck generator over a finite projective plane')
    parser.add_argument('--order', type=int, default=DEFAULT_ORDER, help='Plane order (prime); cards get order+1 symbols')
    parser.add_argument('--glyphs', action='store_true', help='Print display glyphs instead of point indices')
    parser.add_argument('--points', action='store_true', help='Print plane coordinates for every symbol')
    parser.add_argument('--no-validate', action='store_true', help='Build even when the order is not prime')
    parser.add_argument('--quiet', action='store_true', help='Only print the verification status')
    parser.add_argument('--log-level', default=None, help='Logging level (default from LOG_LEVEL)')
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging()

    try:
        deck = build(args.order, validate=not args.no_validate)
    except ConfigurationError as e:
        print(f"error: {e}")
        return 2

    if not args.quiet:
        print(f"Order {deck.order}: {len(deck)} cards, {deck.order + 1} symbols each")
        if args.points or args.glyphs:
            for i, card in enumerate(deck):
                if args.points:
                    row = " ".join(p.pretty() for p in deck.card_points(i))
                else:
                    row = " ".join(render_card(card))
                print(f"{i:>3}: {row}")
        else:
            print(deck.pretty())

    passed, diagnostics = verify(deck)
    print(status_text(passed))
    for d in diagnostics:
        print(f"  {d}")
    return 0 if passed else 1


if __name__ == '__main__':
    raise SystemExit(main())
