import argparse
import sys
import time
from typing import List, Optional, Tuple

sys.path.append('.')
import spotit  # type: ignore  # noqa: E402
from spotit_core.logging_utils import setup_logging  # noqa: E402


def run_order(order: int) -> Tuple[bool, bool, int]:
    """Builds one plane and returns (primal ok, dual ok, elapsed ms)."""
    t0 = time.time()
    deck = spotit.build(order)
    passed, diagnostics = spotit.verify(deck)
    dual = spotit.verify_dual(deck)
    took = int((time.time() - t0) * 1000)
    for d in diagnostics:
        print(f"  order={order} primal: {d}")
    for v in dual[:10]:
        print(f"  order={order} dual: {v.message}")
    return passed, not dual, took


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Build and verify Spot-it decks over a range of prime orders')
    parser.add_argument('orders', nargs='*', type=int, default=[2, 3, 5, 7, 11, 13])
    args = parser.parse_args(argv)
    setup_logging()

    checked = 0
    mismatches = 0
    for order in args.orders:
        if not spotit.is_prime(order):
            print(f"order={order} skipped (not prime)")
            continue
        ok, dual_ok, ms = run_order(order)
        checked += 1
        n = spotit.plane_size(order)
        print(f"order={order} cards={n} primal={ok} dual={dual_ok} ({ms}ms)")
        if not (ok and dual_ok):
            mismatches += 1
    print(f"Checked {checked} orders, mismatches={mismatches}")
    return 1 if mismatches else 0


if __name__ == '__main__':
    raise SystemExit(main())
