from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .deck import Card, Deck
from .points import affine_index, infinity_index, plane_size, slope_index
from .primes import check_order
from .verify import find_violations

logger = logging.getLogger(__name__)


def slanted_line(order: int, m: int, b: int) -> Card:
    """The line y = m*x + b (mod q) followed by its point at infinity for slope m."""
    line: List[int] = [affine_index(order, x, (m * x + b) % order) for x in range(order)]
    line.append(slope_index(order, m))
    return tuple(line)


def vertical_line(order: int, k: int) -> Card:
    """The line x = k followed by (inf, inf)."""
    line: List[int] = [affine_index(order, k, y) for y in range(order)]
    line.append(infinity_index(order))
    return tuple(line)


def infinity_line(order: int) -> Card:
    """All sloped points at infinity followed by (inf, inf)."""
    line: List[int] = [slope_index(order, m) for m in range(order)]
    line.append(infinity_index(order))
    return tuple(line)


def build(order: int, validate: bool = True) -> Deck:
    """
    Builds the Spot-it deck for the projective plane of the given prime order.

    Cards come out as the slanted lines (m outer, b inner), then the vertical
    lines, then the line at infinity. The finished deck is run through the
    verifier; any violation is logged and kept on Deck.diagnostics, and the
    deck is returned regardless. With validate=False a non-prime order is
    built anyway so the resulting diagnostics can be inspected.
    """
    check_order(order, require_prime=validate)
    q = order

    cards: List[Card] = []
    for m in range(q):
        for b in range(q):
            cards.append(slanted_line(q, m, b))
    for k in range(q):
        cards.append(vertical_line(q, k))
    cards.append(infinity_line(q))

    violations = find_violations(cards, q)
    for v in violations:
        logger.warning("order %d self-check: %s", q, v.message)
    logger.debug("built order %d plane: %d cards, %d violations", q, len(cards), len(violations))
    return Deck(order=q, cards=tuple(cards), diagnostics=tuple(v.message for v in violations))


def incidence(deck: Deck) -> Dict[int, Tuple[int, ...]]:
    """Maps each point index to the indices of the cards it appears on."""
    out: Dict[int, List[int]] = {p: [] for p in range(plane_size(deck.order))}
    for i, card in enumerate(deck.cards):
        for p in card:
            out.setdefault(p, []).append(i)
    return {p: tuple(cards) for p, cards in out.items()}
