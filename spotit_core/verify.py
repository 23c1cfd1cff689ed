from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, List, NamedTuple, Optional, Sequence, Tuple

from .deck import Deck, DeckLike
from .points import plane_size


@dataclass(frozen=True)
class Violation:
    """One broken plane invariant, with the card indices it concerns."""
    kind: str  # empty, card_count, card_size, duplicate_symbol, intersection, symbol_count, point_degree, point_pair
    cards: Tuple[int, ...]
    message: str


class VerifyResult(NamedTuple):
    passed: bool
    diagnostics: Tuple[str, ...]


def _resolve_order(cards: Sequence[Sequence[int]], deck: DeckLike, order: Optional[int]) -> Optional[int]:
    # Explicit order wins, then the order a Deck was built with, then q+1 from the first card.
    if order is not None:
        return int(order)
    if isinstance(deck, Deck):
        return deck.order
    if cards:
        return len(cards[0]) - 1
    return None


def _card_sets(cards: Sequence[Sequence[int]]) -> List[FrozenSet[int]]:
    return [frozenset(card) for card in cards]


def find_violations(deck: DeckLike, order: Optional[int] = None) -> List[Violation]:
    """
    Re-checks the four plane invariants on any list of cards and returns every
    violation found. Nothing about how the deck was produced is assumed.
    """
    cards = [tuple(card) for card in deck]
    q = _resolve_order(cards, deck, order)
    if q is None:
        return [Violation('empty', (), 'Deck is empty and no order was given')]
    expected_n = plane_size(q)
    out: List[Violation] = []

    if len(cards) != expected_n:
        out.append(Violation(
            'card_count', (),
            f"Total number of cards is {len(cards)} instead of {expected_n}",
        ))

    sets = _card_sets(cards)
    for i, card in enumerate(cards):
        if len(card) != q + 1:
            out.append(Violation(
                'card_size', (i,),
                f"Card {i} has {len(card)} symbols instead of {q + 1}",
            ))
        if len(sets[i]) != len(card):
            repeated = sorted(s for s, n in Counter(card).items() if n > 1)
            out.append(Violation(
                'duplicate_symbol', (i,),
                f"Card {i} repeats symbols {repeated}",
            ))

    for i in range(len(sets)):
        si = sets[i]
        for j in range(i + 1, len(sets)):
            shared = len(si & sets[j])
            if shared != 1:
                out.append(Violation(
                    'intersection', (i, j),
                    f"Cards {i} and {j} share {shared} symbols instead of 1",
                ))

    unique = frozenset().union(*sets) if sets else frozenset()
    if len(unique) != expected_n:
        out.append(Violation(
            'symbol_count', (),
            f"Total number of unique symbols is {len(unique)} instead of {expected_n}",
        ))
    return out


def verify(deck: DeckLike, order: Optional[int] = None) -> VerifyResult:
    """Checks a deck and returns (passed, diagnostics); the deck is only read."""
    diagnostics = tuple(v.message for v in find_violations(deck, order))
    return VerifyResult(passed=not diagnostics, diagnostics=diagnostics)


def verify_dual(deck: DeckLike, order: Optional[int] = None) -> List[Violation]:
    """
    Checks the dual plane properties: every symbol lies on exactly q+1 cards and
    every two symbols appear together on exactly one card.
    """
    cards = [tuple(card) for card in deck]
    q = _resolve_order(cards, deck, order)
    if q is None:
        return [Violation('empty', (), 'Deck is empty and no order was given')]
    expected_n = plane_size(q)
    out: List[Violation] = []

    degree: Counter = Counter()
    pairs: Counter = Counter()
    for card in _card_sets(cards):
        degree.update(card)
        ordered = sorted(card)
        for a in range(len(ordered)):
            for b in range(a + 1, len(ordered)):
                pairs[(ordered[a], ordered[b])] += 1

    for symbol in sorted(set(range(expected_n)) | set(degree)):
        d = degree.get(symbol, 0)
        if d != q + 1:
            holders = tuple(i for i, card in enumerate(cards) if symbol in card)
            out.append(Violation(
                'point_degree', holders,
                f"Symbol {symbol} appears on {d} cards instead of {q + 1}",
            ))

    for (a, b), n in sorted(pairs.items()):
        if n > 1:
            holders = tuple(i for i, card in enumerate(cards) if a in card and b in card)
            out.append(Violation(
                'point_pair', holders,
                f"Symbols {a} and {b} appear together on {n} cards instead of 1",
            ))
    expected_pairs = expected_n * (expected_n - 1) // 2
    if len(pairs) != expected_pairs:
        out.append(Violation(
            'point_pair', (),
            f"{len(pairs)} symbol pairs share a card instead of {expected_pairs}",
        ))
    return out
