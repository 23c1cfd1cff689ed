from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from .points import Point, plane_size, point_at

Card = Tuple[int, ...]  # point indices, one per symbol on the card


@dataclass(frozen=True)
class Deck:
    """The lines of a projective plane as cards, plus the build-time self-check findings."""
    order: int
    cards: Tuple[Card, ...]  # slanted lines, then vertical lines, then the line at infinity
    diagnostics: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, i: int) -> Card:
        return self.cards[i]

    @property
    def symbol_count(self) -> int:
        return plane_size(self.order)

    def card_points(self, i: int) -> List[Point]:
        """Gets the plane coordinates behind each symbol of card i."""
        return [point_at(p, self.order) for p in self.cards[i]]

    def pretty(self) -> str:
        """Renders one card per line as its point indices."""
        width = len(str(self.symbol_count - 1))
        lines: List[str] = []
        for i, card in enumerate(self.cards):
            lines.append(f"{i:>3}: " + " ".join(f"{p:>{width}}" for p in card))
        return "\n".join(lines)


# Anything verify() accepts: a built Deck or plain nested sequences from a host.
DeckLike = Union[Deck, Sequence[Sequence[int]]]
