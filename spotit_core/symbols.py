from __future__ import annotations

from typing import List, Sequence

# Display glyphs by point index; enough for the order-7 deck (57 symbols).
SYMBOLS: Sequence[str] = (
    '♠', '♥', '♦', '♣', '♤', '♡', '♢', '♧', '♚', '♛', '♜', '♝', '♞', '♟',
    '☀', '☁', '☂', '☃', '☄', '★', '☆', '☎', '☏', '☐', '☑', '☒', '☓', '☖',
    '☗', '☘', '☙', '☚', '☛', '☜', '☝', '☞', '☟', '☠', '☡', '☢', '☣', '☤',
    '☥', '☦', '☧', '☨', '☩', '☪', '☫', '☬', '☭', '☮', '☯', '☰', '☱', '☲',
    '☳',
)

PASSED_TEXT = "Verification passed!"
FAILED_TEXT = "Verification failed."


def glyph_for(index: int) -> str:
    """Glyph for a point index; indices past the table fall back to the number itself."""
    if 0 <= index < len(SYMBOLS):
        return SYMBOLS[index]
    return str(index)


def render_card(card: Sequence[int]) -> List[str]:
    return [glyph_for(p) for p in card]


def render_deck(cards: Sequence[Sequence[int]]) -> List[List[str]]:
    return [render_card(card) for card in cards]


def status_text(passed: bool) -> str:
    return PASSED_TEXT if passed else FAILED_TEXT
