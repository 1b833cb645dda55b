"""Text rendering of cards as five-line boxes."""

from __future__ import annotations

from typing import Iterable, List

from .cards import Card, rank_symbol, suit_symbol

CARD_HEIGHT = 5


def render_card(card: Card) -> List[str]:
    rank = rank_symbol(card)
    suit = suit_symbol(card)
    return [
        "┌─────┐",
        f"│{rank:<2}   │",
        f"│{suit:<2} {suit:>2}│",
        f"│   {rank:>2}│",
        "└─────┘",
    ]


def render_cards(cards: Iterable[Card]) -> List[str]:
    """Lay cards side by side; an empty iterable gives five empty lines."""
    lines = [""] * CARD_HEIGHT
    for card in cards:
        for row, part in enumerate(render_card(card)):
            lines[row] += part
    return lines
