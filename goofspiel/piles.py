"""Prize pool, winnings and discard piles."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Iterator, List, Optional

from .cards import PRIZE_SUIT, RANKS, Card, CardKind, make_card, rank_of


class EmptyPrizePool(RuntimeError):
    """Raised when a prize is drawn after the pool ran dry."""


def build_prizes(rng: Optional[Random] = None) -> List[Card]:
    """Return the 13 prize cards, shuffled once when ``rng`` is given."""
    prizes = [make_card(PRIZE_SUIT, rank) for rank in RANKS]
    if rng is not None:
        rng.shuffle(prizes)
    return prizes


@dataclass
class PrizePool:
    """Ordered prize sequence drained from its tail."""

    cards: List[Card]

    def __post_init__(self) -> None:
        self.cards = list(self.cards)
        if len(self.cards) > len(RANKS):
            raise ValueError(f"A prize pool holds at most {len(RANKS)} cards.")
        ranks = [rank_of(card) for card in self.cards]
        if any(card.kind is not CardKind.REGULAR for card in self.cards):
            raise ValueError("Prizes must be regular cards.")
        if len(set(ranks)) != len(ranks):
            raise ValueError("Prize ranks must be distinct.")

    def draw(self) -> Card:
        if not self.cards:
            raise EmptyPrizePool("No prizes left to draw.")
        return self.cards.pop()

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)


@dataclass
class CardPile:
    """Append-only multiset of cards: a side's winnings or the discard."""

    _cards: List[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self._cards.append(card)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))
