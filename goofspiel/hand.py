"""Hand creation and slot bookkeeping for Goofspiel."""

from __future__ import annotations

from random import Random
from typing import List, Optional, Sequence

from .cards import NO_CARD, RANKS, Card, Suit, make_card

HAND_SIZE = len(RANKS)


class InvalidBidIndex(ValueError):
    """Raised when a bid does not name an unplayed slot of the hand."""


class EmptyHandExhausted(RuntimeError):
    """Raised when an automated bidder is asked to bid from an empty hand."""


class Hand:
    """Thirteen slots of one suit, one rank each, indexed 1..13.

    Playing a slot clears it; the slot then reads as the empty card.
    """

    def __init__(self, suit: Suit, ranks: Sequence[int]) -> None:
        if sorted(ranks) != list(RANKS):
            raise ValueError(f"A hand must hold each rank {RANKS[0]}..{RANKS[-1]} exactly once.")
        self.suit = suit
        self._ranks: List[Optional[int]] = list(ranks)

    @classmethod
    def new(cls, suit: Suit, rng: Optional[Random] = None) -> "Hand":
        """Return a full hand; slot order is shuffled when ``rng`` is given."""
        ranks = list(RANKS)
        if rng is not None:
            rng.shuffle(ranks)
        return cls(suit, ranks)

    def is_playable(self, index: int) -> bool:
        if not isinstance(index, int) or isinstance(index, bool) or not 1 <= index <= HAND_SIZE:
            return False
        return self._ranks[index - 1] is not None

    def play(self, index: int) -> int:
        """Clear slot ``index`` and return the rank it held."""
        if not self.is_playable(index):
            raise InvalidBidIndex(f"Slot {index!r} is not playable.")
        rank = self._ranks[index - 1]
        assert rank is not None
        self._ranks[index - 1] = None
        return rank

    def remaining_indices(self) -> List[int]:
        return [idx for idx, rank in enumerate(self._ranks, start=1) if rank is not None]

    def remaining_ranks(self) -> List[int]:
        return sorted(rank for rank in self._ranks if rank is not None)

    def index_of_rank(self, rank: int) -> Optional[int]:
        for idx, held in enumerate(self._ranks, start=1):
            if held == rank:
                return idx
        return None

    def slot(self, index: int) -> Card:
        if not 1 <= index <= HAND_SIZE:
            raise InvalidBidIndex(f"Slot {index!r} is outside 1..{HAND_SIZE}.")
        rank = self._ranks[index - 1]
        return NO_CARD if rank is None else make_card(self.suit, rank)

    def cards(self) -> List[Card]:
        return [self.slot(idx) for idx in range(1, HAND_SIZE + 1)]

    def __len__(self) -> int:
        return sum(1 for rank in self._ranks if rank is not None)

    def __repr__(self) -> str:
        return f"Hand(suit={self.suit}, ranks={self._ranks!r})"
