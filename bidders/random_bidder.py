"""Automated bidders that pick uniformly at random."""

from __future__ import annotations

import random
from typing import List, Optional

from goofspiel.hand import EmptyHandExhausted, Hand
from goofspiel.logging_utils import get_logger
from goofspiel.rules_schema import RuleSet
from goofspiel.session import RoundView

from .base import BidderStrategy

logger = get_logger(__name__)


class RandomLegalIndexBidder(BidderStrategy):
    name = "RandomLegalIndex"

    def __init__(self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def choose(self, hand: Hand, view: Optional[RoundView] = None) -> int:
        legal = hand.remaining_indices()
        if not legal:
            raise EmptyHandExhausted("Computer ran out of cards.")
        index = self._rng.choice(legal)
        rank = hand.play(index)
        logger.debug("%s picked slot %d (rank %d)", self.name, index, rank)
        return rank


class SequentialShuffledDrawBidder(BidderStrategy):
    """Shuffle the slot order once per session, then play it front to back."""

    name = "SequentialShuffledDraw"

    def __init__(self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._order: List[int] = []

    def on_session_start(self, side: int, hand: Hand) -> None:
        self._order = hand.remaining_indices()
        self._rng.shuffle(self._order)

    def choose(self, hand: Hand, view: Optional[RoundView] = None) -> int:
        if not self._order:
            self.on_session_start(view.side if view else 0, hand)
        while self._order:
            index = self._order.pop()
            if hand.is_playable(index):
                rank = hand.play(index)
                logger.debug("%s drew slot %d (rank %d)", self.name, index, rank)
                return rank
        raise EmptyHandExhausted("Computer ran out of cards.")


STRATEGIES = {
    "random_legal_index": RandomLegalIndexBidder,
    "sequential_shuffled_draw": SequentialShuffledDrawBidder,
}


def automated_bidder_for(rules: RuleSet, rng: Optional[random.Random] = None) -> BidderStrategy:
    return STRATEGIES[rules.automated_strategy](rng=rng)
