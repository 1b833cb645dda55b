"""Round resolution."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from .cards import KING, Card, InvalidRank

# Bid value of a side that commits no card (only when the rules allow passing).
PASS_BID = 0


class Outcome(Enum):
    A_WINS_PRIZE = auto()
    B_WINS_PRIZE = auto()
    TIED = auto()

    @property
    def winner(self) -> Optional[int]:
        if self is Outcome.A_WINS_PRIZE:
            return 0
        if self is Outcome.B_WINS_PRIZE:
            return 1
        return None


def _check_bid(bid: int) -> None:
    if not isinstance(bid, int) or isinstance(bid, bool) or not PASS_BID <= bid <= KING:
        raise InvalidRank(f"Bid {bid!r} is outside {PASS_BID}..{KING}.")


def resolve(prize: Card, bid_a: int, bid_b: int) -> Outcome:
    """Compare two committed bids; the prize itself never affects the outcome."""
    _check_bid(bid_a)
    _check_bid(bid_b)
    if bid_a > bid_b:
        return Outcome.A_WINS_PRIZE
    if bid_a < bid_b:
        return Outcome.B_WINS_PRIZE
    return Outcome.TIED
