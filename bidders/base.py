"""Common bidder interfaces."""

from __future__ import annotations

from typing import Optional

from goofspiel.hand import EmptyHandExhausted, Hand
from goofspiel.session import RoundView


class BidderStrategy:
    """Base class for bidding policies.

    ``choose`` both decides and commits: it plays the chosen slot of ``hand``
    and returns the rank that slot held.
    """

    name: str = "BaseBidder"

    def on_session_start(self, side: int, hand: Hand) -> None:
        """Optional hook invoked once the session has dealt the hands."""
        return None

    def choose(self, hand: Hand, view: Optional[RoundView] = None) -> int:
        """Play the lowest remaining slot."""
        legal = hand.remaining_indices()
        if not legal:
            raise EmptyHandExhausted(f"{self.name} has no cards left to bid.")
        return hand.play(legal[0])
