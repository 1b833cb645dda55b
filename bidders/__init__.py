"""Bidder strategies for Goofspiel."""

from .base import BidderStrategy
from .human import HumanBidder
from .random_bidder import RandomLegalIndexBidder, SequentialShuffledDrawBidder, automated_bidder_for

__all__ = [
    "BidderStrategy",
    "HumanBidder",
    "RandomLegalIndexBidder",
    "SequentialShuffledDrawBidder",
    "automated_bidder_for",
]
