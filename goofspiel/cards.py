"""Card-related data structures and helpers for Goofspiel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class InvalidRank(ValueError):
    """Raised when a rank falls outside Ace..King."""


class Suit(Enum):
    CLUBS = auto()
    HEARTS = auto()
    SPADES = auto()
    DIAMONDS = auto()

    def __str__(self) -> str:
        return self.name.lower()


class CardKind(Enum):
    NONE = auto()
    JOKER = auto()
    REGULAR = auto()


ACE = 1
KING = 13
RANKS: tuple[int, ...] = tuple(range(ACE, KING + 1))

# Fixed suit roles: one suit is reserved for prizes, one per bidding side.
PRIZE_SUIT = Suit.DIAMONDS
SIDE_SUITS: tuple[Suit, Suit] = (Suit.CLUBS, Suit.SPADES)

RANK_NAMES: dict[int, str] = {
    1: "Ace",
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
}

FACE_SYMBOLS: dict[int, str] = {1: "A", 11: "J", 12: "Q", 13: "K"}

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.CLUBS: "♣",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
    Suit.DIAMONDS: "♦",
}

JOKER_SYMBOL = "★"


def is_valid_rank(rank: object) -> bool:
    return isinstance(rank, int) and not isinstance(rank, bool) and ACE <= rank <= KING


@dataclass(frozen=True)
class Card:
    """Immutable card value: the empty placeholder, a joker, or a suited rank.

    Cards hash and compare by value but carry no ordering; bids compare ranks.
    """

    kind: CardKind
    suit: Optional[Suit] = None
    rank: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is CardKind.REGULAR:
            if not isinstance(self.suit, Suit):
                raise ValueError(f"Regular cards require a Suit, got {self.suit!r}.")
            if not is_valid_rank(self.rank):
                raise InvalidRank(f"Rank {self.rank!r} is outside {ACE}..{KING}.")
        elif self.suit is not None or self.rank is not None:
            raise ValueError(f"{self.kind.name.title()} cards carry no suit or rank.")


NO_CARD = Card(CardKind.NONE)
JOKER = Card(CardKind.JOKER)


def make_card(suit: Suit, rank: int) -> Card:
    """Return the regular card of ``suit`` and ``rank``; raises InvalidRank."""
    return Card(CardKind.REGULAR, suit, rank)


def rank_of(card: Card) -> Optional[int]:
    """Return the rank of a regular card, or None for the placeholder and joker."""
    if card.kind is CardKind.REGULAR:
        return card.rank
    return None


def rank_symbol(card: Card) -> str:
    rank = rank_of(card)
    if rank is not None:
        return FACE_SYMBOLS.get(rank, str(rank))
    if card.kind is CardKind.JOKER:
        return JOKER_SYMBOL
    return ""


def suit_symbol(card: Card) -> str:
    if card.suit is None:
        return " "
    return SUIT_SYMBOLS[card.suit]


def card_label(card: Card) -> str:
    if card.kind is CardKind.NONE:
        return "None"
    if card.kind is CardKind.JOKER:
        return "Joker"
    assert card.suit is not None and card.rank is not None
    return f"{RANK_NAMES[card.rank]} of {card.suit.name.title()}"
