"""Compact single-byte card encoding.

Byte layout::

    1xxx_xxxx  empty placeholder
    01xx_xxxx  joker
    00ss_rrrr  regular card, suit index ``ss`` and ``rrrr = rank - 1``

Regular bytes whose rank nibble exceeds King decode to the placeholder.
"""

from __future__ import annotations

from typing import Iterable, List

from .cards import JOKER, KING, NO_CARD, Card, CardKind, Suit, make_card

SUIT_INDEX = {Suit.CLUBS: 0, Suit.HEARTS: 1, Suit.SPADES: 2, Suit.DIAMONDS: 3}
INDEX_SUIT = {index: suit for suit, index in SUIT_INDEX.items()}

NONE_BYTE = 0b1100_0000
JOKER_BYTE = 0b0100_0000


def card_to_byte(card: Card) -> int:
    if card.kind is CardKind.NONE:
        return NONE_BYTE
    if card.kind is CardKind.JOKER:
        return JOKER_BYTE
    assert card.suit is not None and card.rank is not None
    return (SUIT_INDEX[card.suit] << 4) | (card.rank - 1)


def card_from_byte(byte: int) -> Card:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Not a byte: {byte!r}")
    if byte & 0b1000_0000:
        return NO_CARD
    if byte & 0b0100_0000:
        return JOKER
    rank = (byte & 0b0000_1111) + 1
    if rank > KING:
        return NO_CARD
    return make_card(INDEX_SUIT[(byte & 0b0011_0000) >> 4], rank)


def encode_cards(cards: Iterable[Card]) -> bytes:
    return bytes(card_to_byte(card) for card in cards)


def decode_cards(payload: bytes) -> List[Card]:
    return [card_from_byte(byte) for byte in payload]
