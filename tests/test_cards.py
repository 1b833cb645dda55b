import pytest

from goofspiel.cards import (
    JOKER,
    NO_CARD,
    Card,
    CardKind,
    InvalidRank,
    Suit,
    card_label,
    make_card,
    rank_of,
)


@pytest.mark.parametrize("rank", range(1, 14))
def test_make_card_accepts_ace_through_king(rank):
    card = make_card(Suit.HEARTS, rank)
    assert rank_of(card) == rank
    assert card.suit is Suit.HEARTS


@pytest.mark.parametrize("rank", [0, 14, -1, 100])
def test_make_card_rejects_out_of_range_rank(rank):
    with pytest.raises(InvalidRank):
        make_card(Suit.CLUBS, rank)


def test_make_card_rejects_non_integer_rank():
    with pytest.raises(InvalidRank):
        make_card(Suit.CLUBS, "7")
    with pytest.raises(InvalidRank):
        make_card(Suit.CLUBS, True)


def test_placeholder_and_joker_have_no_rank():
    assert rank_of(NO_CARD) is None
    assert rank_of(JOKER) is None


def test_non_regular_cards_carry_no_suit():
    with pytest.raises(ValueError):
        Card(CardKind.JOKER, Suit.SPADES)


def test_card_labels():
    assert card_label(make_card(Suit.HEARTS, 12)) == "Queen of Hearts"
    assert card_label(make_card(Suit.DIAMONDS, 1)) == "Ace of Diamonds"
    assert card_label(JOKER) == "Joker"
    assert card_label(NO_CARD) == "None"


@pytest.mark.parametrize("suit", ["hearts", None, 2])
def test_make_card_rejects_non_suit(suit):
    with pytest.raises(ValueError):
        make_card(suit, 3)
