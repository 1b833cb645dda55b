import itertools

import pytest

from goofspiel.cards import InvalidRank, Suit, make_card
from goofspiel.resolver import PASS_BID, Outcome, resolve

PRIZE = make_card(Suit.DIAMONDS, 7)
SWAPPED = {
    Outcome.A_WINS_PRIZE: Outcome.B_WINS_PRIZE,
    Outcome.B_WINS_PRIZE: Outcome.A_WINS_PRIZE,
    Outcome.TIED: Outcome.TIED,
}


def test_higher_bid_wins():
    assert resolve(PRIZE, 10, 4) is Outcome.A_WINS_PRIZE
    assert resolve(PRIZE, 1, 6) is Outcome.B_WINS_PRIZE
    assert resolve(PRIZE, 9, 9) is Outcome.TIED


def test_resolver_is_total_and_antisymmetric():
    for bid_a, bid_b in itertools.product(range(1, 14), repeat=2):
        outcome = resolve(PRIZE, bid_a, bid_b)
        assert outcome in Outcome
        assert resolve(PRIZE, bid_b, bid_a) is SWAPPED[outcome]
        assert (outcome is Outcome.TIED) == (bid_a == bid_b)


def test_prize_rank_does_not_matter():
    for rank in range(1, 14):
        assert resolve(make_card(Suit.DIAMONDS, rank), 3, 2) is Outcome.A_WINS_PRIZE


def test_pass_loses_to_any_card():
    assert resolve(PRIZE, PASS_BID, 1) is Outcome.B_WINS_PRIZE
    assert resolve(PRIZE, PASS_BID, PASS_BID) is Outcome.TIED


def test_outcome_winner_side():
    assert Outcome.A_WINS_PRIZE.winner == 0
    assert Outcome.B_WINS_PRIZE.winner == 1
    assert Outcome.TIED.winner is None


def test_bids_outside_range_are_rejected():
    with pytest.raises(InvalidRank):
        resolve(PRIZE, 14, 2)
