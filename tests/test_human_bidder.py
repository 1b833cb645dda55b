from bidders.human import HumanBidder
from goofspiel.cards import PRIZE_SUIT, Suit, make_card
from goofspiel.hand import Hand
from goofspiel.resolver import PASS_BID
from goofspiel.session import RoundView


def scripted_input(*answers):
    remaining = list(answers)

    def _input(prompt):
        return remaining.pop(0)

    return _input


def make_view(hand_side=0):
    return RoundView(
        side=hand_side,
        round_number=1,
        prize=make_card(PRIZE_SUIT, 9),
        prizes_remaining=12,
        own_pool=(),
        opponent_pool=(),
        discard=(),
    )


def test_human_reprompts_until_slot_is_playable():
    hand = Hand.new(Suit.CLUBS)
    hand.play(4)
    output = []
    bidder = HumanBidder(input_fn=scripted_input("abc", "0", "14", "4", "6"), output_fn=output.append)

    assert bidder.choose(hand) == 6
    assert not hand.is_playable(6)
    assert output.count("\nFailed to parse number\n") == 1
    assert "Slot 4 is not available." in output
    assert "Slot 0 is not available." in output


def test_human_pass_when_allowed():
    hand = Hand.new(Suit.CLUBS)
    output = []
    bidder = HumanBidder(allow_pass=True, input_fn=scripted_input("0"), output_fn=output.append)

    assert bidder.choose(hand) == PASS_BID
    assert len(hand) == 13
    assert output[0] == "Bid a card by number or enter 0 to pass: "


def test_human_sees_prize_and_hand():
    hand = Hand.new(Suit.CLUBS)
    output = []
    bidder = HumanBidder(input_fn=scripted_input("2"), output_fn=output.append)

    assert bidder.choose(hand, make_view()) == 2
    assert output[0] == "Round 1. The prize:"
    assert "Your hand:" in output
    assert "Your pool so far:" not in output
