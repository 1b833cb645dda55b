"""Interactive bidder driven by terminal input."""

from __future__ import annotations

from typing import Optional

from goofspiel.hand import Hand
from goofspiel.render import render_card, render_cards
from goofspiel.resolver import PASS_BID
from goofspiel.session import RoundView
from goofspiel.terminal import InputFn, OutputFn, request_integer

from .base import BidderStrategy


class HumanBidder(BidderStrategy):
    name = "Human"

    def __init__(
        self,
        *,
        allow_pass: bool = False,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
        show_board: bool = True,
    ) -> None:
        self.allow_pass = allow_pass
        self._input = input_fn or input
        self._output = output_fn or print
        self.show_board = show_board

    @property
    def prompt(self) -> str:
        if self.allow_pass:
            return "Bid a card by number or enter 0 to pass: "
        return "Bid a card by number: "

    def choose(self, hand: Hand, view: Optional[RoundView] = None) -> int:
        if self.show_board and view is not None:
            self._show(hand, view)
        while True:
            index = request_integer(self.prompt, input_fn=self._input, output_fn=self._output)
            if index == 0 and self.allow_pass:
                return PASS_BID
            if hand.is_playable(index):
                return hand.play(index)
            self._output(f"Slot {index} is not available.")

    def _show(self, hand: Hand, view: RoundView) -> None:
        self._output(f"Round {view.round_number}. The prize:")
        for line in render_card(view.prize):
            self._output(line)
        self._output("Your hand:")
        for line in render_cards(hand.cards()):
            self._output(line)
        if view.own_pool:
            self._output("Your pool so far:")
            for line in render_cards(view.own_pool):
                self._output(line)
