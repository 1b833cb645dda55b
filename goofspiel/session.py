"""High-level game orchestration for Goofspiel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import List, Optional, Protocol, Sequence, Tuple

from .cards import SIDE_SUITS, Card, card_label
from .hand import Hand, InvalidBidIndex
from .logging_utils import get_logger
from .piles import CardPile, PrizePool, build_prizes
from .resolver import PASS_BID, Outcome, resolve
from .rules_schema import RuleSet
from .scoring import SessionResult, score_session

logger = get_logger(__name__)


class SessionPhase(Enum):
    SETUP = auto()
    PLAYING = auto()
    SCORING = auto()
    DONE = auto()


@dataclass(frozen=True)
class RoundView:
    """What a bidder may see before committing: never the opponent's current bid."""

    side: int
    round_number: int
    prize: Card
    prizes_remaining: int
    own_pool: Tuple[Card, ...]
    opponent_pool: Tuple[Card, ...]
    discard: Tuple[Card, ...]


@dataclass(frozen=True)
class RoundRecord:
    round_number: int
    prize: Card
    bids: Tuple[int, int]
    outcome: Outcome


class Bidder(Protocol):
    name: str

    def on_session_start(self, side: int, hand: Hand) -> None:
        ...

    def choose(self, hand: Hand, view: Optional[RoundView] = None) -> int:
        ...


@dataclass
class GameSession:
    """Run one game: setup, thirteen rounds, scoring."""

    bidders: Sequence[Bidder]
    rules: RuleSet = field(default_factory=RuleSet)
    rng: Optional[Random] = None
    prizes: Optional[Sequence[Card]] = None

    phase: SessionPhase = field(init=False, default=SessionPhase.SETUP)
    hands: List[Hand] = field(init=False)
    prize_pool: PrizePool = field(init=False)
    pools: List[CardPile] = field(init=False)
    discard: CardPile = field(init=False)
    history: List[RoundRecord] = field(init=False, default_factory=list)
    prizes_dealt: int = field(init=False, default=0)
    _result: Optional[SessionResult] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if len(self.bidders) != 2:
            raise ValueError("GameSession supports exactly two bidders.")
        if self.rng is None:
            self.rng = Random()
        self.bidders = list(self.bidders)

        if self.prizes is not None:
            self.prize_pool = PrizePool(list(self.prizes))
        else:
            self.prize_pool = PrizePool(build_prizes(self.rng))
        self.prizes_dealt = len(self.prize_pool)

        hand_rng = self.rng if self.rules.shuffle_hands else None
        self.hands = [Hand.new(suit, rng=hand_rng) for suit in SIDE_SUITS]
        self.pools = [CardPile(), CardPile()]
        self.discard = CardPile()

        for side, bidder in enumerate(self.bidders):
            bidder.on_session_start(side, self.hands[side])
        self.phase = SessionPhase.SCORING if self.prize_pool.is_empty() else SessionPhase.PLAYING
        logger.debug("Session started with %d prizes, rules=%s", self.prizes_dealt, self.rules)

    @property
    def round_number(self) -> int:
        return len(self.history) + 1

    def play_round(self) -> RoundRecord:
        self._ensure_phase(SessionPhase.PLAYING)
        prize = self.prize_pool.draw()
        bids = (self._collect_bid(0, prize), self._collect_bid(1, prize))

        outcome = resolve(prize, bids[0], bids[1])
        if outcome.winner is None:
            self.discard.add(prize)
        else:
            self.pools[outcome.winner].add(prize)

        record = RoundRecord(round_number=self.round_number, prize=prize, bids=bids, outcome=outcome)
        self.history.append(record)
        logger.debug(
            "Round %d: prize=%s bids=%s outcome=%s",
            record.round_number,
            card_label(prize),
            bids,
            outcome.name,
        )

        if self.prize_pool.is_empty():
            self.phase = SessionPhase.SCORING
        return record

    def score(self) -> SessionResult:
        self._ensure_phase(SessionPhase.SCORING)
        result = score_session([pool.cards for pool in self.pools], self.discard.cards)
        self._result = result
        self.phase = SessionPhase.DONE
        logger.info("Session finished: totals=%s outcome=%s", result.totals, result.outcome.name)
        return result

    def play(self) -> SessionResult:
        while self.phase == SessionPhase.PLAYING:
            self.play_round()
        return self.score()

    @property
    def result(self) -> SessionResult:
        if self._result is None:
            raise RuntimeError("Session has not been scored yet.")
        return self._result

    def view_for(self, side: int, prize: Card) -> RoundView:
        return RoundView(
            side=side,
            round_number=self.round_number,
            prize=prize,
            prizes_remaining=len(self.prize_pool),
            own_pool=self.pools[side].cards,
            opponent_pool=self.pools[1 - side].cards,
            discard=self.discard.cards,
        )

    def _collect_bid(self, side: int, prize: Card) -> int:
        hand = self.hands[side]
        before = hand.remaining_ranks()
        bid = self.bidders[side].choose(hand, self.view_for(side, prize))

        if bid == PASS_BID:
            if not self.rules.allow_pass:
                raise InvalidBidIndex(f"{self.bidders[side].name} passed but passing is disabled.")
            if hand.remaining_ranks() != before:
                raise InvalidBidIndex(f"{self.bidders[side].name} played a card while passing.")
            return bid

        after = hand.remaining_ranks()
        if bid not in before or bid in after or len(after) != len(before) - 1:
            raise InvalidBidIndex(f"{self.bidders[side].name} bid {bid!r} without committing that card.")
        return bid

    def _ensure_phase(self, expected: SessionPhase) -> None:
        if self.phase != expected:
            raise RuntimeError(f"Action not allowed in phase {self.phase}. Expected {expected}.")
