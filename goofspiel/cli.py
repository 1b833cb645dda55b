"""Interactive CLI: play Goofspiel against the computer, one game after another."""

from __future__ import annotations

import argparse
from random import Random
from typing import Iterable, Optional

from bidders.human import HumanBidder
from bidders.random_bidder import automated_bidder_for

from .logging_utils import LOG_LEVEL, get_logger, setup_logging
from .resolver import PASS_BID, Outcome
from .report import format_report
from .rules_schema import RuleSet, load_rules
from .scoring import SessionResult
from .session import GameSession, SessionPhase
from .terminal import InputFn, OutputFn

logger = get_logger(__name__)

OUTCOME_MESSAGES = {
    Outcome.A_WINS_PRIZE: "You won the prize",
    Outcome.B_WINS_PRIZE: "The computer won the prize",
    Outcome.TIED: "Tie! The prize is discarded",
}


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Goofspiel against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for shuffling and the computer's picks.")
    parser.add_argument("--rules", default=None, help="Path to a JSON rule set.")
    parser.add_argument("--games", type=int, default=0, help="Number of games to play (0 = until interrupted).")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    return parser.parse_args(argv)


def describe_bid(bid: int) -> str:
    return "pass" if bid == PASS_BID else str(bid)


def play_game(
    rules: RuleSet,
    rng: Random,
    *,
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
) -> SessionResult:
    output_fn = output_fn or print
    human = HumanBidder(allow_pass=rules.allow_pass, input_fn=input_fn, output_fn=output_fn)
    computer = automated_bidder_for(rules, rng)
    session = GameSession(bidders=[human, computer], rules=rules, rng=rng)

    while session.phase == SessionPhase.PLAYING:
        record = session.play_round()
        output_fn(f"computer bid: {describe_bid(record.bids[1])}")
        output_fn(f"you bid: {describe_bid(record.bids[0])}")
        output_fn(OUTCOME_MESSAGES[record.outcome])

    result = session.score()
    for line in format_report(result, second_person=True):
        output_fn(line)
    return result


def main(argv: Optional[Iterable[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)
    rules = load_rules(args.rules) if args.rules else RuleSet()
    rng = Random(args.seed)

    played = 0
    try:
        while args.games <= 0 or played < args.games:
            played += 1
            print(f"\n===== Game {played} =====")
            play_game(rules, rng)
    except (KeyboardInterrupt, EOFError):
        print("\nExiting.")
    logger.info("Played %d game(s)", played)


if __name__ == "__main__":
    main()
