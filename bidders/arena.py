"""Simple bidder arena for Goofspiel."""

from __future__ import annotations

import argparse
from random import Random
from typing import Dict, Iterable, Optional

from goofspiel.logging_utils import LOG_LEVEL, get_logger, setup_logging
from goofspiel.rules_schema import RuleSet, load_rules
from goofspiel.scoring import MatchOutcome
from goofspiel.session import GameSession

from .base import BidderStrategy
from .random_bidder import RandomLegalIndexBidder, SequentialShuffledDrawBidder

logger = get_logger(__name__)

BIDDER_REGISTRY: Dict[str, type[BidderStrategy]] = {
    "random": RandomLegalIndexBidder,
    "sequential": SequentialShuffledDrawBidder,
}


def run_match(
    bidder_a: BidderStrategy,
    bidder_b: BidderStrategy,
    *,
    n_games: int = 10,
    seed: int | None = None,
    rules: Optional[RuleSet] = None,
) -> dict:
    rng = Random(seed)
    rules = rules or RuleSet()
    wins = [0, 0]
    draws = 0
    history = []
    for idx in range(n_games):
        session = GameSession(bidders=[bidder_a, bidder_b], rules=rules, rng=rng)
        result = session.play()
        if result.outcome is MatchOutcome.DRAW:
            draws += 1
        else:
            assert result.winner is not None
            wins[result.winner] += 1
        history.append(
            {
                "totals": result.totals,
                "outcome": result.outcome.name.lower(),
                "discarded": len(result.discard),
            }
        )
        logger.debug("Game %d: %s", idx + 1, history[-1])
    return {"wins": wins, "draws": draws, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run an automated Goofspiel match.")
    parser.add_argument("--bidder-a", default="random", choices=BIDDER_REGISTRY.keys())
    parser.add_argument("--bidder-b", default="sequential", choices=BIDDER_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=100, help="Number of games to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--rules", default=None, help="Path to a JSON rule set.")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    rules = load_rules(args.rules) if args.rules else RuleSet()

    bidder_a = BIDDER_REGISTRY[args.bidder_a](seed=args.seed)
    bidder_b = BIDDER_REGISTRY[args.bidder_b](seed=args.seed + 1)
    results = run_match(bidder_a, bidder_b, n_games=args.n, seed=args.seed, rules=rules)

    games = len(results["history"])
    print(f"Games played: {games}")
    print(f"{bidder_a.name} wins: {results['wins'][0]}, {bidder_b.name} wins: {results['wins'][1]}, draws: {results['draws']}")
    if games:
        averages = [sum(entry["totals"][side] for entry in results["history"]) / games for side in (0, 1)]
        print(f"Average totals: {averages[0]:.2f} vs {averages[1]:.2f}")


if __name__ == "__main__":
    main()
