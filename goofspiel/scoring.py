"""Session scoring helpers for Goofspiel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Sequence, Tuple

from .cards import Card, rank_of


class MatchOutcome(Enum):
    SIDE_A = auto()
    SIDE_B = auto()
    DRAW = auto()


@dataclass(frozen=True)
class SessionResult:
    totals: Tuple[int, int]
    outcome: MatchOutcome
    pools: Tuple[Tuple[Card, ...], Tuple[Card, ...]]
    discard: Tuple[Card, ...]

    @property
    def winner(self) -> Optional[int]:
        if self.outcome is MatchOutcome.SIDE_A:
            return 0
        if self.outcome is MatchOutcome.SIDE_B:
            return 1
        return None


def pool_total(cards: Iterable[Card]) -> int:
    """Sum of ranks; cards without a rank count as zero."""
    return sum(rank_of(card) or 0 for card in cards)


def compare_totals(total_a: int, total_b: int) -> MatchOutcome:
    if total_a > total_b:
        return MatchOutcome.SIDE_A
    if total_a < total_b:
        return MatchOutcome.SIDE_B
    return MatchOutcome.DRAW


def score_session(pools: Sequence[Iterable[Card]], discard: Iterable[Card]) -> SessionResult:
    if len(pools) != 2:
        raise ValueError("Exactly two pools are supported.")
    pool_a, pool_b = tuple(pools[0]), tuple(pools[1])
    totals = (pool_total(pool_a), pool_total(pool_b))
    return SessionResult(
        totals=totals,
        outcome=compare_totals(*totals),
        pools=(pool_a, pool_b),
        discard=tuple(discard),
    )
