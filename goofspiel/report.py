"""Human-readable summary of a finished session."""

from __future__ import annotations

from typing import List, Sequence

from .render import render_cards
from .scoring import MatchOutcome, SessionResult


def possessive(name: str, *, second_person: bool = False) -> str:
    return "Your" if second_person else f"{name}'s"


def outcome_line(result: SessionResult, names: Sequence[str], *, second_person: bool = False) -> str:
    """With ``second_person`` side A is addressed as the reader ("You win!!")."""
    if result.outcome is MatchOutcome.DRAW:
        return "Draw!"
    if second_person:
        return "You win!!" if result.outcome is MatchOutcome.SIDE_A else "You lose."
    winner = names[0] if result.outcome is MatchOutcome.SIDE_A else names[1]
    return f"{winner} wins!"


def format_report(
    result: SessionResult,
    names: Sequence[str] = ("You", "Computer"),
    *,
    second_person: bool = False,
) -> List[str]:
    labels = [possessive(names[0], second_person=second_person), possessive(names[1])]
    lines = [
        f"{labels[1]} total: {result.totals[1]}",
        f"{labels[0]} total: {result.totals[0]}",
        outcome_line(result, names, second_person=second_person),
    ]
    for side in (1, 0):
        lines.append(f"{labels[side]} pool:")
        lines.extend(render_cards(result.pools[side]))
    lines.append("Discarded cards:")
    lines.extend(render_cards(result.discard))
    return lines
