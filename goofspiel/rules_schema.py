"""Validation schema for Goofspiel rules configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, Field, validator

STRATEGY_NAMES = ("random_legal_index", "sequential_shuffled_draw")


class RuleSet(BaseModel):
    allow_pass: bool = Field(False, description="Whether a human may bid 0 to pass without playing a card.")
    automated_strategy: Literal["random_legal_index", "sequential_shuffled_draw"] = Field(
        "random_legal_index",
        description="How the computer picks its card each round.",
    )
    shuffle_hands: bool = Field(False, description="Shuffle hand slot order at setup. Display only.")

    class Config:
        extra = "forbid"

    @validator("automated_strategy", pre=True)
    def normalize_strategy(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            if normalized not in STRATEGY_NAMES:
                raise ValueError(f"Unknown automated strategy: {value!r}")
            return normalized
        return value


def load_rules(path: Union[str, Path]) -> RuleSet:
    """Read a JSON rule-set file."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Rules file must contain a JSON object.")
    return RuleSet(**payload)
