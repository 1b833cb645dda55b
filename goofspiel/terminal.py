"""Blocking integer input from the terminal."""

from __future__ import annotations

from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def request_integer(prompt: str, *, input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    """Ask until a non-negative integer is entered. EOFError propagates."""
    while True:
        output_fn(prompt)
        raw = input_fn("").strip()
        if raw.isascii() and raw.isdigit():
            return int(raw)
        output_fn("\nFailed to parse number\n")
