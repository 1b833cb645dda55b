"""Core engine package for Goofspiel."""

__all__ = [
    "cards",
    "hand",
    "piles",
    "resolver",
    "scoring",
    "session",
    "rules_schema",
    "encode",
    "render",
    "terminal",
    "report",
    "logging_utils",
    "cli",
]
