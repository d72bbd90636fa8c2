"""Grid rules engine for a word-based tile puzzle: board, text parsing, rule tables and movement."""

__version__ = "0.1.0"