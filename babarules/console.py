"""Terminal helpers and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional, TextIO

_CURSOR_HOME = "\x1b[H"
_CURSOR_HIDE = "\x1b[?25l"


def move_cursor_to_top(stream: Optional[TextIO] = None) -> None:
    """Put the cursor at the top-left so the screen can be redrawn in place."""
    out = sys.stdout if stream is None else stream
    out.write(_CURSOR_HOME)
    out.flush()


def hide_cursor(stream: Optional[TextIO] = None) -> None:
    """Hide the terminal cursor."""
    out = sys.stdout if stream is None else stream
    out.write(_CURSOR_HIDE)
    out.flush()


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="babarules",
        description="Rule-driven tile puzzle engine.",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the command; parses the arguments and returns the exit status."""
    parser = _build_parser()
    parser.parse_args(list(argv) if argv is not None else None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())