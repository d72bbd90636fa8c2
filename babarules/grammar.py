"""A finite-state parser that turns chains of text into rules."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
from typing import Optional

from babarules.objects import ParsedRule, TextTile, VerbText


class ParseState(Enum):
    """States of the sentence parser."""

    START = auto()
    EXPECT_VERB = auto()
    EXPECT_VALUE = auto()
    ACCEPT = auto()
    ERROR = auto()


def parse_fsm(chain: Iterable[TextTile]) -> list[ParsedRule]:
    """Parse a chain of text tiles and return every rule found, in order.

    Each tile is consumed by exactly one state step, so a tile that causes a
    state change is not re-examined by the new state.
    """
    state = ParseState.START
    subject: Optional[TextTile] = None
    verb: Optional[VerbText] = None
    result: list[ParsedRule] = []

    for tile in chain:
        if state is ParseState.START:
            if tile.to_object_type() is not None:
                subject = tile
                state = ParseState.EXPECT_VERB
            else:
                state = ParseState.ERROR

        elif state is ParseState.EXPECT_VERB:
            if tile.to_verb_kind() is not None and isinstance(tile, VerbText):
                verb = tile
                state = ParseState.EXPECT_VALUE
            else:
                state = ParseState.ERROR

        elif state is ParseState.EXPECT_VALUE:
            parsed = None
            if subject is not None and verb is not None:
                parsed = verb.validate(subject, tile)
            if parsed is not None:
                result.append(parsed)
                state = ParseState.ACCEPT
            else:
                state = ParseState.ERROR

        elif state is ParseState.ACCEPT:
            if tile.to_verb_kind() is not None:
                state = ParseState.EXPECT_VERB
            elif tile.to_object_type() is not None:
                state = ParseState.START
            else:
                state = ParseState.ERROR

        else:
            state = ParseState.START

    return result