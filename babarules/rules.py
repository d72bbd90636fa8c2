"""Reading rule sentences off the board and keeping the rule tables."""

from __future__ import annotations

from typing import Optional

from babarules.board import TileMap
from babarules.grammar import parse_fsm
from babarules.objects import ParsedRule, TextTile
from babarules.types import Direction, ObjectType, Position, RuleType, vector

_READ_DIRECTIONS = (Direction.RIGHT, Direction.DOWN)
_MAX_CHAIN = 7
_MIN_SENTENCE = 3


class RuleManager:
    """Holds which properties and transformations apply to each object type."""

    def __init__(self, board: TileMap) -> None:
        self.board = board
        self._parse_targets: list[Position] = []
        self._rules: dict[ObjectType, set[RuleType]] = {}
        self._transforms: dict[ObjectType, ObjectType] = {}

    def initial_parse(self) -> None:
        """Read sentences from every registered start position, then forget them."""
        self._rules.clear()
        for start in self._parse_targets:
            self._parse_from(start)
        self._parse_targets.clear()

    def slide_chain_from(
        self, start: Position, direction: Direction, max_depth: int = _MAX_CHAIN
    ) -> list[TextTile]:
        """Collect consecutive text tiles from ``start`` in a direction.

        The first text on each tile is taken; the chain ends at the map edge,
        at a tile without text, or after ``max_depth`` tiles.
        """
        chain: list[TextTile] = []
        step = vector(direction)
        pos = start
        for _ in range(max_depth):
            tile = self.board.get_tile(pos)
            if tile is None:
                break
            text = next((o for o in tile.objects if isinstance(o, TextTile)), None)
            if text is None:
                break
            chain.append(text)
            pos = pos + step
        return chain

    def has_rule(self, obj: ObjectType, rule: RuleType) -> bool:
        return rule in self._rules.get(obj, ())

    def get_rules(self, obj: ObjectType) -> frozenset[RuleType]:
        return frozenset(self._rules.get(obj, ()))

    def get_transform(self, obj: ObjectType) -> Optional[ObjectType]:
        """Return the type an object turns into, if a rule says so."""
        return self._transforms.get(obj)

    def register_parse_target(self, pos: Position) -> None:
        """Remember a position where a sentence may start."""
        self._parse_targets.append(pos)

    def update_rules_at(self, center: Position) -> None:
        """Drop rules broken at a position and read the sentences there again."""
        self._remove_rules_linked_to(center)
        self._parse_from(center)

    def _chains_at(self, start: Position):
        for direction in _READ_DIRECTIONS:
            chain = self.slide_chain_from(start, direction, _MAX_CHAIN)
            if len(chain) >= _MIN_SENTENCE:
                yield chain

    def _parse_from(self, start: Position) -> None:
        for chain in self._chains_at(start):
            for parsed in parse_fsm(chain):
                self._apply(parsed)

    def _apply(self, parsed: ParsedRule) -> None:
        if isinstance(parsed.rule, RuleType):
            self._rules.setdefault(parsed.subject, set()).add(parsed.rule)
        else:
            self._transforms[parsed.subject] = parsed.rule

    def _remove_rules_linked_to(self, center: Position) -> None:
        for chain in self._chains_at(center):
            if parse_fsm(chain):
                continue
            subject = chain[0].to_object_type()
            if subject is not None:
                self._rules.pop(subject, None)
                self._transforms.pop(subject, None)