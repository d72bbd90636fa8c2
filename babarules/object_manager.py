"""Placing, removing and finding objects on the board."""

from __future__ import annotations

from typing import Optional

from babarules.board import Tile, TileMap
from babarules.objects import TileObject
from babarules.types import Position, RuleType


class ObjectManager:
    """Keeps objects and the tiles they stand on in step."""

    def __init__(self, board: TileMap) -> None:
        self.board = board

    def add_object(self, obj: Optional[TileObject]) -> None:
        """Put an object on the board tile matching its current tile's position.

        Objects whose position lies outside the board are left alone.
        """
        if obj is None:
            return
        if obj.tile is None:
            raise ValueError("object has no tile to take a position from")
        pos = obj.tile.position
        if not self.board.is_inside(pos):
            return
        tile = self.board.get_tile(pos)
        tile.add_object(obj)
        obj.tile = tile

    def remove_object(self, obj: Optional[TileObject]) -> None:
        """Take an object off its tile and detach it."""
        if obj is None or obj.tile is None:
            return
        obj.tile.remove_object(obj)
        obj.tile = None

    def objects_with_rule(self, rule: RuleType) -> list[TileObject]:
        """Return every object carrying a rule, scanning rows top to bottom."""
        return [obj for tile in self.board for obj in tile.objects if obj.has_rule(rule)]

    def get_tile(self, pos: Position) -> Optional[Tile]:
        return self.board.get_tile(pos)