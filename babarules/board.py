"""Board tiles and the rectangular map that holds them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from babarules.objects import ObjectTile, TextTile, TileObject
from babarules.types import Position, TileType


class Tile:
    """One cell of the board holding a stack of objects.

    Text is kept at the front of the stack and plain objects at the back.
    """

    def __init__(
        self, position: Position = Position(), background: TileType = TileType.NONE
    ) -> None:
        self.position = position
        self.background = background
        self._objects: deque[TileObject] = deque()

    @property
    def objects(self) -> tuple[TileObject, ...]:
        """The objects on this tile, front first."""
        return tuple(self._objects)

    def add_object(self, obj: Optional[TileObject]) -> None:
        """Stack an object here; objects that are neither text nor plain are ignored."""
        if isinstance(obj, ObjectTile):
            self._objects.append(obj)
        elif isinstance(obj, TextTile):
            self._objects.appendleft(obj)

    def remove_object(self, obj: TileObject) -> None:
        """Remove every occurrence of an object from this tile."""
        self._objects = deque(o for o in self._objects if o is not obj)

    def contains(self, obj: TileObject) -> bool:
        return any(o is obj for o in self._objects)

    def __repr__(self) -> str:
        return f"Tile({self.position!r}, objects={len(self._objects)})"


class TileMap:
    """A rectangular grid of tiles addressed by position."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("map dimensions must not be negative")
        self.width = width
        self.height = height
        self._grid = [
            [Tile(Position(x, y)) for x in range(width)] for y in range(height)
        ]

    def is_inside(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get_tile(self, pos: Position) -> Optional[Tile]:
        """Return the tile at a position, or None outside the map."""
        if not self.is_inside(pos):
            return None
        return self._grid[pos.y][pos.x]

    def __iter__(self) -> Iterator[Tile]:
        """Yield every tile row by row, left to right."""
        for row in self._grid:
            yield from row