"""Moving the objects the player controls, pushing what is in the way."""

from __future__ import annotations

from typing import Optional

from babarules.board import Tile
from babarules.input import InputManager
from babarules.notification import NotificationManager
from babarules.object_manager import ObjectManager
from babarules.objects import TileObject
from babarules.types import Direction, RuleType, vector


class ControlManager:
    """Applies player commands to every object that is YOU."""

    def __init__(
        self,
        object_manager: ObjectManager,
        input_manager: Optional[InputManager] = None,
        notification_manager: Optional[NotificationManager] = None,
    ) -> None:
        self.object_manager = object_manager
        self.input_manager = input_manager
        self.notification_manager = notification_manager

    def update(self) -> None:
        """Read one command and try to move every YOU object with it."""
        if self.input_manager is None:
            raise RuntimeError("no input manager to read commands from")
        direction = self.input_manager.get_input()
        if direction is Direction.NONE:
            return
        for obj in self.object_manager.objects_with_rule(RuleType.YOU):
            self.try_move(obj, direction)

    def try_move(self, obj: Optional[TileObject], direction: Direction) -> bool:
        """Move an object one step, pushing PUSH objects and halting at STOP.

        Returns True if the object moved.
        """
        if obj is None:
            return False
        current: Optional[Tile] = obj.tile
        if current is None:
            return False
        current_pos = current.position
        next_tile = self.object_manager.get_tile(current_pos + vector(direction))
        if next_tile is None:
            return False

        for other in next_tile.objects:
            if other.has_rule(RuleType.STOP):
                return False
            if other.has_rule(RuleType.PUSH):
                self.try_move(other, direction)
                if next_tile.contains(other):
                    return False

        self._notify(obj, current)
        self.move(obj, current, next_tile)
        return True

    def move(
        self, obj: Optional[TileObject], source: Optional[Tile], target: Optional[Tile]
    ) -> None:
        """Take an object off one tile and put it on another."""
        if obj is None or source is None or target is None:
            return
        source.remove_object(obj)
        target.add_object(obj)
        obj.tile = target
        self._notify(obj, target)

    def _notify(self, obj: TileObject, tile: Tile) -> None:
        flag = obj.notify_flag
        if flag is None:
            return
        flag.set_dirty()
        if self.notification_manager is not None:
            self.notification_manager.register_dirty_position(tile.position)