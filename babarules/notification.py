"""Collecting changed positions and handing them to the rule manager."""

from __future__ import annotations

from typing import Protocol

from babarules.types import Position


class _RuleUpdater(Protocol):
    def update_rules_at(self, center: Position) -> None: ...


class NotificationManager:
    """Keeps the set of positions whose rules need to be read again."""

    def __init__(self) -> None:
        self._dirty: set[Position] = set()

    @property
    def dirty_positions(self) -> frozenset[Position]:
        return frozenset(self._dirty)

    def register_dirty_position(self, pos: Position) -> None:
        self._dirty.add(pos)

    def process_dirty_flags(self, manager: _RuleUpdater) -> None:
        """Ask the manager to update rules at every dirty position, then clear."""
        for pos in self._dirty:
            manager.update_rules_at(pos)
        self.clear()

    def is_empty(self) -> bool:
        return not self._dirty

    def clear(self) -> None:
        self._dirty.clear()