"""Core enumerations, grid positions and direction vectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Direction(Enum):
    """A player command: a movement direction or a control action."""

    NONE = auto()
    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    RESET = auto()
    PAUSE = auto()


class NounType(Enum):
    """Nouns that a noun text can name."""

    BABA = auto()
    ROCK = auto()
    WALL = auto()
    FLAG = auto()


class ObjectType(Enum):
    """Every kind of thing that can stand on the board."""

    NONE = auto()
    BABA = auto()
    ROCK = auto()
    WALL = auto()
    FLAG = auto()

    TEXT_BABA = auto()
    TEXT_ROCK = auto()
    TEXT_WALL = auto()
    TEXT_FLAG = auto()

    TEXT_STOP = auto()
    TEXT_IS = auto()
    TEXT_YOU = auto()
    TEXT_WIN = auto()
    TEXT_PUSH = auto()


class ObjectRole(Enum):
    """The grammatical role an object type plays in a sentence."""

    NONE = auto()
    TEXT = auto()
    NOUN = auto()
    VERB = auto()
    PROPERTY = auto()


class RuleType(Enum):
    """Properties that a rule can give to an object."""

    NONE = auto()
    YOU = auto()
    PUSH = auto()
    STOP = auto()
    WIN = auto()


class TextType(Enum):
    """The word class of a text tile."""

    NOUN = auto()
    VERB = auto()
    STATE = auto()


class VerbKind(Enum):
    """Verbs and connectives a sentence can contain."""

    IS = auto()
    AND = auto()
    HAS = auto()
    NOT = auto()
    INVALID = auto()


class VerbType(Enum):
    """Verb text tiles."""

    TEXT_IS = auto()
    TEXT_AND = auto()
    TEXT_HAS = auto()


class TileType(Enum):
    """Background type of a board tile."""

    NONE = auto()


@dataclass(frozen=True)
class Position:
    """A cell on the grid: ``x`` is the column, ``y`` the row."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)


_TEXT_TYPES = frozenset(
    {
        ObjectType.TEXT_BABA,
        ObjectType.TEXT_ROCK,
        ObjectType.TEXT_WALL,
        ObjectType.TEXT_FLAG,
        ObjectType.TEXT_STOP,
        ObjectType.TEXT_IS,
        ObjectType.TEXT_YOU,
        ObjectType.TEXT_WIN,
        ObjectType.TEXT_PUSH,
    }
)

_PLAIN_OBJECTS = frozenset(
    {ObjectType.BABA, ObjectType.ROCK, ObjectType.WALL, ObjectType.FLAG}
)

_ROLES = {
    ObjectType.TEXT_BABA: ObjectRole.NOUN,
    ObjectType.TEXT_ROCK: ObjectRole.NOUN,
    ObjectType.TEXT_WALL: ObjectRole.NOUN,
    ObjectType.TEXT_FLAG: ObjectRole.NOUN,
    ObjectType.TEXT_IS: ObjectRole.VERB,
    ObjectType.TEXT_YOU: ObjectRole.PROPERTY,
    ObjectType.TEXT_PUSH: ObjectRole.PROPERTY,
    ObjectType.TEXT_STOP: ObjectRole.PROPERTY,
    ObjectType.TEXT_WIN: ObjectRole.PROPERTY,
}

_VECTORS = {
    Direction.UP: Position(0, -1),
    Direction.DOWN: Position(0, 1),
    Direction.RIGHT: Position(1, 0),
    Direction.LEFT: Position(-1, 0),
}


def is_text(object_type: ObjectType) -> bool:
    """Return True if the object type is a text tile."""
    return object_type in _TEXT_TYPES


def is_object(object_type: ObjectType) -> bool:
    """Return True if the object type is a plain (non-text) object."""
    return object_type in _PLAIN_OBJECTS


def object_role(object_type: ObjectType) -> ObjectRole:
    """Return the grammatical role of an object type."""
    return _ROLES.get(object_type, ObjectRole.NONE)


def vector(direction: Direction) -> Position:
    """Return the unit step for a direction; non-moving commands give (0, 0)."""
    return _VECTORS.get(direction, Position(0, 0))