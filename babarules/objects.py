"""Things that stand on tiles: plain objects and rule text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from babarules.types import (
    NounType,
    ObjectType,
    Position,
    RuleType,
    TextType,
    VerbKind,
    VerbType,
)


@dataclass
class NotifyFlag:
    """Marks an object whose position change must trigger a rule update."""

    pos: Position = field(default_factory=Position)
    dirty: bool = False

    def set_dirty(self) -> None:
        self.dirty = True

    def clear(self) -> None:
        self.dirty = False


@dataclass(frozen=True)
class ParsedRule:
    """One sentence understood by the parser."""

    subject: ObjectType
    rule: Union[ObjectType, RuleType]
    verb: VerbKind


class TileObject(ABC):
    """Base of everything that can be placed on a tile."""

    def __init__(self) -> None:
        self.tile: Any = None
        self.notify_flag: Optional[NotifyFlag] = None
        self._rules: set[RuleType] = set()

    @abstractmethod
    def render(self) -> str:
        """Return the text drawn for this object."""

    @property
    def rules(self) -> frozenset[RuleType]:
        return frozenset(self._rules)

    def add_rule(self, rule: RuleType) -> None:
        self._rules.add(rule)

    def remove_rule(self, rule: RuleType) -> None:
        self._rules.discard(rule)

    def clear_rules(self) -> None:
        self._rules.clear()

    def has_rule(self, rule: RuleType) -> bool:
        return rule in self._rules


class ObjectTile(TileObject):
    """A plain game object such as Baba or a rock."""

    def render(self) -> str:
        return ""


class TextTile(TileObject):
    """A word that can take part in a rule sentence."""

    def render(self) -> str:
        return ""

    @abstractmethod
    def text_type(self) -> TextType:
        """Return the word class of this text."""

    def to_object_type(self) -> Optional[ObjectType]:
        return None

    def to_rule_type(self) -> Optional[RuleType]:
        return None

    def to_verb_kind(self) -> Optional[VerbKind]:
        return None


class NounText(TextTile):
    """Text that names a kind of object."""

    @abstractmethod
    def linked_noun(self) -> NounType:
        """Return the noun this text names."""

    def text_type(self) -> TextType:
        return TextType.NOUN

    def to_object_type(self) -> Optional[ObjectType]:
        return ObjectType[self.linked_noun().name]


class BabaText(NounText):
    def linked_noun(self) -> NounType:
        return NounType.BABA

    def render(self) -> str:
        return "TEXT_BABA"


class RockText(NounText):
    def linked_noun(self) -> NounType:
        return NounType.ROCK

    def render(self) -> str:
        return "TEXT_ROCK"


class StateText(TextTile):
    """Text that names a property."""

    @abstractmethod
    def linked_rule(self) -> RuleType:
        """Return the property this text names."""

    def text_type(self) -> TextType:
        return TextType.STATE

    def to_rule_type(self) -> Optional[RuleType]:
        return self.linked_rule()


class PushText(StateText):
    def linked_rule(self) -> RuleType:
        return RuleType.PUSH

    def render(self) -> str:
        return "TEXT_PUSH"


class StopText(StateText):
    def linked_rule(self) -> RuleType:
        return RuleType.STOP

    def render(self) -> str:
        return "TEXT_STOP"


class WinText(StateText):
    def linked_rule(self) -> RuleType:
        return RuleType.WIN

    def render(self) -> str:
        return "WIN"


class YouText(StateText):
    def linked_rule(self) -> RuleType:
        return RuleType.YOU

    def render(self) -> str:
        return "TEXT_YOU"


class VerbText(TextTile):
    """Text that links a subject to a value."""

    def __init__(self, kind: VerbKind) -> None:
        super().__init__()
        self._kind = kind

    @abstractmethod
    def verb_type(self) -> VerbType:
        """Return which verb text this is."""

    @abstractmethod
    def validate(self, subject: TextTile, value: TextTile) -> Optional[ParsedRule]:
        """Return the rule formed by subject, this verb and value, if valid."""

    def text_type(self) -> TextType:
        return TextType.VERB

    def to_verb_kind(self) -> Optional[VerbKind]:
        return self._kind


class IsText(VerbText):
    """The verb IS: gives a property or turns one object into another."""

    def __init__(self) -> None:
        super().__init__(VerbKind.IS)

    def validate(self, subject: TextTile, value: TextTile) -> Optional[ParsedRule]:
        sub = subject.to_object_type()
        if sub is None:
            return None
        rule = value.to_rule_type()
        if rule is not None:
            return ParsedRule(sub, rule, VerbKind.IS)
        target = value.to_object_type()
        if target is not None:
            return ParsedRule(sub, target, VerbKind.IS)
        return None

    def verb_type(self) -> VerbType:
        return VerbType.TEXT_IS

    def render(self) -> str:
        return "TEXT_IS"