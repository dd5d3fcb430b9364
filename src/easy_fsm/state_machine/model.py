"""Data structures describing declared transitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Hashable, TypeVar

E = TypeVar("E", bound=Hashable)
S = TypeVar("S", bound=Hashable)

TextTransform = Callable[[str], str]


def label_text(value: Hashable) -> str:
    """Render an event or state label, using the value of enum members."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True, slots=True)
class TransitionKey(Generic[E, S]):
    """Lookup key of a rule: the event and the state it must fire from."""

    event: E
    source: S

    def __str__(self) -> str:
        return f"{{event: {label_text(self.event)}, requiredState: {label_text(self.source)}}}"


@dataclass(frozen=True, slots=True)
class TransitionRule(Generic[E, S]):
    """A declared ``source --event--> dest`` transition."""

    event: E
    source: S
    dest: S
