"""Exceptions raised while defining or driving a state machine."""

from __future__ import annotations

from typing import Hashable

from .model import TransitionKey, label_text


class DefinitionError(Exception):
    """The transition table itself is malformed."""


class DuplicateTransitionError(DefinitionError):
    """An (event, source state) pair was declared twice on the same table."""

    def __init__(self, event: Hashable, source: Hashable) -> None:
        self.event = event
        self.source = source
        super().__init__(
            f"key = {TransitionKey(event, source)} : fsm adds duplicated transition"
        )


class TransitionError(Exception):
    """Base class for events that could not be resolved against the current state."""


class EventNotDefinedError(TransitionError):
    """No rule is declared for the event in any source state."""

    def __init__(self, event: Hashable) -> None:
        self.event = event
        super().__init__(f"event = {label_text(event)}: event not exist")


class StateNotMatchError(TransitionError):
    """The event is declared, but not for the machine's current state."""

    def __init__(self, event: Hashable, required_state: Hashable, current_state: Hashable) -> None:
        self.event = event
        self.required_state = required_state
        self.current_state = current_state
        super().__init__(
            f"key = {TransitionKey(event, required_state)}, "
            f"but currentState = {label_text(current_state)}: state not match"
        )
