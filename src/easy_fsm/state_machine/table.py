"""Transition table builder."""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Iterator, List, Tuple

from .errors import DuplicateTransitionError
from .machine import Machine
from .model import E, S, TransitionKey, TransitionRule, label_text

logger = logging.getLogger("easy_fsm.table")

_MISSING = object()


class TransitionTable(Generic[E, S]):
    """Fixed set of ``(event, source) -> dest`` rules, declared at startup.

    Build the table once, typically at module import time, by chaining
    :meth:`declare` calls from the designated start state::

        ORDER_TABLE = (
            TransitionTable("AwaitingPayment")
            .declare("Order.Placed", "AwaitingPayment", "Confirmed")
            .declare("Order.Shipped", "Confirmed", "Shipped")
        )

    Every state mentioned as start, source or destination is discovered
    automatically. The table is not locked after the last declaration, but it
    must be treated as read-only from then on: machines created from it read the
    rules concurrently and without coordination.
    """

    def __init__(self, start_state: S) -> None:
        self._start_state = start_state
        self._transitions: Dict[TransitionKey[E, S], S] = {}
        self._sequence: List[TransitionKey[E, S]] = []
        # dict keeps insertion order, so states() is stable between calls
        self._states: Dict[S, None] = {start_state: None}

    @property
    def start_state(self) -> S:
        return self._start_state

    def declare(self, event: E, source: S, dest: S) -> "TransitionTable[E, S]":
        """Add ``source --event--> dest`` and return the table for chaining.

        Raises :class:`DuplicateTransitionError` if a rule for ``(event, source)``
        already exists, whatever its destination.
        """
        key = TransitionKey(event, source)
        if key in self._transitions:
            raise DuplicateTransitionError(event, source)

        self._transitions[key] = dest
        self._sequence.append(key)
        self._states.setdefault(source, None)
        self._states.setdefault(dest, None)
        logger.debug(
            "Declared %s --> |%s| %s", label_text(source), label_text(event), label_text(dest)
        )
        return self

    def states(self) -> List[S]:
        """Return every known state once, the start state first."""
        return list(self._states)

    def lookup(self, event: E, state: S, default: Any = None) -> Any:
        """Return the destination declared for ``event`` fired in ``state``, else ``default``."""
        return self._transitions.get(TransitionKey(event, state), default)

    def required_states(self, event: E) -> List[S]:
        """Return the source states ``event`` is declared for, in declaration order."""
        return [key.source for key in self._sequence if key.event == event]

    def events(self) -> List[E]:
        """Return the distinct declared events in order of first declaration."""
        seen: Dict[E, None] = {}
        for key in self._sequence:
            seen.setdefault(key.event, None)
        return list(seen)

    def rules(self) -> Tuple[TransitionRule[E, S], ...]:
        """Return all declared rules in declaration order."""
        return tuple(
            TransitionRule(key.event, key.source, self._transitions[key]) for key in self._sequence
        )

    def machine(self, state: Any = _MISSING) -> Machine[E, S]:
        """Create a machine instance at ``state``, or at the start state when omitted."""
        return Machine(self, self._start_state if state is _MISSING else state)

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[TransitionRule[E, S]]:
        return iter(self.rules())

    def __repr__(self) -> str:
        return f"TransitionTable(start_state={self._start_state!r}, rules={len(self)})"
