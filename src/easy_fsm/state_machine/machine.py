"""Execution engine: resolves events against a shared transition table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Generic, Optional, TypeVar

from .errors import EventNotDefinedError, StateNotMatchError
from .mermaid import mermaid_graph_by_top_down
from .model import E, S, TextTransform, label_text

if TYPE_CHECKING:
    from .table import TransitionTable

R = TypeVar("R")

logger = logging.getLogger("easy_fsm.machine")

_MISSING = object()


class Machine(Generic[E, S]):
    """A transition table paired with a current state.

    Instances are cheap: the table is shared by reference and only the current
    state is owned by the instance. Create one per attempted operation with
    :meth:`derive_at` and discard it afterwards. A single instance must not be
    shared between threads without external locking, since :meth:`act` reads
    and then writes the current state.
    """

    __slots__ = ("_table", "_current")

    def __init__(self, table: "TransitionTable[E, S]", current_state: S) -> None:
        self._table = table
        self._current = current_state

    @property
    def table(self) -> "TransitionTable[E, S]":
        return self._table

    @property
    def current_state(self) -> S:
        return self._current

    def derive_at(self, required_state: S) -> "Machine[E, S]":
        """Return a new instance on the same table, positioned at ``required_state``."""
        return Machine(self._table, required_state)

    def act(self, event: E, effect: Callable[[S], R]) -> R:
        """Fire ``event`` and call ``effect`` with the destination state.

        The current state changes only when a rule matches; it is updated before
        ``effect`` runs and is not restored if ``effect`` raises. The return
        value of ``effect`` is passed back unchanged.

        Raises :class:`StateNotMatchError` when the event is declared for other
        states only, and :class:`EventNotDefinedError` when it is not declared at
        all.
        """
        dest = self._table.lookup(event, self._current, _MISSING)
        if dest is _MISSING:
            required = self._table.required_states(event)
            if required:
                logger.info(
                    "Rejected %s in state %s (requires %s)",
                    label_text(event),
                    label_text(self._current),
                    ", ".join(label_text(state) for state in required),
                )
                raise StateNotMatchError(event, required[0], self._current)
            logger.info("Rejected undefined event %s", label_text(event))
            raise EventNotDefinedError(event)

        previous = self._current
        self._current = dest
        logger.debug(
            "Transition %s --> |%s| %s", label_text(previous), label_text(event), label_text(dest)
        )
        return effect(dest)

    def export_graph(self, transform: Optional[TextTransform] = None) -> str:
        """Render the table as a top-down Mermaid graph, see :func:`mermaid_graph_by_top_down`."""
        return mermaid_graph_by_top_down(self._table, transform)

    def __repr__(self) -> str:
        return f"Machine(current_state={self._current!r})"
