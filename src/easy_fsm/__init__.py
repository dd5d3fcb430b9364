"""easy_fsm: declare event/state transition tables once, dispatch events against them."""

from __future__ import annotations

from .state_machine import (
    DefinitionError,
    DuplicateTransitionError,
    EventNotDefinedError,
    Machine,
    StateNotMatchError,
    TransitionError,
    TransitionRule,
    TransitionTable,
    mermaid_graph_by_top_down,
)

__version__ = "0.1.0"

__all__ = [
    "DefinitionError",
    "DuplicateTransitionError",
    "EventNotDefinedError",
    "Machine",
    "StateNotMatchError",
    "TransitionError",
    "TransitionRule",
    "TransitionTable",
    "mermaid_graph_by_top_down",
]
