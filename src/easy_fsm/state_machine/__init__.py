"""State machine definition and execution."""

from .errors import (
    DefinitionError,
    DuplicateTransitionError,
    EventNotDefinedError,
    StateNotMatchError,
    TransitionError,
)
from .machine import Machine
from .mermaid import mermaid_graph_by_top_down
from .model import TextTransform, TransitionKey, TransitionRule, label_text
from .table import TransitionTable

__all__ = [
    "DefinitionError",
    "DuplicateTransitionError",
    "EventNotDefinedError",
    "Machine",
    "StateNotMatchError",
    "TextTransform",
    "TransitionError",
    "TransitionKey",
    "TransitionRule",
    "TransitionTable",
    "label_text",
    "mermaid_graph_by_top_down",
]
