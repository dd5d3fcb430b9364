"""Mermaid diagram export for transition tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .model import TextTransform, label_text

if TYPE_CHECKING:
    from .table import TransitionTable


def mermaid_graph_by_top_down(
    table: "TransitionTable", transform: Optional[TextTransform] = None
) -> str:
    """Return a Mermaid ``graph TD`` definition with one line per declared rule.

    Rules are listed in declaration order, so the output is stable and can be
    diffed. ``transform`` is applied separately to the source, event and
    destination text, e.g. to substitute display names::

        graph TD
          AwaitingPayment --> |Order.Placed| Confirmed
          Confirmed --> |Order.Shipped| Shipped
    """

    lines = ["", "graph TD"]
    for rule in table.rules():
        src = label_text(rule.source)
        event = label_text(rule.event)
        dest = label_text(rule.dest)
        if transform is not None:
            src, event, dest = transform(src), transform(event), transform(dest)
        lines.append(f"  {src} --> |{event}| {dest}")
    return "\n".join(lines) + "\n"
