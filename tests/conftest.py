"""Shared fixtures."""

import logging

import pytest

from easy_fsm import TransitionTable


@pytest.fixture
def order_table():
    """Four-rule order table; 'Cancelled' is never declared anywhere."""
    return (
        TransitionTable("AwaitingPayment")
        .declare("Placed", "AwaitingPayment", "Confirmed")
        .declare("Shipped", "Confirmed", "Shipped")
        .declare("ReturnRequested", "Shipped", "ReturnInProgress")
        .declare("ReturnRequested", "Delivered", "ReturnInProgress")
    )


@pytest.fixture
def definition_file(tmp_path):
    path = tmp_path / "machine.yaml"
    path.write_text(
        "machine:\n"
        "  start_state: Idle\n"
        "  transitions:\n"
        "    - {event: Start, source: Idle, dest: Running}\n"
        "    - {event: Stop, source: Running, dest: Idle}\n"
        "    - {event: Fail, source: Running, dest: Broken}\n"
        "  labels:\n"
        "    Broken: Out of order\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
