"""Command-line entry point: inspect and exercise a state machine definition file."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from easy_fsm.config import Config, build_table, load_config
from easy_fsm.infra import configure_logging, install_exception_hook
from easy_fsm.state_machine import DefinitionError, TransitionError, TransitionTable, label_text

logger = logging.getLogger("easy_fsm.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="easy-fsm", description="Inspect a state machine definition.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the logging level from the definition file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    states = subparsers.add_parser("states", help="List every state, start state first.")
    states.add_argument("config", type=Path, help="Path to a YAML/JSON definition file.")

    graph = subparsers.add_parser("graph", help="Print the transitions as a Mermaid graph.")
    graph.add_argument("config", type=Path, help="Path to a YAML/JSON definition file.")
    graph.add_argument("--raw", action="store_true", help="Do not apply display labels.")

    dispatch = subparsers.add_parser("dispatch", help="Fire one event from a given state.")
    dispatch.add_argument("config", type=Path, help="Path to a YAML/JSON definition file.")
    dispatch.add_argument("--state", required=True, help="State to start from.")
    dispatch.add_argument("--event", required=True, help="Event to fire.")

    return parser.parse_args(argv)


def run(args: argparse.Namespace, config: Config, table: TransitionTable[str, str]) -> int:
    if args.command == "states":
        for state in table.states():
            print(label_text(state))
        return 0

    if args.command == "graph":
        transform = None if args.raw else config.machine.label_transform()
        print(table.machine().export_graph(transform), end="")
        return 0

    machine = table.machine(args.state)
    try:
        machine.act(args.event, lambda dest: None)
    except TransitionError as exc:
        print(f"easy-fsm: {exc}", file=sys.stderr)
        return 1
    print(label_text(machine.current_state))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args.config)
        table = build_table(config.machine)
    except (OSError, ValueError, DefinitionError) as exc:
        print(f"easy-fsm: cannot load {args.config}: {exc}", file=sys.stderr)
        return 1

    logging_config = config.logging
    if args.log_level:
        logging_config = dataclasses.replace(logging_config, level=args.log_level)
    configure_logging(logging_config)
    install_exception_hook()
    logger.info("Loaded %d transitions from %s", len(table), args.config)

    return run(args, config, table)


if __name__ == "__main__":
    sys.exit(main())
