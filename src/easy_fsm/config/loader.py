"""Configuration loader utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from easy_fsm.state_machine import TransitionTable

from .models import Config, LoggingConfig, MachineConfig, TransitionConfig

logger = logging.getLogger("easy_fsm.config")


def _normalize_path(path: Path | str) -> Path:
    return path if isinstance(path, Path) else Path(path)


def _load_raw_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    suffix = config_path.suffix.lower()
    with config_path.open("r", encoding="utf-8") as stream:
        if suffix in {".yaml", ".yml"}:
            try:
                raw = yaml.safe_load(stream) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc
        elif suffix == ".json":
            raw = json.load(stream)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping, got {type(raw).__name__}")
    return raw


def load_config(config_path: Path | str) -> Config:
    """Load a definition file and construct the Config dataclass."""

    config_path = _normalize_path(config_path)
    raw = _load_raw_config(config_path)

    machine = _load_machine_config(raw.get("machine"))

    logging_raw = dict(raw.get("logging") or {})
    log_path = logging_raw.get("filepath")
    if log_path:
        # Relative log paths are resolved against the config file.
        logging_raw["filepath"] = (config_path.parent / log_path).resolve()
    try:
        logging_config = LoggingConfig(**logging_raw)
    except TypeError as exc:
        raise ValueError(f"Invalid logging configuration: {exc}") from exc

    logger.debug("Loaded %d transitions from %s", len(machine.transitions), config_path)
    return Config(machine=machine, logging=logging_config)


def build_table(config: MachineConfig) -> TransitionTable[str, str]:
    """Declare every configured transition, in file order, on a new table."""
    table: TransitionTable[str, str] = TransitionTable(config.start_state)
    for transition in config.transitions:
        table.declare(transition.event, transition.source, transition.dest)
    return table


def load_table(config_path: Path | str) -> TransitionTable[str, str]:
    return build_table(load_config(config_path).machine)


def _load_machine_config(raw_machine: Any) -> MachineConfig:
    if not isinstance(raw_machine, dict):
        raise ValueError("Configuration must include a 'machine' section.")

    if raw_machine.get("start_state") is None:
        raise ValueError("Machine configuration must include 'start_state'.")
    start_state = _require_str(raw_machine["start_state"], "Machine configuration: 'start_state'")

    raw_transitions = raw_machine.get("transitions") or []
    if not isinstance(raw_transitions, list):
        raise ValueError("'transitions' must be a list of {event, source, dest} entries.")
    transitions: List[TransitionConfig] = [
        _load_transition(index, entry) for index, entry in enumerate(raw_transitions)
    ]

    labels = raw_machine.get("labels") or {}
    if not isinstance(labels, dict):
        raise ValueError("'labels' must map state/event names to display names.")

    return MachineConfig(
        start_state=start_state,
        transitions=tuple(transitions),
        labels={
            _require_str(key, "Label key"): _require_str(value, f"Label {key!r}")
            for key, value in labels.items()
        },
    )


def _load_transition(index: int, entry: Any) -> TransitionConfig:
    try:
        event = entry["event"]
        source = entry["source"]
        dest = entry["dest"]
    except (TypeError, KeyError) as exc:
        raise ValueError(
            f"Transition #{index} must include 'event', 'source' and 'dest'."
        ) from exc
    return TransitionConfig(
        event=_require_str(event, f"Transition #{index}: 'event'"),
        source=_require_str(source, f"Transition #{index}: 'source'"),
        dest=_require_str(dest, f"Transition #{index}: 'dest'"),
    )


def _require_str(value: Any, where: str) -> str:
    # YAML 1.1 reads unquoted On/Off/Yes/No as booleans and ~ as null.
    if not isinstance(value, str):
        raise ValueError(f"{where} must be a string, got {type(value).__name__}")
    return value
