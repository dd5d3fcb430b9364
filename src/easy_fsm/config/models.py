"""Dataclass definitions for machine definition files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping, Optional, Tuple

from easy_fsm.state_machine import TextTransform


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    filepath: Optional[Path] = None
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5
    console: bool = True

    def resolved_path(self) -> Optional[Path]:
        if self.filepath is None:
            return None
        return Path(self.filepath).expanduser().resolve()


@dataclass(frozen=True)
class TransitionConfig:
    """One ``source --event--> dest`` entry of a definition file."""

    event: str
    source: str
    dest: str


@dataclass(frozen=True)
class MachineConfig:
    """State machine definition: start state, rules and optional display labels."""

    start_state: str
    transitions: Tuple[TransitionConfig, ...] = ()
    labels: Mapping[str, str] = field(default_factory=dict)

    def label_transform(self) -> Optional[TextTransform]:
        """Return a transform substituting display labels, or None without labels."""
        if not self.labels:
            return None
        labels = dict(self.labels)
        return lambda text: labels.get(text, text)


@dataclass(frozen=True)
class Config:
    """Root configuration object."""

    machine: MachineConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)
