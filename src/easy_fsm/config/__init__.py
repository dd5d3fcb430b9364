"""Configuration package for easy_fsm definition files."""

from .loader import build_table, load_config, load_table
from .models import Config, LoggingConfig, MachineConfig, TransitionConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "MachineConfig",
    "TransitionConfig",
    "build_table",
    "load_config",
    "load_table",
]
