"""Tests for definition file loading."""

import json
from pathlib import Path

import pytest

from easy_fsm import DuplicateTransitionError
from easy_fsm.config import (
    LoggingConfig,
    MachineConfig,
    TransitionConfig,
    build_table,
    load_config,
    load_table,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


class TestLoadConfig:

    def test_yaml_definition(self, definition_file):
        config = load_config(definition_file)
        assert config.machine.start_state == "Idle"
        assert config.machine.transitions[0] == TransitionConfig("Start", "Idle", "Running")
        assert len(config.machine.transitions) == 3
        assert config.machine.labels == {"Broken": "Out of order"}
        assert config.logging == LoggingConfig()

    def test_json_definition(self, tmp_path):
        path = tmp_path / "machine.json"
        path.write_text(
            json.dumps(
                {
                    "machine": {
                        "start_state": "Idle",
                        "transitions": [{"event": "Start", "source": "Idle", "dest": "Running"}],
                    },
                    "logging": {"level": "DEBUG", "console": False},
                }
            ),
            encoding="utf-8",
        )
        config = load_config(str(path))
        assert config.machine.transitions == (TransitionConfig("Start", "Idle", "Running"),)
        assert config.logging.level == "DEBUG"
        assert config.logging.console is False

    def test_relative_log_path_resolves_against_config_dir(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text(
            "machine: {start_state: Idle}\nlogging: {filepath: logs/fsm.log}\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.logging.resolved_path() == (tmp_path / "logs" / "fsm.log").resolve()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "machine.toml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported config format"):
            load_config(path)

    def test_missing_machine_section(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text("logging: {level: INFO}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="'machine' section"):
            load_config(path)

    def test_missing_start_state(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text("machine: {transitions: []}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="start_state"):
            load_config(path)

    def test_incomplete_transition(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text(
            "machine:\n  start_state: Idle\n  transitions:\n    - {event: Start, source: Idle}\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="Transition #0"):
            load_config(path)

    def test_unknown_logging_key(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text("machine: {start_state: Idle}\nlogging: {colour: true}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid logging configuration"):
            load_config(path)


class TestBuildTable:

    def test_declares_in_file_order(self, definition_file):
        table = load_table(definition_file)
        assert [rule.event for rule in table.rules()] == ["Start", "Stop", "Fail"]
        assert table.states() == ["Idle", "Running", "Broken"]

    def test_duplicate_entries_fail(self):
        config = MachineConfig(
            start_state="Idle",
            transitions=(
                TransitionConfig("Start", "Idle", "Running"),
                TransitionConfig("Start", "Idle", "Broken"),
            ),
        )
        with pytest.raises(DuplicateTransitionError):
            build_table(config)

    def test_shipped_order_definition_matches_example_table(self):
        from easy_fsm.examples.orders import ORDER_STATE_TABLE

        table = load_table(REPO_ROOT / "config" / "order_fsm.yaml")
        assert table.machine().export_graph() == ORDER_STATE_TABLE.machine().export_graph()


class TestLabelTransform:

    def test_no_labels(self):
        assert MachineConfig(start_state="Idle").label_transform() is None

    def test_mapped_and_unmapped_labels(self):
        transform = MachineConfig(start_state="Idle", labels={"Idle": "Idle (start)"}).label_transform()
        assert transform("Idle") == "Idle (start)"
        assert transform("Running") == "Running"


def test_malformed_yaml_is_a_value_error(tmp_path):
    path = tmp_path / "machine.yaml"
    path.write_text("machine: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


class TestScalarTypes:

    def test_unquoted_yaml_booleans_are_rejected(self, tmp_path):
        path = tmp_path / "switch.yaml"
        path.write_text(
            "machine:\n"
            "  start_state: 'Off'\n"
            "  transitions:\n"
            "    - {event: Toggle, source: Off, dest: On}\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="Transition #0: 'source' must be a string, got bool"):
            load_table(path)

    def test_unquoted_start_state_is_rejected(self, tmp_path):
        path = tmp_path / "switch.yaml"
        path.write_text("machine: {start_state: Off}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="'start_state' must be a string, got bool"):
            load_config(path)

    def test_null_event_is_rejected(self, tmp_path):
        path = tmp_path / "switch.yaml"
        path.write_text(
            "machine:\n  start_state: Idle\n  transitions:\n    - {event: ~, source: Idle, dest: Busy}\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="'event' must be a string, got NoneType"):
            load_config(path)

    def test_non_string_label_key_is_rejected(self, tmp_path):
        path = tmp_path / "switch.yaml"
        path.write_text("machine:\n  start_state: Idle\n  labels: {Yes: Confirmed}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Label key must be a string, got bool"):
            load_config(path)

    def test_quoted_names_keep_their_text(self, tmp_path):
        path = tmp_path / "switch.yaml"
        path.write_text(
            "machine:\n"
            "  start_state: 'Off'\n"
            "  transitions:\n"
            "    - {event: Toggle, source: 'Off', dest: 'On'}\n"
            "    - {event: Toggle, source: 'On', dest: 'Off'}\n",
            encoding="utf-8",
        )
        assert load_table(path).states() == ["Off", "On"]
