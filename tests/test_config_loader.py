"""Tests for YAML config loading and logging setup."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from common.config_loader import load_scenario, load_yaml
from common.logging_config import CliLogHandler, configure_logging, remove_cli_handlers, resolve_level
from engine.scenario import DEMO_STEPS

ROOT = Path(__file__).resolve().parent.parent


class TestLoadScenario:
    """Tests for scenario files."""

    def test_bundled_scenario_matches_demo(self):
        """The bundled scenario should be the built-in walkthrough."""
        steps = load_scenario(ROOT / "config" / "demo_scenario.yaml")

        assert [s["op"] for s in steps] == [s["op"] for s in DEMO_STEPS]
        assert steps[0] == {"op": "buy", "symbol": "ABC", "price": 50.0, "quantity": 10}

    def test_empty_file_loads_as_empty(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_yaml(path) == {}
        assert load_scenario(path) == []

    def test_steps_must_be_list(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("steps: buy\n", encoding="utf-8")

        with pytest.raises(ValueError, match="'steps' must be a list"):
            load_scenario(path)

    def test_document_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- {op: print}\n", encoding="utf-8")

        with pytest.raises(ValueError, match="expected a mapping"):
            load_scenario(path)

    def test_malformed_yaml_raises_value_error(self, tmp_path):
        """YAML syntax errors should surface as ValueError naming the file."""
        path = tmp_path / "broken.yaml"
        path.write_text("steps: [ {op: buy\n", encoding="utf-8")

        with pytest.raises(ValueError, match="broken.yaml: invalid YAML"):
            load_scenario(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scenario(tmp_path / "missing.yaml")


class TestLogging:
    """Tests for logging configuration."""

    def test_resolve_level_from_argument(self):
        assert resolve_level("debug") == logging.DEBUG

    def test_resolve_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        assert resolve_level() == logging.INFO

    def test_resolve_level_defaults_to_warning(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert resolve_level() == logging.WARNING
        assert resolve_level("bogus") == logging.WARNING

    def test_configure_logging_does_not_stack_handlers(self):
        root = logging.getLogger()
        configure_logging("INFO")
        configure_logging("INFO")

        ours = [h for h in root.handlers if isinstance(h, CliLogHandler)]
        assert len(ours) == 1
        assert root.level == logging.INFO

    def test_remove_cli_handlers_keeps_other_handlers(self):
        """Only handlers installed by configure_logging should be removed."""
        root = logging.getLogger()
        other = logging.NullHandler()
        root.addHandler(other)
        try:
            configure_logging("INFO")

            remove_cli_handlers(root)

            assert other in root.handlers
            assert not any(isinstance(h, CliLogHandler) for h in root.handlers)
        finally:
            root.removeHandler(other)
