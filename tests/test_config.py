"""Tests for the configuration system."""

from __future__ import annotations

import json

import pytest

from unattend_validator.config.loader import clear_cache, get_config, load_config
from unattend_validator.config.models import ValidatorConfig
from unattend_validator.domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


class TestDefaultConfig:
    def test_loads_without_error(self):
        assert isinstance(load_config(), ValidatorConfig)

    def test_report_defaults(self):
        cfg = get_config()
        assert cfg.report.default_filename == "unattend_validation_report.txt"
        assert cfg.report.title == "Windows Unattend.xml Validation Report"
        assert cfg.console.detailed is False

    def test_matches_model_defaults(self):
        assert load_config() == ValidatorConfig()

    def test_is_cached(self):
        assert get_config() is get_config()


class TestCustomConfig:
    def test_partial_file_fills_defaults(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"report": {"default_filename": "out.txt"}}), encoding="utf-8")
        cfg = load_config(path)
        assert cfg.report.default_filename == "out.txt"
        assert cfg.report.timestamp_format == "%Y-%m-%d %H:%M:%S"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_invalid_type(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"console": {"detailed": "sometimes"}}), encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)
