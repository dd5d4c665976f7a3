"""
Unit tests for core.config module.
"""
import logging

import pytest
from epubtoc.core.config import Config, validate_config


class TestConfigValidation:
    """Tests for Config.validate and validate_config."""

    def test_defaults_valid(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
        monkeypatch.setattr(Config, "TOC_TITLE", "Table of Contents")
        monkeypatch.setattr(Config, "NCX_UID", "urn:uuid:epubtoc")
        monkeypatch.setattr(Config, "HEADING_MAX_LEVEL", 3)

        assert Config.validate() == []
        validate_config(Config())

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_out_of_range(self, monkeypatch, level):
        monkeypatch.setattr(Config, "HEADING_MAX_LEVEL", level)

        errors = Config.validate()

        assert any("HEADING_MAX_LEVEL" in error for error in errors)

    def test_all_errors_reported(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        monkeypatch.setattr(Config, "TOC_TITLE", "  ")

        with pytest.raises(ValueError) as exc_info:
            validate_config(Config())

        message = str(exc_info.value)
        assert "LOG_LEVEL" in message
        assert "TOC_TITLE" in message

    def test_properties(self, monkeypatch):
        monkeypatch.setattr(Config, "TOC_NUMBERED", True)
        monkeypatch.setattr(Config, "HEADING_MAX_LEVEL", 4)

        config = Config()

        assert config.toc_numbered is True
        assert config.heading_max_level == 4

    def test_logging_level(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "debug")

        assert Config.logging_level() == logging.DEBUG
