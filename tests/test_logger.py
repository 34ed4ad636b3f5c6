"""Tests for package logging configuration."""
import importlib
import logging

import pytest

import convert
from twotouch import logger as logger_module
from twotouch.logger import logger, set_level


@pytest.fixture(autouse=True)
def restore_level():
    """Put the package logger back to INFO after each test."""
    yield
    logger.setLevel(logging.INFO)


class TestSetLevel:
    """Test set_level."""

    @pytest.mark.parametrize("name, level", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (" error ", logging.ERROR),
    ])
    def test_known_levels(self, name, level):
        """Test that level names are accepted in any case."""
        assert set_level(name) is True
        assert logger.level == level

    def test_unknown_level_falls_back_to_info(self, caplog):
        """Test that a mistyped level warns and uses INFO."""
        with caplog.at_level(logging.WARNING, logger="twotouch"):
            assert set_level("verbose") is False
        assert logger.level == logging.INFO
        assert "Unknown log level 'verbose'" in caplog.text


class TestEnvironmentLevel:
    """Test TWOTOUCH_LOG_LEVEL handling."""

    def test_unknown_level_does_not_break_import(self, monkeypatch):
        """Test that reloading with a bad level still gives a working logger."""
        monkeypatch.setenv("TWOTOUCH_LOG_LEVEL", "verbose")
        importlib.reload(logger_module)
        assert logger_module.logger.level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        """Test that a valid level is applied when the module loads."""
        monkeypatch.setenv("TWOTOUCH_LOG_LEVEL", "warning")
        importlib.reload(logger_module)
        assert logger_module.logger.level == logging.WARNING

    def test_reload_does_not_duplicate_handlers(self, monkeypatch):
        """Test that handlers are only attached once."""
        count = len(logger.handlers)
        monkeypatch.setenv("TWOTOUCH_LOG_LEVEL", "info")
        importlib.reload(logger_module)
        assert len(logger.handlers) == count

    def test_command_line_survives_bad_level(self, monkeypatch, capsys):
        """Test that the command line still converts with a bad level set."""
        monkeypatch.setenv("TWOTOUCH_LOG_LEVEL", "verbose")
        assert convert.main(["decode", "2104"]) == 0
        assert capsys.readouterr().out.splitlines() == ["2104: が"]
