"""
Tests for logging setup.
"""
import logging

import pytest

from hyperglossary.utils import logger as logger_module
from hyperglossary.utils.config_manager import LoggingConfig
from hyperglossary.utils.logger import ColoredFormatter, setup_logging, setup_logging_from_config


@pytest.fixture
def captured(monkeypatch):
    calls = []
    monkeypatch.setattr(logger_module, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


def test_console_level_from_config(captured):
    setup_logging_from_config(LoggingConfig(console_level="ERROR", log_dir="var/log"))

    kwargs = captured[0]
    assert kwargs["console_level"] == "ERROR"
    assert str(kwargs["log_dir"]) == "var/log"


def test_default_console_level_is_quiet(captured):
    setup_logging_from_config(LoggingConfig())

    assert captured[0]["console_level"] == "WARNING"


def test_verbose_overrides_console_level(captured):
    setup_logging_from_config(LoggingConfig(console_level="ERROR"), verbose=True)

    assert captured[0]["console_level"] == "DEBUG"


def test_setup_logging_without_file(temp_dir):
    log = setup_logging(
        name="hyperglossary.tests.nofile",
        log_dir=temp_dir / "logs",
        console_level="ERROR",
        log_to_file=False
    )
    try:
        assert len(log.handlers) == 1
        assert log.handlers[0].level == logging.ERROR
        assert not (temp_dir / "logs").exists()
    finally:
        log.handlers.clear()


def test_colored_formatter_restores_levelname():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)

    text = ColoredFormatter('[%(levelname)s] %(message)s').format(record)

    assert "\033[32mINFO\033[0m" in text
    assert record.levelname == "INFO"
