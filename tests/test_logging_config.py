"""Tests for the logging helpers."""

from __future__ import annotations

import logging

import pytest

from simulation import logging_config


@pytest.fixture(autouse=True)
def restore_loggers():
    yield
    logging_config.disable_logging()
    for name in logging_config.LOGGER_NAMES:
        logging.getLogger(name).setLevel(logging.NOTSET)


def stream_handlers(name):
    return [h for h in logging.getLogger(name).handlers if not isinstance(h, logging.NullHandler)]


def test_console_logging_attaches_one_handler_per_logger():
    logging_config.enable_console_logging(level="DEBUG")
    logging_config.enable_console_logging(level="INFO")
    for name in logging_config.LOGGER_NAMES:
        handlers = stream_handlers(name)
        assert len(handlers) == 1
        assert logging.getLogger(name).level == logging.INFO


def test_set_level_updates_loggers():
    logging_config.enable_console_logging(level="INFO")
    logging_config.set_level("WARNING")
    assert logging.getLogger("simulation").level == logging.WARNING
    assert stream_handlers("simulation")[0].level == logging.WARNING


def test_configure_from_env(monkeypatch):
    monkeypatch.setenv(logging_config.ENV_LEVEL, "debug")
    handler = logging_config.configure_from_env()
    assert handler is not None
    assert logging.getLogger("simulation").level == logging.DEBUG


def test_configure_from_env_without_variable(monkeypatch):
    monkeypatch.delenv(logging_config.ENV_LEVEL, raising=False)
    assert logging_config.configure_from_env() is None
    assert stream_handlers("simulation") == []


def test_controller_logs_deliveries(make_controller, caplog):
    controller = make_controller(start_floor=0, passengers=[(0, 2)])
    with caplog.at_level(logging.INFO, logger="simulation"):
        controller.run()
    messages = [record.getMessage() for record in caplog.records]
    assert "Passenger 1 boarding at floor 0 going to floor 2" in messages
    assert "Passenger 1 getting off at floor 2" in messages
    assert any("All passengers delivered" in message for message in messages)
