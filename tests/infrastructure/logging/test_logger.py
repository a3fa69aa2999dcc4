"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_creates_configured_logger(tmp_path, monkeypatch):
    """LoggerBuilder should build loggers in the project logs directory."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )

    builder = logger_module.LoggerBuilder()
    custom_logger = (
        builder.name("portfolio_test")
        .subdir("metrics")
        .prefix("metrics_logs")
        .console(False)
        .level(logging.WARNING)
        .formatter(logger_module.LoggerBuilder._default_formatter)
        .file_handler(logger_module.LoggerBuilder._default_file_handler)
        .console_handler(logger_module.LoggerBuilder._default_console_handler)
        .build()
    )

    assert custom_logger.name == "portfolio_test"
    assert custom_logger.level == logging.WARNING
    assert custom_logger.propagate is False
    file_handlers = [
        h
        for h in custom_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    assert len(custom_logger.handlers) == 1
    expected_path = tmp_path / "logs" / "metrics" / "20240101_metrics_logs.log"
    assert file_handlers[0].baseFilename == str(expected_path)
    # Building again should reuse the same logger instance.
    assert builder.build() is custom_logger

    for handler in list(custom_logger.handlers):
        handler.close()
        custom_logger.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger info/warning/error/etc. should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("app")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    # Singleton check.
    assert logger_module.Logger("app") is logger


def test_get_app_logger_returns_singleton(monkeypatch):
    """get_app_logger should build the portfolio logger only once."""
    fake_logger = MagicMock()
    built_names = []

    def _fake_build(self):
        built_names.append(self._name)
        return fake_logger

    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        _fake_build,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()

    assert app_logger_1 is app_logger_2
    assert isinstance(app_logger_1, logger_module.AppLogger)
    assert app_logger_1.logger is fake_logger
    assert built_names == ["portfolio_metrics"]
