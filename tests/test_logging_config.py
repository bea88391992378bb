"""Tests for ``setup_logging``."""
import logging

import pytest

from myapp_api.app.core.logging_config import resolve_log_level, setup_logging


@pytest.fixture
def bare_root_logger():
    """Detach root handlers for the duration of a test, then restore them."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_configures_console_and_file_handlers(bare_root_logger, tmp_path):
    logfile = tmp_path / "app.log"
    setup_logging("debug", logfile=str(logfile))

    assert bare_root_logger.level == logging.DEBUG
    kinds = [type(h) for h in bare_root_logger.handlers]
    assert kinds == [logging.StreamHandler, logging.FileHandler]

    logging.getLogger("myapp_api.test").warning("hello %s", "file")
    for handler in bare_root_logger.handlers:
        handler.flush()
    assert "[WARNING] myapp_api.test: hello file" in logfile.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(bare_root_logger):
    setup_logging("chatty")
    assert bare_root_logger.level == logging.INFO


def test_second_call_is_a_no_op(bare_root_logger):
    setup_logging("INFO")
    handlers = bare_root_logger.handlers[:]
    setup_logging("DEBUG")
    assert bare_root_logger.handlers == handlers
    assert bare_root_logger.level == logging.INFO


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        ("WARN", logging.WARNING),
        (" error ", logging.ERROR),
        ("fatal", logging.CRITICAL),
        ("chatty", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


def test_create_app_writes_to_configured_log_file(bare_root_logger, monkeypatch, tmp_path):
    from myapp_api.app import main

    logfile = tmp_path / "service.log"
    monkeypatch.setattr(main.settings, "log_file", str(logfile))
    main.create_app()

    assert any(isinstance(h, logging.FileHandler) for h in bare_root_logger.handlers)
    logging.getLogger("myapp_api.test").info("started")
    for handler in bare_root_logger.handlers:
        handler.flush()
    assert "[INFO] myapp_api.test: started" in logfile.read_text(encoding="utf-8")
