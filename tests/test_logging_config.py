"""Tests for logging setup and the server launcher."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from canvas2kanban.utils.logging_config import configure_logging


@pytest.fixture
def clean_package_loggers() -> Iterator[None]:
    """Restore the package loggers' handlers and levels after each test."""
    saved = {
        name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level)
        for name in ("canvas2kanban", "server")
    }
    for name in saved:
        logging.getLogger(name).handlers.clear()
    yield
    for name, (handlers, level) in saved.items():
        package_logger = logging.getLogger(name)
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)


@pytest.mark.usefixtures("clean_package_loggers")
class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_one_named_handler_per_package_logger(self) -> None:
        configure_logging("debug")

        for name in ("canvas2kanban", "server"):
            package_logger = logging.getLogger(name)
            assert package_logger.level == logging.DEBUG
            assert [handler.get_name() for handler in package_logger.handlers] == ["canvas2kanban"]

    def test_repeated_calls_only_update_level(self) -> None:
        configure_logging("INFO")
        configure_logging(logging.WARNING)

        package_logger = logging.getLogger("canvas2kanban")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_foreign_handlers_are_left_alone(self) -> None:
        foreign = logging.NullHandler()
        logging.getLogger("server").addHandler(foreign)

        configure_logging("INFO")

        handlers = logging.getLogger("server").handlers
        assert handlers[0] is foreign
        assert len(handlers) == 2


@pytest.mark.usefixtures("clean_package_loggers")
def test_server_launcher_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    from server.__main__ import main

    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("RELOAD", "true")

    with patch("server.__main__.uvicorn.run") as run:
        main()

    run.assert_called_once_with("server.main:app", host="0.0.0.0", port=9001, reload=True, log_config=None)
    assert logging.getLogger("server").handlers
