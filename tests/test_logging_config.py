from __future__ import annotations

import logging
from io import StringIO

import pytest

from box_connect.logging_config import LOG_LEVEL_ENV, configure_logging, resolve_log_level


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_replaces_handlers_and_formats(restore_root_logger: None) -> None:
    stream = StringIO()
    configure_logging(log_level=logging.INFO, stream=stream)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.INFO

    logging.getLogger("box_connect.engine").info("committed A path")
    logging.getLogger("box_connect.engine").debug("hidden")

    out = stream.getvalue()
    assert " INFO [box_connect.engine] committed A path" in out
    assert "hidden" not in out


def test_resolve_log_level_from_name_and_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("nonsense") == logging.WARNING

    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert resolve_log_level() == logging.ERROR

    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert resolve_log_level() == logging.WARNING
