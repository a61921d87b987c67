# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_quiets_libraries() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("controller.task_controller", logging.DEBUG))
    assert f.filter(_record("storage.pocketbase", logging.INFO))
    assert not f.filter(_record("urllib3.connectionpool", logging.WARNING))
    assert f.filter(_record("urllib3.connectionpool", logging.ERROR))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("controller.task_controller").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert log_file == tmp_path / "logs" / "panels.log"
    assert "hello file" in log_file.read_text(encoding="utf-8")
    assert len(logging.getLogger().handlers) == 2
