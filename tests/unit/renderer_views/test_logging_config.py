"""Unit tests for logging setup."""

import json
import logging

import pytest

from renderer_views.logging_config import LOG_FILE_NAME, get_logger, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_installs_two_handlers(tmp_path, restore_root_logger):
    root = setup_logging("debug", log_dir=tmp_path)
    setup_logging("debug", log_dir=tmp_path)

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert (tmp_path / LOG_FILE_NAME).exists()
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_context_fields_reach_json_file(tmp_path, restore_root_logger):
    root = setup_logging("INFO", log_dir=tmp_path)

    log_with_context(get_logger("renderer_views.tests"), "info", "View resolved", view_name="home", event_type="test")
    for handler in root.handlers:
        handler.flush()

    record = json.loads((tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "View resolved"
    assert record["view_name"] == "home"
    assert record["event_type"] == "test"
    assert record["levelname"] == "INFO"
