import logging

import pytest
import pythonjsonlogger.json
from rich.logging import RichHandler

from argkit.utils import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = [
        handler
        for handler in root.handlers
        if not type(handler).__module__.startswith("_pytest")
    ]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers and not type(handler).__module__.startswith("_pytest"):
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_mode(root_logger):
    setup_logging(mode="cli")
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)
    assert root_logger.handlers[0].level == logging.WARNING


def test_json_mode_from_environment(root_logger, monkeypatch):
    monkeypatch.setenv("ARGKIT_LOG_MODE", "json")
    setup_logging()
    (handler,) = root_logger.handlers
    assert isinstance(handler.formatter, pythonjsonlogger.json.JsonFormatter)


def test_file_handler(root_logger, tmp_path):
    log_file = tmp_path / "argkit.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    assert len(root_logger.handlers) == 2
    logging.getLogger("argkit").debug("declared option")
    for handler in root_logger.handlers:
        handler.flush()
    content = log_file.read_text(encoding="UTF-8")
    assert '"name": "argkit"' in content
    assert "declared option" in content


def test_invalid_mode(root_logger):
    with pytest.raises(ValueError) as excinfo:
        setup_logging(mode="xml")
    assert "Invalid log mode" in str(excinfo.value)
