import json
import logging

import pytest
from rich.logging import RichHandler

from loganizer.utils.logging_utils import JsonFormatter, log_duration, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_formatter():
    formatter = JsonFormatter(app_name="loganizer")
    record = logging.LogRecord(
        "loganizer.core", logging.WARNING, __file__, 10, "web-1: %s", ("File access failed",), None
    )

    data = json.loads(formatter.format(record))

    assert data["level"] == "WARNING"
    assert data["logger"] == "loganizer.core"
    assert data["message"] == "web-1: File access failed"
    assert data["app_name"] == "loganizer"
    assert "timestamp" in data


def test_setup_logging_with_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "loganizer.log"

    setup_logging(logging.DEBUG, log_file=log_file)
    logging.getLogger("loganizer.test").info("analysis started")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)
    line = log_file.read_text().strip().splitlines()[-1]
    assert json.loads(line)["message"] == "analysis started"


def test_log_duration(caplog):
    with caplog.at_level(logging.INFO, logger="loganizer.test"):
        with log_duration("loganizer.test", "Batch took {duration}"):
            pass

    assert "Batch took" in caplog.text
    assert caplog.text.strip().endswith("s")
