import json
import logging
import logging.handlers
from pathlib import Path

import pytest

from inireader.config import LoggingConfig
from inireader.logging_utils import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.makeLogRecord(
        {"name": "inireader.parser", "levelno": logging.WARNING, "levelname": "WARNING", "msg": "malformed_line"}
    )
    record.line_number = 3
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {
        "level": "WARNING",
        "name": "inireader.parser",
        "message": "malformed_line",
        "line_number": 3,
    }


def test_configure_logging_file_handler(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(LoggingConfig(level="debug", json_logs=True, log_file=str(tmp_path / "reader.log")))

    kwargs = calls[0]
    assert kwargs["level"] == logging.DEBUG
    (handler,) = kwargs["handlers"]
    assert isinstance(handler, logging.handlers.RotatingFileHandler)
    assert isinstance(handler.formatter, JsonFormatter)
    handler.close()
