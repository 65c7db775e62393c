"""Tests for JSON logging setup."""

import json
import logging
import sys

from draftkit.logging_utils import PACKAGE_LOGGER, JSONFormatter, setup_logging


def _record(msg: str, exc_info: object = None) -> logging.LogRecord:
    return logging.LogRecord(
        name="draftkit.drafts",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=("README.md",),
        exc_info=exc_info,
    )


def test_json_formatter_fields() -> None:
    payload = json.loads(JSONFormatter().format(_record("Wrote %s")))

    assert payload["message"] == "Wrote README.md"
    assert payload["level"] == "INFO"
    assert payload["lineno"] == 10
    assert payload["logger"] == "draftkit.drafts"
    assert {"timestamp", "funcName"} <= payload.keys()
    assert "draft" not in payload
    assert "exception" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        msg = "disk full"
        raise OSError(msg)
    except OSError:
        record = _record("Failed %s", exc_info=sys.exc_info())

    payload = json.loads(JSONFormatter().format(record))
    assert "OSError: disk full" in payload["exception"]


def test_setup_logging_replaces_handler() -> None:
    logger = setup_logging()
    setup_logging(logging.DEBUG)

    json_handlers = [
        h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)
    ]
    assert logger.name == PACKAGE_LOGGER
    assert len(json_handlers) == 1
    assert json_handlers[0].stream is sys.stderr
    assert logger.level == logging.DEBUG


def test_json_formatter_draft_field_keeps_unicode() -> None:
    record = _record("Scaffolding %s")
    record.draft = "drafts/20240315_café"

    line = JSONFormatter().format(record)

    assert "café" in line
    assert json.loads(line)["draft"] == "drafts/20240315_café"
