import json
import logging
import sys
from typing import Any

PACKAGE_LOGGER = "draftkit"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for draftkit records on stderr.

    Records logged with ``extra={"draft": path}`` carry the draft directory
    in a ``draft`` field so failures can be matched to the path on stdout.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Formats a log record as a JSON string.

        Note names are kept readable, so non-ASCII text is not escaped.
        """
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "funcName": record.funcName,
            "lineno": record.lineno,
        }
        draft = getattr(record, "draft", None)
        if draft is not None:
            log_record["draft"] = draft
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configures the package logger with a JSON formatter on stderr.

    Stdout carries the draft path only, so log records never go there.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    # Replace a handler left by an earlier call; its stream may be closed.
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JSONFormatter):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
