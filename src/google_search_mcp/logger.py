import datetime
import logging
import os
from logging.config import dictConfig
from typing import Any, Dict

LOGGER_NAME = "google_search_mcp"

# Attributes every LogRecord carries; anything else arrived through `extra=`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "color_message", "taskName"}


def logfmt_value(value: Any) -> str:
    text = str(value)
    if text == "" or any(ch in text for ch in ' "=\n'):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return text


class LogfmtFormatter(logging.Formatter):
    """One `key=value` line per record: ts, level, logger, msg, then extras."""

    def formatTime(self, record: logging.LogRecord, datefmt=None) -> str:
        created = datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc)
        return created.strftime("%Y-%m-%dT%H:%M:%S") + f".{int(record.msecs):03d}Z"

    def format(self, record: logging.LogRecord) -> str:
        fields: Dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            fields["exc"] = self.formatException(record.exc_info)
        return " ".join(f"{key}={logfmt_value(value)}" for key, value in fields.items())


def build_logging_config(level: str) -> dict:
    """dictConfig schema shared by the app and uvicorn (passed as `log_config`)."""
    levels = {
        "uvicorn.access": "INFO",
        "uvicorn.error": "INFO",
        LOGGER_NAME: level,
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"logfmt": {"()": LogfmtFormatter}},
        "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "logfmt"}},
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            name: {"level": logger_level, "handlers": ["console"], "propagate": False}
            for name, logger_level in levels.items()
        },
    }


LOGGING_CONFIG = build_logging_config(os.getenv("LOG_LEVEL", "INFO").upper())

dictConfig(LOGGING_CONFIG)

log = logging.getLogger(LOGGER_NAME)
