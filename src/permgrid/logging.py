"""Logging utilities for permgrid.

This module provides:
- Logging configuration from GridConfig
- Bounded previews of payloads (server error data, trees)
- Structured formatter carrying revision / group context
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from .config import GridConfig, LogLevel

# Attributes every LogRecord has; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "revision", "group_id",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """One-line, length-bounded rendering of a backend payload.

    Mappings (save error payloads) are rendered as JSON; anything else with
    ``str()``. Runs of whitespace collapse to one space.
    """
    if value is None:
        return ""
    text = json.dumps(value, default=str, ensure_ascii=False) if isinstance(value, Mapping) else str(value)
    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 1] + "…"


class PermGridFormatter(logging.Formatter):
    """Formatter emitting JSON or plain text with revision/group context."""

    def __init__(self, json_format: bool = True, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        revision = getattr(record, "revision", None)
        group_id = getattr(record, "group_id", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if revision is not None:
            log_data["revision"] = revision
        if group_id is not None:
            log_data["group_id"] = group_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            log_data["level"],
            log_data["logger"],
        ]
        if revision is not None:
            parts.append(f"revision={revision}")
        if group_id is not None:
            parts.append(f"group_id={group_id}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class PermGridLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds revision and group_id to log records.

    Usage:
        logger = get_logger(__name__, revision=7)
        logger.info("Permission updated", group_id=3)
    """

    def __init__(self, logger: logging.Logger, revision: Any = None, group_id: Any = None):
        super().__init__(logger, {})
        self.revision = revision
        self.group_id = group_id

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        revision = kwargs.pop("revision", self.revision)
        group_id = kwargs.pop("group_id", self.group_id)

        extra = kwargs.get("extra", {})
        if revision is not None:
            extra["revision"] = revision
        if group_id is not None:
            extra["group_id"] = group_id
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(config: Optional[GridConfig] = None, json_format: Optional[bool] = None) -> None:
    """Configure the root logger from GridConfig.

    Args:
        config: GridConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json``
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        PermGridFormatter(json_format=config.log_json if json_format is None else json_format)
    )
    root_logger.addHandler(console_handler)


def get_logger(name: str, revision: Any = None, group_id: Any = None) -> PermGridLoggerAdapter:
    """Get a logger adapter carrying revision/group context.

    Args:
        name: Logger name (typically __name__)
        revision: Optional revision to include in all logs
        group_id: Optional group id to include in all logs
    """
    return PermGridLoggerAdapter(logging.getLogger(name), revision=revision, group_id=group_id)


__all__ = [
    "PermGridFormatter",
    "PermGridLoggerAdapter",
    "get_logger",
    "safe_preview",
    "setup_logging",
]
