"""
Build logging.

Console output goes through rich; the optional build log file is either
JSONL (one object per event) or plain text. Build events carry a small set
of well-known fields (event, route, slug, path, error_type) that are
promoted to the top level of each JSONL line; any other extra fields are
grouped under "data". Every record also carries the build mode.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from .config import LoggingConfig
from .core.errors import ContentStoreError, ConversionError, InkwellError, NotFoundError

LOGGER_NAME = "inkwell"
BUILD_FIELDS = ("mode", "event", "route", "slug", "path", "error_type")

# Attributes every LogRecord has; anything else on a record came from `extra`.
_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class BuildModeFilter(logging.Filter):
    """Stamps every record with the build mode."""

    def __init__(self, mode: str):
        super().__init__()
        self.mode = mode

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "mode"):
            record.mode = self.mode
        return True


def setup_logging(cfg: LoggingConfig, output_dir: Path | None, mode: str = "production") -> logging.Logger:
    """Configure the `inkwell` logger for one build.

    Args:
        cfg: Logging section of the app config
        output_dir: Build output directory; the log file is written there
        mode: Build mode stamped on every record

    Returns:
        The configured logger
    """
    level = _level_from_string(cfg.level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for existing in list(logger.filters):
        logger.removeFilter(existing)
    logger.propagate = False

    mode_filter = BuildModeFilter(mode)

    if cfg.console:
        console_handler = RichHandler(rich_tracebacks=True, show_time=False, show_path=False)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler.addFilter(mode_filter)
        logger.addHandler(console_handler)

    if cfg.file and output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(output_dir / cfg.filename, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JsonlFormatter() if cfg.format == "jsonl" else PlainFormatter())
        file_handler.addFilter(mode_filter)
        logger.addHandler(file_handler)

    return logger


def log_event(logger: logging.Logger | None, message: str, **fields: Any) -> None:
    if logger is None:
        return
    logger.info(message, extra=fields)


def log_failure(logger: logging.Logger | None, exc: BaseException, route: str | None = None) -> None:
    """Log a failed build with whatever the error knows about its cause."""
    if logger is None:
        return
    fields: dict[str, Any] = {"event": "build_failed", "error_type": type(exc).__name__}
    if route is not None:
        fields["route"] = route
    if isinstance(exc, ConversionError):
        fields["slug"] = exc.slug
    elif isinstance(exc, NotFoundError):
        fields["slug"] = exc.identifier
    elif isinstance(exc, ContentStoreError):
        fields["path"] = str(exc.path)
    level = logging.ERROR if isinstance(exc, InkwellError) else logging.CRITICAL
    logger.log(level, "Build failed: %s", exc, extra=fields)


def _split_fields(record: logging.LogRecord) -> tuple[dict[str, Any], dict[str, Any]]:
    build = {key: getattr(record, key) for key in BUILD_FIELDS if hasattr(record, key)}
    data = {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and key not in BUILD_FIELDS
    }
    return build, data


class JsonlFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        build, data = _split_fields(record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **build,
        }
        if data:
            payload["data"] = data
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


class PlainFormatter(logging.Formatter):
    """`<time> <LEVEL> <message> [event route slug]`."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        build, _ = _split_fields(record)
        tags = [str(build[key]) for key in ("event", "route", "slug") if key in build]
        return f"{line} [{' '.join(tags)}]" if tags else line


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
