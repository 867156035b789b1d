from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Mapping, Optional

from .config import LoggingSettings, get_settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_INITIALIZED = False


def _resolve_level(name: str, default: int = logging.INFO) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def _build_handlers(settings: LoggingSettings, log_file: Path) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = RotatingFileHandler(
        str(log_file),
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )
    # stdout carries the MCP stdio transport, so the console handler writes to stderr.
    console_handler = logging.StreamHandler()

    handlers: List[logging.Handler] = [file_handler, console_handler]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _apply_logger_levels(levels: Mapping[str, str]) -> None:
    for name, level in levels.items():
        logging.getLogger(name).setLevel(_resolve_level(level, logging.NOTSET))


def configure_logging(
    level: Optional[str] = None,
    *,
    log_path: Optional[Path] = None,
    settings: Optional[LoggingSettings] = None,
) -> None:
    """Install the rotating file and stderr handlers on the root logger once.

    ``level`` overrides ``CALENDAR_LOG_LEVEL`` for the root logger. Levels named in
    ``CALENDAR_LOG_LEVELS`` (for example ``macos_calendar_mcp.data=DEBUG``) are set
    on their own loggers afterwards.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = settings or get_settings().logging
    log_file = log_path or settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(_resolve_level(level or settings.level))
    for handler in _build_handlers(settings, log_file):
        root.addHandler(handler)
    _apply_logger_levels(settings.logger_levels)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)


__all__ = ["DATE_FORMAT", "LOG_FORMAT", "configure_logging"]
