from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "macOS Calendar MCP"
APP_AUTHOR = "macos-calendar-mcp"


@dataclass(frozen=True)
class ExecutorSettings:
    osascript_path: str
    timeout_seconds: Optional[float]
    application: str


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path
    logger_levels: Dict[str, str] = field(default_factory=dict)
    max_bytes: int = 1_000_000
    backup_count: int = 5

    @property
    def log_file(self) -> Path:
        return self.directory / "macos_calendar_mcp.log"


@dataclass(frozen=True)
class ServerSettings:
    transport: str
    mcp_host: str
    mcp_port: int
    api_host: str
    api_port: int


@dataclass(frozen=True)
class AppSettings:
    executor: ExecutorSettings
    logging: LoggingSettings
    server: ServerSettings


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _levels_from_env(name: str) -> Dict[str, str]:
    """Parse ``"logger=LEVEL,other.logger=LEVEL"``; entries without a name or level are skipped."""

    levels: Dict[str, str] = {}
    for entry in (os.getenv(name) or "").split(","):
        logger_name, _, level = entry.partition("=")
        if logger_name.strip() and level.strip():
            levels[logger_name.strip()] = level.strip().upper()
    return levels


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    timeout = _float_from_env("CALENDAR_SCRIPT_TIMEOUT", 60.0)
    executor = ExecutorSettings(
        osascript_path=os.getenv("CALENDAR_OSASCRIPT_PATH", "osascript"),
        timeout_seconds=timeout if timeout > 0 else None,
        application=os.getenv("CALENDAR_APP_NAME", "Calendar"),
    )

    logging = LoggingSettings(
        level=os.getenv("CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("CALENDAR_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
        logger_levels=_levels_from_env("CALENDAR_LOG_LEVELS"),
        max_bytes=_int_from_env("CALENDAR_LOG_MAX_BYTES", 1_000_000),
        backup_count=_int_from_env("CALENDAR_LOG_BACKUPS", 5),
    )

    server = ServerSettings(
        transport=os.getenv("CALENDAR_MCP_TRANSPORT", "stdio"),
        mcp_host=os.getenv("CALENDAR_MCP_HOST", "127.0.0.1"),
        mcp_port=_int_from_env("CALENDAR_MCP_PORT", 8765),
        api_host=os.getenv("CALENDAR_API_HOST", "127.0.0.1"),
        api_port=_int_from_env("CALENDAR_API_PORT", 8000),
    )

    return AppSettings(executor=executor, logging=logging, server=server)
