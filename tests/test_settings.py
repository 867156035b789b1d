from __future__ import annotations

from pathlib import Path

import pytest

from macos_calendar_mcp.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CALENDAR_OSASCRIPT_PATH", "/usr/local/bin/osascript")
    monkeypatch.setenv("CALENDAR_SCRIPT_TIMEOUT", "12.5")
    monkeypatch.setenv("CALENDAR_APP_NAME", "iCal")
    monkeypatch.setenv("CALENDAR_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("CALENDAR_MCP_PORT", "9999")

    settings = get_settings()

    assert settings.executor.osascript_path == "/usr/local/bin/osascript"
    assert settings.executor.timeout_seconds == 12.5
    assert settings.executor.application == "iCal"
    assert settings.logging.log_file == Path(tmp_path) / "macos_calendar_mcp.log"
    assert settings.server.mcp_port == 9999


def test_malformed_numbers_fall_back_and_zero_disables_timeout(monkeypatch):
    monkeypatch.setenv("CALENDAR_MCP_PORT", "not-a-port")
    monkeypatch.setenv("CALENDAR_SCRIPT_TIMEOUT", "0")

    settings = get_settings()

    assert settings.server.mcp_port == 8765
    assert settings.executor.timeout_seconds is None


def test_per_logger_levels_and_rotation(monkeypatch):
    monkeypatch.setenv("CALENDAR_LOG_LEVELS", "macos_calendar_mcp.data=debug, fastmcp=WARNING,,broken")
    monkeypatch.setenv("CALENDAR_LOG_MAX_BYTES", "4096")

    settings = get_settings()

    assert settings.logging.logger_levels == {
        "macos_calendar_mcp.data": "DEBUG",
        "fastmcp": "WARNING",
    }
    assert settings.logging.max_bytes == 4096
    assert settings.logging.backup_count == 5
