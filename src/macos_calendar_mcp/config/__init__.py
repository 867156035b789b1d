"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, ExecutorSettings, LoggingSettings, ServerSettings, get_settings

__all__ = ["AppSettings", "ExecutorSettings", "LoggingSettings", "ServerSettings", "get_settings"]
