"""Access to the Calendar.app automation boundary."""

from __future__ import annotations

from .osascript import OsascriptExecutor, ScriptExecutor

__all__ = ["OsascriptExecutor", "ScriptExecutor"]
