"""Shared fixtures: a recording fake for osascript and a fixed clock."""

from __future__ import annotations

from datetime import datetime
from typing import List, Union

import pytest

from macos_calendar_mcp.api import api_state
from macos_calendar_mcp.config import get_settings
from macos_calendar_mcp.domain import ExecutionResult
from macos_calendar_mcp.services import CalendarService, ServiceContext

FIXED_NOW = datetime(2025, 3, 10, 14, 30)

Reply = Union[str, Exception]


class FakeExecutor:
    """Returns queued replies in order and records every script it was given."""

    def __init__(self, *replies: Reply) -> None:
        self.replies: List[Reply] = list(replies)
        self.scripts: List[str] = []

    def queue(self, *replies: Reply) -> None:
        self.replies.extend(replies)

    def execute(self, script: str) -> ExecutionResult:
        self.scripts.append(script)
        if not self.replies:
            return ExecutionResult(raw_output="")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return ExecutionResult(raw_output=reply)


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def service(executor: FakeExecutor) -> CalendarService:
    context = ServiceContext(settings=get_settings(), executor=executor, clock=lambda: FIXED_NOW)
    return CalendarService(context)


@pytest.fixture
def installed_service(monkeypatch: pytest.MonkeyPatch, service: CalendarService) -> CalendarService:
    """Route the global tool state (used by MCP, REST and CLI) to the fake."""

    monkeypatch.setattr(api_state, "calendar", service)
    return service
