from __future__ import annotations

import asyncio

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from macos_calendar_mcp.services.mcp import build_mcp_server


def _run(coro):
    return asyncio.run(coro)


def test_server_lists_catalog_tools(installed_service):
    async def scenario():
        async with Client(build_mcp_server()) as client:
            return await client.list_tools()

    tools = {tool.name: tool for tool in _run(scenario())}

    assert len(tools) == 8
    assert "startDate" in tools["create-event"].inputSchema["properties"]


def test_call_tool_returns_text(installed_service, executor):
    executor.queue("Home, Work")

    async def scenario():
        async with Client(build_mcp_server()) as client:
            return await client.call_tool("list-calendars", {})

    result = _run(scenario())
    assert result.content[0].text == "Available calendars (2):\n- Home\n- Work"


def test_call_tool_error_sets_error_flag(installed_service, executor):
    async def scenario():
        async with Client(build_mcp_server()) as client:
            return await client.call_tool("delete-events-by-keyword", {"confirm": True})

    with pytest.raises(ToolError):
        _run(scenario())
    assert executor.scripts == []
