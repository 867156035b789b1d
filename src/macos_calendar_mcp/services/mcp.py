from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from ..api import ApiFunction, call_tool, get_api_functions

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "macOS Calendar MCP server drives Calendar.app through AppleScript. "
    "Dates are local time formatted YYYY-MM-DD HH:MM. "
    "delete-events-by-keyword only previews unless confirm is true."
)


class CalendarTool(Tool):
    """Catalog entry exposed as an MCP tool; validation happens in the dispatcher."""

    @classmethod
    def from_api_function(cls, api_function: ApiFunction) -> "CalendarTool":
        return cls(
            name=api_function.name,
            description=api_function.description,
            parameters=api_function.parameter_schema,
            tags=set(api_function.tags),
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        response = call_tool(self.name, arguments)
        if response.is_error:
            raise ToolError(response.text)
        return ToolResult(content=[TextContent(type="text", text=response.text)])


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="macos-calendar", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.add_tool(CalendarTool.from_api_function(api_function))
    return server


def run_mcp_server(transport: str = "stdio", host: Optional[str] = None, port: Optional[int] = None) -> None:
    server = build_mcp_server()
    if transport == "stdio":
        server.run(transport="stdio")
        return
    server.run(transport="http", host=host or "127.0.0.1", port=port or 8765)
