"""Tool catalog shared by the MCP server, the REST API and the CLI."""

from __future__ import annotations

from .dispatcher import call_tool
from .registry import CATALOG_VERSION, ApiFunction, catalog, get_api_function, get_api_functions, register_api
from .state import api_state

# Import tools so decorators run at module import time.
from . import tools  # noqa: F401

__all__ = [
    "CATALOG_VERSION",
    "ApiFunction",
    "api_state",
    "call_tool",
    "catalog",
    "get_api_function",
    "get_api_functions",
    "register_api",
]
