"""macOS Calendar tools served over MCP."""

from __future__ import annotations

__version__ = "2.0.0"


def main() -> int:
    from .cli import main as cli_main

    return cli_main()
