from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .config import get_settings
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    server = get_settings().server
    parser = argparse.ArgumentParser(description="macOS Calendar MCP command line interface.")
    parser.add_argument("--log-level", default=None, help="Override CALENDAR_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    mcp_parser = subparsers.add_parser("mcp", help="Start the MCP server.")
    mcp_parser.add_argument("--transport", choices=("stdio", "http"), default=server.transport)
    mcp_parser.add_argument("--host", default=server.mcp_host)
    mcp_parser.add_argument("--port", type=int, default=server.mcp_port)

    api_parser = subparsers.add_parser("api", help="Start the local REST API exposing the same tools.")
    api_parser.add_argument("--host", default=server.api_host)
    api_parser.add_argument("--port", type=int, default=server.api_port)

    subparsers.add_parser("tools", help="Print the tool catalog as JSON.")

    call_parser = subparsers.add_parser("call", help="Run one tool and print its reply.")
    call_parser.add_argument("name", help="Tool name, e.g. list-calendars.")
    call_parser.add_argument("--arguments", default="{}", help="Tool arguments as a JSON object.")

    return parser


def _call(name: str, raw_arguments: str) -> int:
    from .api import call_tool

    try:
        arguments = json.loads(raw_arguments)
    except json.JSONDecodeError as exc:
        print(f"Error: --arguments is not valid JSON: {exc}", file=sys.stderr)
        return 2
    response = call_tool(name, arguments)
    stream = sys.stderr if response.is_error else sys.stdout
    print(response.text, file=stream)
    return 1 if response.is_error else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logging.getLogger(__name__).info("macOS Calendar CLI starting (%s)", args.command)

    if args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(transport=args.transport, host=args.host, port=args.port)
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "tools":
        from .api import catalog

        print(json.dumps(catalog(), indent=2, ensure_ascii=False))
    elif args.command == "call":
        return _call(args.name, args.arguments)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
