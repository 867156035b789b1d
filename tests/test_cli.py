from __future__ import annotations

import json

import pytest

from macos_calendar_mcp import cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_mcp_defaults_to_stdio():
    args = cli.build_parser().parse_args(["mcp"])
    assert args.transport == "stdio"


def test_tools_prints_catalog(capsys):
    assert cli.main(["tools"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["tools"]) == 8


def test_call_prints_reply(installed_service, executor, capsys):
    executor.queue("Home")
    exit_code = cli.main(["call", "list-calendars"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "Available calendars (1):\n- Home"


def test_call_error_exits_nonzero(installed_service, capsys):
    exit_code = cli.main(["call", "search-events", "--arguments", "{}"])

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("Error: Invalid arguments for search-events")


def test_call_rejects_invalid_json(capsys):
    assert cli.main(["call", "list-calendars", "--arguments", "{oops"]) == 2
