from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ..domain import CalendarError, ToolResponse
from ..services import CalendarService
from .registry import get_api_function
from .state import api_state

logger = logging.getLogger(__name__)


def _describe_validation(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(problems)


def call_tool(
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
    *,
    service: Optional[CalendarService] = None,
) -> ToolResponse:
    """Validate ``arguments`` and run the named tool.

    Never raises: every failure becomes an error ``ToolResponse``.
    """

    try:
        api_function = get_api_function(name)
        payload = api_function.arguments.model_validate(arguments if arguments is not None else {})
        return api_function.func(service or api_state.calendar, payload)
    except ValidationError as exc:
        logger.info("Rejected arguments for %s: %s", name, exc.error_count())
        return ToolResponse.error(f"Invalid arguments for {name}: {_describe_validation(exc)}")
    except CalendarError as exc:
        return ToolResponse.error(str(exc))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Tool %s failed unexpectedly", name)
        return ToolResponse.error(str(exc) or exc.__class__.__name__)
