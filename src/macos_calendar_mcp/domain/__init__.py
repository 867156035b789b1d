"""Domain models for Calendar.app automation."""

from __future__ import annotations

from .enums import EventField, OutcomeStatus
from .errors import (
    CalendarError,
    ExecutionError,
    InvalidDateFormat,
    InvalidDateRange,
    MalformedResult,
    UnknownTool,
)
from .models import EventDraft, EventRecord, ExecutionResult, OperationOutcome, TimeCorrection, ToolResponse

__all__ = [
    "CalendarError",
    "EventDraft",
    "EventField",
    "EventRecord",
    "ExecutionError",
    "ExecutionResult",
    "InvalidDateFormat",
    "InvalidDateRange",
    "MalformedResult",
    "OperationOutcome",
    "OutcomeStatus",
    "TimeCorrection",
    "ToolResponse",
    "UnknownTool",
]
