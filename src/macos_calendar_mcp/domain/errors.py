from __future__ import annotations


class CalendarError(RuntimeError):
    """Base class for failures reported back to the tool caller."""


class InvalidDateFormat(CalendarError, ValueError):
    """Raised when a date/time string cannot be parsed."""

    def __init__(self, value: str, expected: str = "YYYY-MM-DD HH:MM") -> None:
        super().__init__(f"Invalid date format: {value!r} (expected {expected})")
        self.value = value


class InvalidDateRange(CalendarError, ValueError):
    """Raised when an event would not end strictly after it starts."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(f"Start {start!r} must be earlier than end {end!r}")
        self.start = start
        self.end = end


class ExecutionError(CalendarError):
    """Raised when osascript fails, is missing, or times out."""


class MalformedResult(CalendarError):
    """Raised when script output does not have the expected shape."""


class UnknownTool(CalendarError, KeyError):
    """Raised when a tool name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name

    def __str__(self) -> str:
        return f"Unknown tool: {self.name}"
