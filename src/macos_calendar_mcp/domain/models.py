from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .enums import EventField, OutcomeStatus


@dataclass(frozen=True, slots=True)
class EventRecord:
    """One event as reported by Calendar.app."""

    title: str
    start: str
    end: str
    description: str = ""
    location: str = ""

    @classmethod
    def from_fields(cls, values: Sequence[str], order: Sequence[EventField]) -> "EventRecord":
        mapped = {field.value: value.strip() for field, value in zip(order, values)}
        return cls(
            title=mapped.get(EventField.TITLE.value, ""),
            start=mapped.get(EventField.START.value, ""),
            end=mapped.get(EventField.END.value, ""),
            description=mapped.get(EventField.DESCRIPTION.value, ""),
            location=mapped.get(EventField.LOCATION.value, ""),
        )


@dataclass(frozen=True, slots=True)
class EventDraft:
    calendar: str
    title: str
    start_date: str
    end_date: str
    description: str = ""
    location: str = ""

    def __post_init__(self) -> None:
        for name in ("title", "start_date", "end_date"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")


@dataclass(frozen=True, slots=True)
class TimeCorrection:
    keyword: str
    new_start_time: str
    new_end_time: str


@dataclass(frozen=True, slots=True)
class OperationOutcome:
    """Result of one unit inside a batch or keyword operation."""

    label: str
    succeeded: bool
    detail: str
    count: Optional[int] = None

    @property
    def status(self) -> OutcomeStatus:
        if not self.succeeded:
            return OutcomeStatus.FAILED
        if self.count == 0:
            return OutcomeStatus.NO_MATCH
        return OutcomeStatus.OK

    def render(self) -> str:
        return f"[{self.status.value}] {self.label} - {self.detail}"


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    raw_output: str


@dataclass(frozen=True, slots=True)
class ToolResponse:
    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResponse":
        return cls(text=text, is_error=False)

    @classmethod
    def error(cls, message: str) -> "ToolResponse":
        return cls(text=f"Error: {message}", is_error=True)
