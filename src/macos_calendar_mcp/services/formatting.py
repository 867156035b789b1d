from __future__ import annotations

from typing import Iterable, Sequence

from ..domain import EventRecord, OperationOutcome


def format_event(event: EventRecord) -> str:
    lines = [event.title, f"{event.start} - {event.end}"]
    if event.location:
        lines.append(f"Location: {event.location}")
    if event.description:
        lines.append(f"Description: {event.description}")
    return "\n".join(lines)


def format_events(events: Iterable[EventRecord]) -> str:
    return "\n\n".join(format_event(event) for event in events)


def format_outcomes(header: str, counts: Sequence[tuple[str, int]], outcomes: Iterable[OperationOutcome]) -> str:
    lines = [header]
    lines.extend(f"{label}: {value}" for label, value in counts)
    lines.append("")
    lines.append("Details:")
    lines.extend(outcome.render() for outcome in outcomes)
    return "\n".join(lines)


__all__ = ["format_event", "format_events", "format_outcomes"]
