from __future__ import annotations

from typing import List, Sequence

from ..domain import EventField, EventRecord, InvalidDateFormat, MalformedResult
from . import dates
from .scripts import FIELD_SEPARATOR, ITEM_SEPARATOR

_EMPTY_SENTINELS = {"", '""'}


def _is_empty(raw_output: str) -> bool:
    return (raw_output or "").strip() in _EMPTY_SENTINELS


def _split_items(raw_output: str) -> List[str]:
    if _is_empty(raw_output):
        return []
    return raw_output.strip().split(ITEM_SEPARATOR)


_DATE_FIELDS = (EventField.START, EventField.END)


def _check_dates(record: EventRecord, field_order: Sequence[EventField], position: int, item: str) -> None:
    for field in _DATE_FIELDS:
        if field not in field_order:
            continue
        value = getattr(record, field.value)
        try:
            dates.parse_host_date(value)
        except InvalidDateFormat as exc:
            raise MalformedResult(f"Event #{position} has an unreadable {field.value} date {value!r}: {item!r}") from exc


def parse(raw_output: str, field_order: Sequence[EventField]) -> List[EventRecord]:
    """Decode a list-style reply into event records, in reply order.

    Each item must carry exactly one value per field, and any start or end
    field must be a host date literal. Anything else raises
    :class:`MalformedResult`.
    """

    if not field_order:
        raise ValueError("field_order must name at least one field")
    records: List[EventRecord] = []
    for position, item in enumerate(_split_items(raw_output), start=1):
        values = item.split(FIELD_SEPARATOR)
        if len(values) != len(field_order):
            raise MalformedResult(
                f"Event #{position} has {len(values)} field(s), expected {len(field_order)}: {item!r}"
            )
        record = EventRecord.from_fields(values, field_order)
        _check_dates(record, field_order, position, item)
        records.append(record)
    return records


def parse_names(raw_output: str) -> List[str]:
    return [name.strip() for name in _split_items(raw_output) if name.strip()]


def parse_count(raw_output: str) -> int:
    text = (raw_output or "").strip()
    try:
        return int(text)
    except ValueError as exc:
        raise MalformedResult(f"Expected an event count, got {text!r}") from exc


__all__ = ["parse", "parse_count", "parse_names"]
