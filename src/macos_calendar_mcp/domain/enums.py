from __future__ import annotations

from enum import Enum


class EventField(str, Enum):
    TITLE = "title"
    START = "start"
    END = "end"
    DESCRIPTION = "description"
    LOCATION = "location"


class OutcomeStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    NO_MATCH = "no match"
