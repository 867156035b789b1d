from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..core import DETAILED_FIELDS, WEEK_FIELDS, ScriptBuilder, dates, parser
from ..data import ScriptExecutor
from ..domain import (
    CalendarError,
    EventDraft,
    EventRecord,
    OperationOutcome,
    TimeCorrection,
    ToolResponse,
)
from .context import ServiceContext
from .formatting import format_events, format_outcomes

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    """Runs each calendar tool against Calendar.app and formats the reply."""

    context: ServiceContext

    @property
    def executor(self) -> ScriptExecutor:
        return self.context.executor

    @property
    def scripts(self) -> ScriptBuilder:
        return self.context.scripts

    def _run(self, script: str) -> str:
        return self.executor.execute(script).raw_output

    # Calendars -----------------------------------------------------------
    def list_calendars(self) -> ToolResponse:
        names = parser.parse_names(self._run(self.scripts.list_calendars()))
        lines = [f"Available calendars ({len(names)}):"]
        lines.extend(f"- {name}" for name in names)
        return ToolResponse.ok("\n".join(lines))

    # Creation ------------------------------------------------------------
    def _create(self, draft: EventDraft) -> str:
        dates.ensure_ordered(draft.start_date, draft.end_date)
        return self._run(self.scripts.create_event(draft))

    def create_event(self, draft: EventDraft) -> ToolResponse:
        uid = self._create(draft)
        logger.info("Created event %r in calendar %r", draft.title, draft.calendar)
        lines = [
            "Event created.",
            f"Calendar: {draft.calendar}",
            f"Title: {draft.title}",
            f"Time: {draft.start_date} - {draft.end_date}",
            f"Location: {draft.location or '(none)'}",
            f"Description: {draft.description or '(none)'}",
        ]
        if uid:
            lines.append(f"ID: {uid}")
        return ToolResponse.ok("\n".join(lines))

    def create_batch_events(self, drafts: Sequence[EventDraft]) -> ToolResponse:
        outcomes: List[OperationOutcome] = []
        for draft in drafts:
            try:
                self._create(draft)
            except CalendarError as exc:
                logger.warning("Batch item %r failed: %s", draft.title, exc)
                outcomes.append(OperationOutcome(label=draft.title, succeeded=False, detail=str(exc)))
            else:
                outcomes.append(OperationOutcome(label=draft.title, succeeded=True, detail=draft.start_date))

        succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
        text = format_outcomes(
            "Batch create results:",
            (("Succeeded", succeeded), ("Failed", len(outcomes) - succeeded)),
            outcomes,
        )
        return ToolResponse.ok(text)

    # Deletion ------------------------------------------------------------
    def delete_events_by_keyword(self, keyword: str, calendar: str, confirm: bool = False) -> ToolResponse:
        if confirm is not True:
            return ToolResponse.ok(
                "Confirmation required.\n"
                f'This will delete every event in calendar "{calendar}" whose title contains "{keyword}".\n'
                "Call again with confirm: true to proceed."
            )

        deleted = parser.parse_count(self._run(self.scripts.delete_by_keyword(calendar, keyword)))
        logger.info("Deleted %d event(s) matching %r from %r", deleted, keyword, calendar)
        return ToolResponse.ok(
            f'Deleted {deleted} event(s) whose title contains "{keyword}" from calendar "{calendar}".'
        )

    # Listing -------------------------------------------------------------
    def _list(self, script: str, fields) -> List[EventRecord]:
        return parser.parse(self._run(script), fields)

    def list_today_events(self, calendar: str) -> ToolResponse:
        day_start, day_end = dates.day_window(self.context.clock)
        events = self._list(self.scripts.list_day(calendar, day_start, day_end), DETAILED_FIELDS)
        if not events:
            return ToolResponse.ok(f"No events today in {calendar}.")
        return ToolResponse.ok(f"Today's events in {calendar} ({len(events)}):\n\n{format_events(events)}")

    def list_week_events(self, week_start: str, calendar: str) -> ToolResponse:
        events = self._list(self.scripts.list_week(calendar, week_start), WEEK_FIELDS)
        if not events:
            return ToolResponse.ok(f"No events in {calendar} for the week starting {week_start}.")
        return ToolResponse.ok(
            f"Events in {calendar} for the week starting {week_start} ({len(events)}):\n\n{format_events(events)}"
        )

    def search_events(self, query: str, calendar: str) -> ToolResponse:
        events = self._list(self.scripts.search(calendar, query), DETAILED_FIELDS)
        if not events:
            return ToolResponse.ok(f'No events in {calendar} match "{query}".')
        return ToolResponse.ok(
            f'Found {len(events)} event(s) in {calendar} matching "{query}":\n\n{format_events(events)}'
        )

    # Corrections ---------------------------------------------------------
    def _fix(self, calendar: str, date_pattern: str, correction: TimeCorrection) -> int:
        dates.ensure_ordered(
            dates.combine(date_pattern, correction.new_start_time),
            dates.combine(date_pattern, correction.new_end_time),
        )
        return parser.parse_count(self._run(self.scripts.fix_times(calendar, date_pattern, correction)))

    def fix_event_times(
        self,
        calendar: str,
        date_pattern: str,
        corrections: Sequence[TimeCorrection],
    ) -> ToolResponse:
        outcomes: List[OperationOutcome] = []
        fixed_total = 0
        for correction in corrections:
            label = f'"{correction.keyword}"'
            try:
                fixed = self._fix(calendar, date_pattern, correction)
            except CalendarError as exc:
                logger.warning("Correction for %r failed: %s", correction.keyword, exc)
                outcomes.append(OperationOutcome(label=label, succeeded=False, detail=str(exc)))
                continue
            fixed_total += fixed
            if fixed:
                detail = f"fixed {fixed} event(s) to {correction.new_start_time}-{correction.new_end_time}"
            else:
                detail = "no matching events"
            outcomes.append(OperationOutcome(label=label, succeeded=True, detail=detail, count=fixed))

        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        text = format_outcomes(
            f"Time correction results for {date_pattern}:",
            (("Events fixed", fixed_total), ("Failed corrections", failed)),
            outcomes,
        )
        return ToolResponse.ok(text)
