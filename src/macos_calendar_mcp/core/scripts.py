"""AppleScript text for each Calendar.app command.

Every user-controlled string goes through :func:`quote` before it is placed in
a script. List-style scripts reply with one line: items joined by ``", "`` and
fields joined by ``"|"`` in the order requested by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from ..domain import EventDraft, EventField, TimeCorrection
from . import dates

ITEM_SEPARATOR = ", "
FIELD_SEPARATOR = "|"

DETAILED_FIELDS: tuple[EventField, ...] = (
    EventField.TITLE,
    EventField.START,
    EventField.END,
    EventField.DESCRIPTION,
    EventField.LOCATION,
)
WEEK_FIELDS: tuple[EventField, ...] = (
    EventField.TITLE,
    EventField.START,
    EventField.END,
    EventField.LOCATION,
)

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_FIELD_EXPRESSIONS = {
    EventField.TITLE: "my fieldOf(summary of anEvent)",
    EventField.START: "my hostDate(start date of anEvent)",
    EventField.END: "my hostDate(end date of anEvent)",
    EventField.DESCRIPTION: "my fieldOf(description of anEvent)",
    EventField.LOCATION: "my fieldOf(location of anEvent)",
}

# Separators inside free text are rewritten so a reply always splits cleanly.
FIELD_SEPARATOR_REPLACEMENT = "/"
ITEM_SEPARATOR_REPLACEMENT = ","

_JOIN_HANDLER = """\
on joinItems(theItems)
	set savedDelimiters to AppleScript's text item delimiters
	set AppleScript's text item delimiters to ", "
	set joined to theItems as text
	set AppleScript's text item delimiters to savedDelimiters
	return joined
end joinItems
"""

_TEXT_HANDLER = """\
on textOf(theValue)
	if theValue is missing value then return ""
	return theValue as text
end textOf
"""

_RECORD_HANDLERS = _TEXT_HANDLER + f"""
on replaceText(theText, searchText, replacement)
	set savedDelimiters to AppleScript's text item delimiters
	set AppleScript's text item delimiters to searchText
	set theParts to text items of theText
	set AppleScript's text item delimiters to replacement
	set theText to theParts as text
	set AppleScript's text item delimiters to savedDelimiters
	return theText
end replaceText

on fieldOf(theValue)
	set theText to my replaceText(my textOf(theValue), "{FIELD_SEPARATOR}", "{FIELD_SEPARATOR_REPLACEMENT}")
	return my replaceText(theText, "{ITEM_SEPARATOR}", "{ITEM_SEPARATOR_REPLACEMENT}")
end fieldOf

on hostDate(theDate)
	set secs to time of theDate
	set h to secs div hours
	set m to (secs mod hours) div minutes
	set s to secs mod minutes
	if h < 12 then
		set meridiem to "AM"
	else
		set meridiem to "PM"
	end if
	set h12 to h mod 12
	if h12 = 0 then set h12 to 12
	return ((month of theDate as integer) as text) & "/" & ((day of theDate) as text) & "/" & ((year of theDate) as text) & " " & (h12 as text) & ":" & (text -2 thru -1 of ("0" & m)) & ":" & (text -2 thru -1 of ("0" & s)) & " " & meridiem
end hostDate
"""


def quote(value: str) -> str:
    """Return ``value`` as an AppleScript string literal."""

    return '"' + "".join(_ESCAPES.get(char, char) for char in str(value)) + '"'


def date_literal(value: str) -> str:
    return f"date {quote(dates.normalize(value))}"


def _record_expression(fields: Sequence[EventField]) -> str:
    return f" & {quote(FIELD_SEPARATOR)} & ".join(_FIELD_EXPRESSIONS[field] for field in fields)


@dataclass(frozen=True)
class ScriptBuilder:
    """Builds the script for one Calendar.app command."""

    application: str = "Calendar"

    def _tell(self) -> str:
        return f"tell application {quote(self.application)}"

    def list_calendars(self) -> str:
        return (
            f"{_JOIN_HANDLER}\n"
            f"{self._tell()}\n"
            "\tset calendarNames to name of every calendar\n"
            "end tell\n"
            "return my joinItems(calendarNames)\n"
        )

    def create_event(self, draft: EventDraft) -> str:
        properties = ", ".join(
            (
                f"summary:{quote(draft.title)}",
                "start date:startDate",
                "end date:endDate",
                f"description:{quote(draft.description)}",
                f"location:{quote(draft.location)}",
            )
        )
        return (
            f"set startDate to {date_literal(draft.start_date)}\n"
            f"set endDate to {date_literal(draft.end_date)}\n"
            f"{self._tell()}\n"
            f"\tset theCalendar to calendar {quote(draft.calendar)}\n"
            f"\tset newEvent to make new event at end of events of theCalendar with properties {{{properties}}}\n"
            "\treturn uid of newEvent\n"
            "end tell\n"
        )

    def delete_by_keyword(self, calendar: str, keyword: str) -> str:
        # Walk backwards so deleting an event leaves unvisited indices intact.
        return (
            f"{_TEXT_HANDLER}\n"
            f"{self._tell()}\n"
            f"\tset theCalendar to calendar {quote(calendar)}\n"
            "\tset deletedCount to 0\n"
            "\tset eventCount to count of events of theCalendar\n"
            "\trepeat with i from eventCount to 1 by -1\n"
            "\t\tset anEvent to event i of theCalendar\n"
            "\t\tconsidering case\n"
            f"\t\t\tset isMatch to (my textOf(summary of anEvent)) contains {quote(keyword)}\n"
            "\t\tend considering\n"
            "\t\tif isMatch then\n"
            "\t\t\tdelete anEvent\n"
            "\t\t\tset deletedCount to deletedCount + 1\n"
            "\t\tend if\n"
            "\tend repeat\n"
            "\treturn deletedCount\n"
            "end tell\n"
        )

    def list_between(
        self,
        calendar: str,
        start: str,
        end: str,
        fields: Sequence[EventField] = DETAILED_FIELDS,
    ) -> str:
        """Events whose start date lies in ``[start, end)``."""

        return (
            f"{_RECORD_HANDLERS}\n{_JOIN_HANDLER}\n"
            f"set rangeStart to {date_literal(start)}\n"
            f"set rangeEnd to {date_literal(end)}\n"
            "set eventList to {}\n"
            f"{self._tell()}\n"
            f"\tset theCalendar to calendar {quote(calendar)}\n"
            "\tset matches to every event of theCalendar whose start date >= rangeStart and start date < rangeEnd\n"
            "\trepeat with anEvent in matches\n"
            f"\t\tset end of eventList to {_record_expression(fields)}\n"
            "\tend repeat\n"
            "end tell\n"
            "return my joinItems(eventList)\n"
        )

    def list_day(self, calendar: str, day_start: datetime, day_end: datetime) -> str:
        return self.list_between(
            calendar,
            day_start.strftime("%Y-%m-%d %H:%M"),
            day_end.strftime("%Y-%m-%d %H:%M"),
            DETAILED_FIELDS,
        )

    def list_week(self, calendar: str, week_start: str) -> str:
        start, end = dates.week_window(week_start)
        return self.list_between(calendar, start, end, WEEK_FIELDS)

    def search(self, calendar: str, query: str) -> str:
        needle = quote(query)
        return (
            f"{_RECORD_HANDLERS}\n{_JOIN_HANDLER}\n"
            "set eventList to {}\n"
            f"{self._tell()}\n"
            f"\tset theCalendar to calendar {quote(calendar)}\n"
            "\trepeat with anEvent in (every event of theCalendar)\n"
            "\t\tconsidering case\n"
            f"\t\t\tset isMatch to (my textOf(summary of anEvent)) contains {needle} or (my textOf(description of anEvent)) contains {needle}\n"
            "\t\tend considering\n"
            "\t\tif isMatch then\n"
            f"\t\t\tset end of eventList to {_record_expression(DETAILED_FIELDS)}\n"
            "\t\tend if\n"
            "\tend repeat\n"
            "end tell\n"
            "return my joinItems(eventList)\n"
        )

    def fix_times(self, calendar: str, date_pattern: str, correction: TimeCorrection) -> str:
        new_start = dates.combine(date_pattern, correction.new_start_time)
        new_end = dates.combine(date_pattern, correction.new_end_time)
        return (
            f"{_TEXT_HANDLER}\n"
            f"set newStart to {date_literal(new_start)}\n"
            f"set newEnd to {date_literal(new_end)}\n"
            f"{self._tell()}\n"
            f"\tset theCalendar to calendar {quote(calendar)}\n"
            "\tset fixedCount to 0\n"
            "\trepeat with anEvent in (every event of theCalendar)\n"
            "\t\tconsidering case\n"
            f"\t\t\tset isMatch to (my textOf(summary of anEvent)) contains {quote(correction.keyword)}\n"
            "\t\tend considering\n"
            "\t\tif isMatch then\n"
            "\t\t\tif newStart > (end date of anEvent) then\n"
            "\t\t\t\tset end date of anEvent to newEnd\n"
            "\t\t\t\tset start date of anEvent to newStart\n"
            "\t\t\telse\n"
            "\t\t\t\tset start date of anEvent to newStart\n"
            "\t\t\t\tset end date of anEvent to newEnd\n"
            "\t\t\tend if\n"
            "\t\t\tset fixedCount to fixedCount + 1\n"
            "\t\tend if\n"
            "\tend repeat\n"
            "\treturn fixedCount\n"
            "end tell\n"
        )


__all__ = [
    "DETAILED_FIELDS",
    "FIELD_SEPARATOR",
    "ITEM_SEPARATOR",
    "ScriptBuilder",
    "WEEK_FIELDS",
    "date_literal",
    "quote",
]
