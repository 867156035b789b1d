from __future__ import annotations

from ..domain import ToolResponse
from ..services import CalendarService
from .models import (
    CreateBatchEventsArguments,
    CreateEventArguments,
    DeleteEventsArguments,
    FixEventTimesArguments,
    ListTodayArguments,
    ListWeekArguments,
    NoArguments,
    SearchArguments,
)
from .registry import register_api


@register_api(
    "list-calendars",
    description="List every calendar available in macOS Calendar.",
    arguments=NoArguments,
    tags=("calendar", "read"),
)
def list_calendars(service: CalendarService, args: NoArguments) -> ToolResponse:
    return service.list_calendars()


@register_api(
    "create-event",
    description="Create a new event in a macOS calendar.",
    arguments=CreateEventArguments,
    tags=("event", "write"),
)
def create_event(service: CalendarService, args: CreateEventArguments) -> ToolResponse:
    return service.create_event(args.to_draft(args.calendar))


@register_api(
    "create-batch-events",
    description="Create several events one after another, reporting each result.",
    arguments=CreateBatchEventsArguments,
    tags=("event", "write", "batch"),
)
def create_batch_events(service: CalendarService, args: CreateBatchEventsArguments) -> ToolResponse:
    return service.create_batch_events(args.to_drafts())


@register_api(
    "delete-events-by-keyword",
    description="Delete events whose title contains a keyword. Only a preview unless confirm is true.",
    arguments=DeleteEventsArguments,
    tags=("event", "write", "delete"),
)
def delete_events_by_keyword(service: CalendarService, args: DeleteEventsArguments) -> ToolResponse:
    return service.delete_events_by_keyword(args.keyword, args.calendar, confirm=args.confirm)


@register_api(
    "list-today-events",
    description="List today's events.",
    arguments=ListTodayArguments,
    tags=("event", "read"),
)
def list_today_events(service: CalendarService, args: ListTodayArguments) -> ToolResponse:
    return service.list_today_events(args.calendar)


@register_api(
    "list-week-events",
    description="List the events of the seven days starting at weekStart.",
    arguments=ListWeekArguments,
    tags=("event", "read"),
)
def list_week_events(service: CalendarService, args: ListWeekArguments) -> ToolResponse:
    return service.list_week_events(args.week_start, args.calendar)


@register_api(
    "search-events",
    description="Search events whose title or description contains the query.",
    arguments=SearchArguments,
    tags=("event", "read"),
)
def search_events(service: CalendarService, args: SearchArguments) -> ToolResponse:
    return service.search_events(args.query, args.calendar)


@register_api(
    "fix-event-times",
    description="Move events matched by title keyword to new start and end times on the given day.",
    arguments=FixEventTimesArguments,
    tags=("event", "write", "batch"),
)
def fix_event_times(service: CalendarService, args: FixEventTimesArguments) -> ToolResponse:
    return service.fix_event_times(args.calendar, args.date_pattern, args.to_corrections())
