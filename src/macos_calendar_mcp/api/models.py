from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from ..domain import EventDraft, TimeCorrection

PERSONAL_CALENDAR = "Personal"
WORK_CALENDAR = "Work"


class ToolArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class NoArguments(ToolArguments):
    pass


class EventFields(ToolArguments):
    title: str = Field(min_length=1, description="Event title")
    start_date: str = Field(alias="startDate", min_length=1, description="Start time, YYYY-MM-DD HH:MM")
    end_date: str = Field(alias="endDate", min_length=1, description="End time, YYYY-MM-DD HH:MM")
    description: str = Field(default="", description="Event notes")
    location: str = Field(default="", description="Event location")

    def to_draft(self, calendar: str) -> EventDraft:
        return EventDraft(
            calendar=calendar,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            description=self.description,
            location=self.location,
        )


class CreateEventArguments(EventFields):
    calendar: str = Field(default=PERSONAL_CALENDAR, description="Calendar name")


class CreateBatchEventsArguments(ToolArguments):
    events: List[EventFields] = Field(description="Events to create, in order")
    calendar: str = Field(default=WORK_CALENDAR, description="Target calendar")

    def to_drafts(self) -> List[EventDraft]:
        return [event.to_draft(self.calendar) for event in self.events]


class DeleteEventsArguments(ToolArguments):
    keyword: str = Field(min_length=1, description="Delete events whose title contains this text")
    calendar: str = Field(default=WORK_CALENDAR, description="Calendar name")
    confirm: StrictBool = Field(default=False, description="Must be true to actually delete")


class ListTodayArguments(ToolArguments):
    calendar: str = Field(default=PERSONAL_CALENDAR, description="Calendar name")


class ListWeekArguments(ToolArguments):
    week_start: str = Field(alias="weekStart", min_length=1, description="First day of the week, YYYY-MM-DD")
    calendar: str = Field(default=WORK_CALENDAR, description="Calendar name")


class SearchArguments(ToolArguments):
    query: str = Field(min_length=1, description="Text to find in event titles or descriptions")
    calendar: str = Field(default=PERSONAL_CALENDAR, description="Calendar name")


class TimeCorrectionPayload(ToolArguments):
    keyword: str = Field(min_length=1, description="Title keyword of the events to fix")
    new_start_time: str = Field(alias="newStartTime", description="New start time, HH:MM")
    new_end_time: str = Field(alias="newEndTime", description="New end time, HH:MM")

    def to_domain(self) -> TimeCorrection:
        return TimeCorrection(
            keyword=self.keyword,
            new_start_time=self.new_start_time,
            new_end_time=self.new_end_time,
        )


class FixEventTimesArguments(ToolArguments):
    calendar: str = Field(min_length=1, description="Calendar name")
    date_pattern: str = Field(alias="datePattern", min_length=1, description="Target day, YYYY-MM-DD")
    corrections: List[TimeCorrectionPayload] = Field(description="Time corrections to apply, in order")

    def to_corrections(self) -> List[TimeCorrection]:
        return [correction.to_domain() for correction in self.corrections]
