from __future__ import annotations

import pytest

from macos_calendar_mcp.core import DETAILED_FIELDS, WEEK_FIELDS, parser
from macos_calendar_mcp.domain import EventRecord, MalformedResult


@pytest.mark.parametrize("fields", [DETAILED_FIELDS, WEEK_FIELDS])
@pytest.mark.parametrize("raw", ['""', "", "   \n"])
def test_empty_reply_is_empty_sequence(raw, fields):
    assert parser.parse(raw, fields) == []


def test_single_detailed_record():
    raw = "Standup|3/10/2025 9:00:00 AM|3/10/2025 9:30:00 AM|weekly sync|Room A"
    assert parser.parse(raw, DETAILED_FIELDS) == [
        EventRecord(
            title="Standup",
            start="3/10/2025 9:00:00 AM",
            end="3/10/2025 9:30:00 AM",
            description="weekly sync",
            location="Room A",
        )
    ]


def test_multiple_week_records_keep_reply_order():
    raw = (
        "Planning|7/7/2025 10:00:00 AM|7/7/2025 11:00:00 AM|HQ, "
        "Retro|7/11/2025 4:00:00 PM|7/11/2025 5:00:00 PM|"
    )
    records = parser.parse(raw, WEEK_FIELDS)

    assert [record.title for record in records] == ["Planning", "Retro"]
    assert records[0].location == "HQ"
    assert records[1].location == ""
    assert records[1].description == ""


def test_missing_fields_are_malformed():
    with pytest.raises(MalformedResult):
        parser.parse("Standup|3/10/2025 9:00:00 AM", DETAILED_FIELDS)


def test_surplus_separators_are_malformed():
    raw = "Lunch|3/10/2025 12:00:00 PM|3/10/2025 1:00:00 PM|Cafe|Table 4"
    with pytest.raises(MalformedResult):
        parser.parse(raw, WEEK_FIELDS)


def test_separator_in_title_does_not_shift_fields():
    raw = "Design|Review|3/10/2025 9:00:00 AM|3/10/2025 9:30:00 AM|notes|Room A"
    with pytest.raises(MalformedResult):
        parser.parse(raw, DETAILED_FIELDS)


def test_unreadable_date_field_is_malformed():
    raw = "Standup|Monday, 10 March 2025|3/10/2025 9:30:00 AM|sync|Room A"
    with pytest.raises(MalformedResult, match="start"):
        parser.parse(raw, DETAILED_FIELDS)


def test_parse_names_splits_calendar_list():
    assert parser.parse_names("Home, Work, Birthdays\n") == ["Home", "Work", "Birthdays"]
    assert parser.parse_names("") == []


def test_parse_count():
    assert parser.parse_count("3\n") == 3
    with pytest.raises(MalformedResult):
        parser.parse_count("three")
