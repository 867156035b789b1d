from __future__ import annotations

from datetime import datetime

from macos_calendar_mcp.core import ScriptBuilder, quote
from macos_calendar_mcp.domain import EventDraft, TimeCorrection

builder = ScriptBuilder()


def test_quote_escapes_terminator_backslash_and_control_characters():
    assert quote('say "hi"') == '"say \\"hi\\""'
    assert quote("C:\\path") == '"C:\\\\path"'
    assert quote("line1\nline2\tx\r") == '"line1\\nline2\\tx\\r"'


def test_injected_title_stays_inside_its_string_literal():
    hostile = 'x" & (do shell script "rm -rf ~") & "'
    draft = EventDraft(
        calendar="Work",
        title=hostile,
        start_date="2025-03-10 09:00",
        end_date="2025-03-10 10:00",
    )
    script = builder.create_event(draft)

    assert 'summary:"x\\" & (do shell script \\"rm -rf ~\\") & \\""' in script
    assert '(do shell script "rm' not in script


def test_create_event_uses_host_date_literals_and_calendar():
    draft = EventDraft(
        calendar="Personal",
        title="Dentist",
        start_date="2025-03-10 13:00",
        end_date="2025-03-10 14:30",
        description="checkup",
        location="Main St",
    )
    script = builder.create_event(draft)

    assert 'set startDate to date "3/10/2025 1:00:00 PM"' in script
    assert 'set endDate to date "3/10/2025 2:30:00 PM"' in script
    assert 'calendar "Personal"' in script
    assert 'description:"checkup", location:"Main St"' in script


def test_application_name_is_configurable_and_quoted():
    script = ScriptBuilder(application="Calendar Beta").list_calendars()
    assert 'tell application "Calendar Beta"' in script


def test_delete_walks_events_in_reverse_order():
    script = builder.delete_by_keyword("Work", "Sync")

    assert "repeat with i from eventCount to 1 by -1" in script
    assert 'contains "Sync"' in script
    assert "return deletedCount" in script


def test_week_listing_uses_half_open_interval_and_four_fields():
    script = builder.list_week("Work", "2025-07-07")

    assert 'set rangeStart to date "7/7/2025 12:00:00 AM"' in script
    assert 'set rangeEnd to date "7/14/2025 12:00:00 AM"' in script
    assert "start date >= rangeStart and start date < rangeEnd" in script
    assert "description of anEvent" not in script
    assert "my fieldOf(location of anEvent)" in script


def test_day_listing_includes_description_and_location():
    script = builder.list_day("Personal", datetime(2025, 3, 10), datetime(2025, 3, 11))

    assert 'set rangeEnd to date "3/11/2025 12:00:00 AM"' in script
    assert "my fieldOf(description of anEvent)" in script


def test_search_matches_title_or_description():
    script = builder.search("Personal", 'say "x"')
    assert '(my textOf(summary of anEvent)) contains "say \\"x\\""' in script
    assert '(my textOf(description of anEvent)) contains "say \\"x\\""' in script


def test_fix_times_combines_date_pattern_with_new_times():
    correction = TimeCorrection(keyword="Standup", new_start_time="09:00", new_end_time="09:15")
    script = builder.fix_times("Work", "2025-07-10", correction)

    assert 'set newStart to date "7/10/2025 9:00:00 AM"' in script
    assert 'set newEnd to date "7/10/2025 9:15:00 AM"' in script
    assert 'whose summary contains' not in script
    assert '(my textOf(summary of anEvent)) contains "Standup"' in script
    assert "return fixedCount" in script


def test_keyword_matching_is_case_sensitive():
    correction = TimeCorrection(keyword="Standup", new_start_time="09:00", new_end_time="09:15")
    scripts = [
        builder.delete_by_keyword("Work", "Sync"),
        builder.search("Work", "sync"),
        builder.fix_times("Work", "2025-07-10", correction),
    ]

    for script in scripts:
        assert "considering case" in script
        assert "end considering" in script
        assert script.index("considering case") < script.index("contains")


def test_listed_text_fields_replace_separators():
    script = builder.list_day("Personal", datetime(2025, 3, 10), datetime(2025, 3, 11))

    assert "on fieldOf(theValue)" in script
    assert "on replaceText(theText, searchText, replacement)" in script
    assert 'my replaceText(my textOf(theValue), "|", "/")' in script
    assert 'my replaceText(theText, ", ", ",")' in script
    assert "my fieldOf(summary of anEvent)" in script
