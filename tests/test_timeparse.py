"""Tests for clock-string parsing and formatting."""

import pytest

from core.timeparse import (
    auto_insert_colon,
    format_minutes_as_clock,
    format_minutes_for_input,
    hour_choices,
    minute_choices,
    normalize_digits_and_colon,
    parse_clock_string,
)


def test_round_trip_over_whole_window():
    for minutes in range(7 * 60, 23 * 60 + 1):
        assert parse_clock_string(format_minutes_as_clock(minutes)).minutes == minutes


@pytest.mark.parametrize(
    "text, expected",
    [
        ("7:00", 420),
        ("07:00", 420),
        ("9:5", 545),
        ("10:23", 623),
        ("  12:30 ", 750),
        ("23:00", 1380),
    ],
)
def test_parse_valid(text, expected):
    parsed = parse_clock_string(text)
    assert parsed.valid
    assert parsed.minutes == expected


@pytest.mark.parametrize("text", ["", "   ", "--:--", " --:-- ", None])
def test_parse_unspecified(text):
    parsed = parse_clock_string(text)
    assert parsed.valid
    assert parsed.unspecified
    assert parsed.minutes is None


@pytest.mark.parametrize(
    "text",
    ["25:00", "7:61", "abc", "7:5:3", "6:59", "23:01", "123:00", "7:", ":30", "７:00", "7.30"],
)
def test_parse_invalid_never_raises(text):
    parsed = parse_clock_string(text)
    assert not parsed.valid
    assert parsed.minutes is None
    assert parsed.error


def test_parse_non_string_is_invalid():
    assert not parse_clock_string(930).valid


def test_normalize_full_width():
    assert normalize_digits_and_colon("１２：３０") == "12:30"
    assert normalize_digits_and_colon("") == ""
    assert normalize_digits_and_colon(None) == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("9", "9"),
        ("09", "09"),
        ("093", "09:3"),
        ("0930", "09:30"),
        ("093015", "09:30"),
        ("０９３０", "09:30"),
        ("9:5", "9:5"),
        ("123:456", "12:45"),
        ("12:", "12"),
        ("1a2b3", "12:3"),
        ("", ""),
    ],
)
def test_auto_insert_colon(raw, expected):
    assert auto_insert_colon(raw) == expected


def test_format_display_and_input():
    assert format_minutes_as_clock(425) == "7:05"
    assert format_minutes_as_clock(1380) == "23:00"
    assert format_minutes_for_input(425) == "07:05"
    assert format_minutes_for_input(None) == ""


def test_picker_choices():
    hours = hour_choices()
    assert hours[0] is None
    assert hours[1:] == list(range(7, 24))
    assert minute_choices() == [0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55]
