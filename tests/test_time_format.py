"""Tests for duration strings."""

import pytest

from plates.services.time_format import (
    format_minutes_to_time,
    parse_time_to_minutes,
    validate_time_string,
)


@pytest.mark.parametrize(
    "text,minutes",
    [
        ("25:30", 25.5),
        ("1:05:00", 65.0),
        ("0:45", 0.75),
        ("45", 0.75),
        (" 8:20 ", 8.33),
        ("45:00min", 45.0),
    ],
)
def test_parse(text, minutes):
    assert parse_time_to_minutes(text) == minutes


@pytest.mark.parametrize("text", ["", None, "abc", "99:99", "1:75:00", "1:2:3:4", "::"])
def test_parse_rejects(text):
    assert parse_time_to_minutes(text) is None


@pytest.mark.parametrize(
    "minutes,text",
    [(25.5, "25:30"), (65.0, "1:05:00"), (0.75, "0:45"), (8.33, "8:20"), (0, "0:00")],
)
def test_format(minutes, text):
    assert format_minutes_to_time(minutes) == text


@pytest.mark.parametrize("value", [None, -1, float("nan"), "12"])
def test_format_invalid_input(value):
    assert format_minutes_to_time(value) == "0:00"


@pytest.mark.parametrize("text", ["0:01", "9:59", "25:30", "1:05:09", "23:59:59"])
def test_format_inverts_parse(text):
    assert format_minutes_to_time(parse_time_to_minutes(text)) == text


@pytest.mark.parametrize(
    "text,message",
    [
        ("", "Time is required"),
        ("   ", "Time is required"),
        ("99:99", "Invalid time format. Use MM:SS or HH:MM:SS"),
        ("0:00", "Time must be greater than 0"),
        ("24:00:01", "Time cannot exceed 24 hours"),
        ("24:00:00", None),
        ("30:00", None),
    ],
)
def test_validate(text, message):
    assert validate_time_string(text) == message
