# tests/test_clocks.py
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from alignclock.clocks import (
    TimeFormatError,
    parse_time,
    status_text,
    synchronize,
    time_difference,
)
from alignclock.models import TimeOfDay

valid_times = st.builds(
    TimeOfDay, hour=st.integers(min_value=0, max_value=23), minute=st.integers(0, 59)
)


# ─────────────────────────────────────────────────────────────────────────────
# parse_time
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,expected",
    [
        ("15:00", TimeOfDay(15, 0)),
        ("9:05", TimeOfDay(9, 5)),
        ("09:05", TimeOfDay(9, 5)),
        ("0:00", TimeOfDay(0, 0)),
        ("23:59", TimeOfDay(23, 59)),
    ],
)
def test_parse_valid(text: str, expected: TimeOfDay) -> None:
    assert parse_time(text) == expected


@pytest.mark.parametrize(
    "text", ["24:00", "15:60", "3pm", "", "15:5", " 15:00", "15:00 ", "1500", "١٥:٠٠"]
)
def test_parse_invalid(text: str) -> None:
    with pytest.raises(TimeFormatError) as exc:
        parse_time(text)
    assert exc.value.value == text
    assert str(exc.value) == f"Invalid time format: {text}"


def test_parse_non_string() -> None:
    with pytest.raises(TimeFormatError):
        parse_time(None)  # type: ignore[arg-type]


def test_format_error_is_value_error() -> None:
    assert issubclass(TimeFormatError, ValueError)


@given(valid_times)
def test_parse_accepts_padded_rendering(time: TimeOfDay) -> None:
    assert parse_time(str(time)) == time
    assert time.total_minutes == time.hour * 60 + time.minute


# ─────────────────────────────────────────────────────────────────────────────
# time_difference
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "a,b,expected",
    [("15:05", "15:00", 5), ("14:45", "15:00", -15), ("15:00", "15:00", 0), ("0:00", "23:59", -1439)],
)
def test_time_difference(a: str, b: str, expected: int) -> None:
    assert time_difference(a, b) == expected


@given(valid_times, valid_times)
def test_time_difference_antisymmetric(a: TimeOfDay, b: TimeOfDay) -> None:
    assert time_difference(str(a), str(b)) == -time_difference(str(b), str(a))


def test_time_difference_propagates_format_error() -> None:
    with pytest.raises(TimeFormatError):
        time_difference("bad", "15:00")
    with pytest.raises(TimeFormatError):
        time_difference("15:00", "25:00")


# ─────────────────────────────────────────────────────────────────────────────
# synchronize
# ─────────────────────────────────────────────────────────────────────────────

def test_synchronize_scenario(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="alignclock.clocks"):
        report = synchronize("15:00", ["14:45", "15:05", "15:00", "14:40", "bad"])

    assert report.diffs == [-15, 5, 0, -20, None]
    assert report.adjustment_count == 3
    assert [r.index for r in report.results] == [1, 2, 3, 4, 5]
    assert [r.status for r in report.results] == [
        "behind",
        "ahead",
        "synchronized",
        "behind",
        "invalid",
    ]
    bad = report.results[-1]
    assert bad.error == "Invalid time format: bad"
    assert "clock 5" in caplog.text


def test_synchronize_bad_reference_marks_every_reading() -> None:
    report = synchronize("25:00", ["14:45", "15:05"])
    assert report.diffs == [None, None]
    assert report.adjustment_count == 0
    assert all(r.error == "Invalid time format: 25:00" for r in report.results)


def test_synchronize_empty() -> None:
    report = synchronize("15:00", [])
    assert report.results == ()
    assert report.adjustment_count == 0


@pytest.mark.parametrize(
    "diff,expected",
    [(5, "+5 minutes (ahead)"), (-15, "-15 minutes (behind)"), (0, "0 minutes (synchronized)")],
)
def test_status_text(diff: int, expected: str) -> None:
    assert status_text(diff) == expected


@pytest.mark.parametrize("hour,minute", [(24, 0), (25, 99), (-1, 0), (12, 60), (0, -1)])
def test_time_of_day_rejects_out_of_range(hour: int, minute: int) -> None:
    with pytest.raises(ValueError):
        TimeOfDay(hour, minute)
