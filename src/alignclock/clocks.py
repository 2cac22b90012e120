"""Clock computation layer: time parsing and minute differences against a reference clock."""

import logging
import re
from collections.abc import Iterable

from alignclock.models import ClockResult, SyncReport, TimeOfDay

log = logging.getLogger(__name__)

# [0-9] rather than \d: \d also matches non-ASCII digits.
_TIME_RE = re.compile(r"([01]?[0-9]|2[0-3]):([0-5][0-9])")


class TimeFormatError(ValueError):
    """Time string does not match H:MM / HH:MM with hour 0-23 and minute 0-59."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid time format: {value}")
        self.value = value


def parse_time(value: str) -> TimeOfDay:
    """Parse a clock reading such as "9:05" or "23:59".

    Args:
        value: Time string; the hour may be one or two digits, the minute is
            always two digits.

    Returns:
        TimeOfDay for the reading.

    Raises:
        TimeFormatError: When the string is not a valid time of day.
    """
    if not isinstance(value, str):
        raise TimeFormatError(value)
    match = _TIME_RE.fullmatch(value)
    if match is None:
        raise TimeFormatError(value)
    return TimeOfDay(hour=int(match.group(1)), minute=int(match.group(2)))


def time_difference(clock_time: str, grand_time: str) -> int:
    """Minutes by which ``clock_time`` is ahead of ``grand_time``.

    Positive when the clock is ahead, negative when behind.
    TimeFormatError from either parse propagates.
    """
    return parse_time(clock_time).total_minutes - parse_time(grand_time).total_minutes


def status_text(diff: int) -> str:
    if diff > 0:
        return f"+{diff} minutes (ahead)"
    if diff < 0:
        return f"{diff} minutes (behind)"
    return "0 minutes (synchronized)"


def synchronize(reference: str, readings: Iterable[str]) -> SyncReport:
    """Compare every reading against the reference time.

    A malformed reading is recorded with its error message and the rest are
    still processed.

    Args:
        reference: Grand clock time, e.g. "15:00".
        readings: Town clock readings in display order.

    Returns:
        SyncReport with one ClockResult per reading.
    """
    results: list[ClockResult] = []
    for i, reading in enumerate(readings, start=1):
        try:
            diff = time_difference(reading, reference)
        except TimeFormatError as e:
            log.warning("clock %d: %s", i, e)
            results.append(ClockResult(index=i, reading=reading, error=str(e)))
            continue
        results.append(ClockResult(index=i, reading=reading, diff=diff))

    report = SyncReport(reference=reference, results=tuple(results))
    log.debug(
        "synchronized %d clocks, %d need adjustment",
        len(report.results),
        report.adjustment_count,
    )
    return report
