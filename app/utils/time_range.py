"""Helpers for "HH:MM" time-of-day ranges within one calendar day."""
import re

TIME_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"
_TIME_RE = re.compile(TIME_PATTERN)


def to_minutes(value: str) -> int:
    """Convert "HH:MM" into minutes since midnight.

    Raises ValueError for anything that is not a valid 24h "HH:MM" string.
    """
    match = _TIME_RE.match(value or "")
    if not match:
        raise ValueError(f"Invalid time '{value}', expected HH:MM")
    return int(match.group(1)) * 60 + int(match.group(2))


def duration_minutes(start: str, end: str) -> int:
    return to_minutes(end) - to_minutes(start)


def overlaps(start1: str, end1: str, start2: str, end2: str) -> bool:
    """
    Check whether [start1, end1) and [start2, end2) intersect.

    Ranges are half-open: a class ending at 10:00 and one starting at 10:00
    do not overlap.
    """
    return to_minutes(start1) < to_minutes(end2) and to_minutes(start2) < to_minutes(end1)
