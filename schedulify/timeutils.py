"""Time-of-day conversion and session overlap checks."""

from __future__ import annotations

import re

from .logger import get_logger
from .models import Session

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def to_minutes(time: str) -> int:
    """Convert "HH:MM" to minutes since midnight; raise ValueError when invalid."""
    try:
        hour_str, sep, minute_str = time.partition(":")
        if not sep:
            raise ValueError(f"Missing colon in time string: {time}")
        if not hour_str or not minute_str:
            raise ValueError(f"Empty hour or minute in time string: {time}")
        hours = _leading_int(hour_str)
        minutes = _leading_int(minute_str)
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            raise ValueError(f"Hour or minute out of range: {time}")
        return hours * 60 + minutes
    except ValueError as exc:
        get_logger().error(f"toMinutes() error: {exc}")
        raise


def is_overlap(first: Session | None, second: Session | None) -> bool:
    """True when both sessions fall on the same day and their times intersect."""
    if first is None or second is None:
        get_logger().warning("isOverlap() received a null Session pointer.")
        return False
    if first.day_of_week != second.day_of_week:
        return False
    try:
        start1 = to_minutes(first.start_time)
        end1 = to_minutes(first.end_time)
        start2 = to_minutes(second.start_time)
        end2 = to_minutes(second.end_time)
    except ValueError as exc:
        get_logger().error(f"isOverlap() error comparing sessions: {exc}")
        return False
    return start1 < end2 and start2 < end1