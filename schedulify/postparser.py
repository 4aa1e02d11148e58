"""Rendering of generated schedules as text or JSON-like output."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .logger import get_logger
from .models import Course, Schedule, Session

DAY_NAMES = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

# Days are written in this order; the range mirrors the output format.
_OUTPUT_DAYS = range(7)

_DAY_INDENT = " " * 7
_ITEM_INDENT = " " * 14


@dataclass(frozen=True)
class ScheduleItem:
    """One session placed in a schedule, ready for output."""

    course_name: str
    raw_id: str
    kind: str
    start: str
    end: str
    building: str
    room: str


@dataclass(frozen=True)
class CourseInfo:
    """A course's printable ID and name."""

    raw_id: str
    name: str


DayMap = dict[int, list[ScheduleItem]]


def schedule_item_to_json(item: ScheduleItem) -> str:
    """Render one schedule item as a JSON-style object."""
    return (
        f'{{"course_name":{item.course_name}'
        f',"course_id":"{item.raw_id}"'
        f',"item_type":"{item.kind}"'
        f',"start":"{item.start}"'
        f',"end":"{item.end}"'
        f',"building":"{item.building}"'
        f',"room":"{item.room}"}}'
    )


def day_to_string(day: int) -> str:
    """Lowercase day name for 1 (Sunday) .. 7 (Saturday), otherwise "unknown"."""
    return DAY_NAMES[day - 1] if 1 <= day <= 7 else "unknown"


def get_course_info_by_id(courses: Iterable[Course], course_id: int) -> CourseInfo:
    """The raw ID and name of the course, or the numeric ID for both when absent."""
    for course in courses:
        if course.id == course_id:
            return CourseInfo(course.raw_id, course.name)
    fallback = str(course_id)
    return CourseInfo(fallback, fallback)


def add_session_to_day_map(
    day_map: DayMap,
    session: Session | None,
    kind: str,
    course_name: str,
    raw_id: str,
) -> None:
    """Add the session under its day, doing nothing when there is no session."""
    if session is None:
        return
    day_map.setdefault(session.day_of_week, []).append(
        ScheduleItem(
            course_name,
            raw_id,
            kind,
            session.start_time,
            session.end_time,
            session.building_number,
            session.room_number,
        )
    )


def build_day_map_for_schedule(schedule: Schedule, courses: Sequence[Course]) -> DayMap:
    """Group every selected session of the schedule by day of week."""
    day_map: DayMap = {}
    for selection in schedule.selections:
        info = get_course_info_by_id(courses, selection.course_id)
        add_session_to_day_map(day_map, selection.lecture, "lecture", info.name, info.raw_id)
        add_session_to_day_map(day_map, selection.tutorial, "tutorial", info.name, info.raw_id)
        add_session_to_day_map(day_map, selection.lab, "lab", info.name, info.raw_id)
    return day_map


def _by_start(items: Iterable[ScheduleItem]) -> list[ScheduleItem]:
    return sorted(items, key=lambda item: item.start)


def write_day_schedule(out: TextIO, day: int, items: Iterable[ScheduleItem]) -> None:
    """Write one day's heading followed by its items in start-time order."""
    out.write(f"{_DAY_INDENT}{day_to_string(day)}:\n")
    for item in _by_start(items):
        out.write(
            f"{_ITEM_INDENT}{item.course_name} ({item.raw_id}), {item.kind}, "
            f"{item.start}-{item.end} in building {item.building} room {item.room}\n"
        )


def write_schedule(
    out: TextIO, schedule: Schedule, index: int, courses: Sequence[Course]
) -> None:
    """Write a numbered schedule (index counts from 0) with all of its days."""
    out.write(f"schedule {index + 1}:\n")
    day_map = build_day_map_for_schedule(schedule, courses)
    for day in _OUTPUT_DAYS:
        if day in day_map:
            write_day_schedule(out, day, day_map[day])


def _schedule_to_json(number: int, schedule: Schedule, courses: Sequence[Course]) -> str:
    day_map = build_day_map_for_schedule(schedule, courses)
    days = [
        f'{{"day":"{day_to_string(day)}","schedule_items":['
        + ",".join(schedule_item_to_json(item) for item in _by_start(day_map[day]))
        + "]}"
        for day in _OUTPUT_DAYS
        if day in day_map
    ]
    return f'{{"schedule_number":{number},"schedule":[' + ",".join(days) + "]}"


def export_schedules_to_json(
    schedules: Sequence[Schedule], output_path: str | Path, courses: Sequence[Course]
) -> None:
    """Write all schedules to output_path as a JSON-style array.

    Raises OSError when the file cannot be written.
    """
    body = ",".join(
        _schedule_to_json(number, schedule, courses)
        for number, schedule in enumerate(schedules, start=1)
    )
    Path(output_path).write_text(f"[{body}]", encoding="utf-8")


def export_schedules_to_text(
    schedules: Sequence[Schedule], output_path: str | Path, courses: Sequence[Course]
) -> bool:
    """Write every schedule that has at least one session to a text file.

    Returns False, after logging why, when nothing is written.
    """
    logger = get_logger()
    valid = [
        schedule
        for schedule in schedules
        if any(build_day_map_for_schedule(schedule, courses).values())
    ]
    if not valid:
        logger.error("there are no valid schedules, aborting...")
        return False

    try:
        out = open(output_path, "w", encoding="utf-8")
    except OSError:
        logger.error(f"Cannot open file: {output_path}, aborting...")
        return False

    with out:
        for index, schedule in enumerate(valid):
            if index:
                out.write("\n")
            write_schedule(out, schedule, index, courses)
    return True