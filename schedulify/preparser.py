"""Parsing of the course database file and of the user's course selection."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import chain, repeat
from pathlib import Path

from .logger import get_logger
from .models import Course, Session

MAX_SELECTED_COURSES = 7
COURSE_SEPARATOR = "$$$$"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_SESSION_PREFIXES = {
    "L S": "lectures",
    "T S": "tutorials",
    "M S": "labs",
}


def _parse_leading_int(text: str) -> tuple[int, int]:
    """Parse a leading integer, returning its value and the characters consumed."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value, match.end()


def is_valid_time(time: str) -> bool:
    """True for a five-character "HH:MM" string within 00:00..23:59."""
    if len(time) != 5 or time[2] != ":":
        return False
    try:
        hour, _ = _parse_leading_int(time[:2])
        minute, _ = _parse_leading_int(time[3:5])
    except ValueError:
        return False
    return 0 <= hour < 24 and 0 <= minute < 60


def is_integer(text: str) -> bool:
    """True when the whole string is a 32-bit integer (leading blanks and sign allowed)."""
    try:
        _, consumed = _parse_leading_int(text)
    except ValueError:
        return False
    return consumed == len(text)


def validate_id(raw_id: str) -> bool:
    """A course ID is exactly five characters forming an integer."""
    return len(raw_id) == 5 and is_integer(raw_id)


def validate_location(location: str, max_length: int) -> bool:
    """A building or room number is an integer of 1 to max_length characters."""
    return 1 <= len(location) <= max_length and is_integer(location)


def read_selected_course_ids(filename: str | Path) -> set[str]:
    """Read whitespace-separated course IDs chosen by the user.

    Invalid IDs are skipped, duplicates are warned about, and more than
    seven valid IDs discards the whole selection.
    """
    logger = get_logger()
    try:
        handle = open(filename, encoding="utf-8", errors="replace")
    except OSError:
        logger.error(f"Could not open the file: {filename}")
        return set()

    course_ids: set[str] = set()
    with handle:
        for line in handle:
            for token in line.split():
                if not validate_id(token):
                    continue
                if token in course_ids:
                    logger.warning(f"Duplicate course ID found in user input: {token}")
                    continue
                course_ids.add(token)
                if len(course_ids) > MAX_SELECTED_COURSES:
                    logger.error("More than 7 course IDs selected. Limit is 7.")
                    return set()
    return course_ids


def _fields(line: str) -> Iterator[str]:
    """Comma-separated fields; once exhausted, the last field keeps being returned."""
    parts = line.split(",")
    return chain(parts, repeat(parts[-1]))


def _fail(message: str) -> None:
    get_logger().error(message)
    raise ValueError(message)


def _build_session(line: str) -> Session:
    fields = _fields(line)
    next(fields)  # the "S" marker

    token = next(fields)
    day, _ = _parse_leading_int(token)
    if not 1 <= day <= 7:
        _fail(f"Invalid day of week: {token}")

    start_time = next(fields)
    end_time = next(fields)
    if not is_valid_time(start_time) or not is_valid_time(end_time):
        _fail(f"Invalid time format: {start_time}, {end_time}")
    if start_time >= end_time:
        _fail(f"Start time must be before end time: {start_time} >= {end_time}")

    building = next(fields)
    if not validate_location(building, 4):
        _fail("Found invalid Session,Building number must be from 1 - 9999")

    room = next(fields)
    if not validate_location(room, 3):
        _fail("Found invalid Session,Room number must be from 1 - 999")

    return Session(day, start_time, end_time, building, room)


def parse_single_session(line: str) -> Session:
    """Parse "S,day,start,end,building,room"; raise ValueError when malformed."""
    try:
        return _build_session(line)
    except ValueError as exc:
        get_logger().error(f'Error parsing session line: "{line}" — {exc}')
        raise


def parse_multiple_sessions(line: str) -> list[Session]:
    """Parse "S,1,... S,2,..." (after the type letter), skipping malformed parts."""
    if not line:
        raise ValueError("empty session line")
    logger = get_logger()
    sessions: list[Session] = []
    remaining = line[1:]
    while True:
        part, separator, rest = remaining.partition(" S,")
        try:
            sessions.append(parse_single_session(part))
        except ValueError:
            logger.warning(f'Skipping malformed session part: "{part}"')
        if not separator:
            return sessions
        remaining = "S," + rest


class _LineReader:
    """Iterates over stripped lines while tracking the current line number."""

    def __init__(self, lines: Iterator[str]) -> None:
        self._lines = lines
        self.line_number = 0

    def __iter__(self) -> _LineReader:
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self.line_number += 1
        return line.rstrip("\n")

    def next_or_none(self) -> str | None:
        return next(self, None)

    def skip_course(self) -> None:
        for line in self:
            if line == COURSE_SEPARATOR:
                return


def _read_courses(reader: _LineReader) -> dict[int, Course]:
    logger = get_logger()
    course_db: dict[int, Course] = {}

    for line in reader:
        if not line or line == COURSE_SEPARATOR:
            continue
        name = line

        raw_id = reader.next_or_none()
        if raw_id is None:
            logger.error(
                f"Error: Missing course ID after name at line {reader.line_number}"
            )
            break
        if not validate_id(raw_id):
            logger.error(
                f"Error: Invalid course ID at line {reader.line_number}: {raw_id}"
            )
            reader.skip_course()
            continue

        course_id = int(raw_id)
        if course_id in course_db:
            logger.warning(
                f"Duplicate course ID {course_id} at line {reader.line_number}. Skipping."
            )
            continue

        teacher = reader.next_or_none()
        if teacher is None:
            logger.error(
                f"Error: Missing teacher name at line {reader.line_number} "
                f"for course ID {course_id}"
            )
            break

        course = Course(id=course_id, raw_id=raw_id, name=name, teacher=teacher)
        for session_line in reader:
            if not session_line or session_line == COURSE_SEPARATOR:
                break
            kind = next(
                (attr for prefix, attr in _SESSION_PREFIXES.items()
                 if session_line.startswith(prefix)),
                None,
            )
            if kind is None:
                logger.warning(
                    f"Unknown session format at line {reader.line_number}: {session_line}"
                )
                reader.skip_course()
                break
            getattr(course, kind).extend(parse_multiple_sessions(session_line[2:]))

        course_db[course_id] = course

    return course_db


def parse_course_db(path: str | Path, user_input: str | Path) -> list[Course]:
    """Parse the course database and return the courses the user selected.

    An empty list is returned whenever the database or the selection is
    unusable; the reason is written to the log.
    """
    logger = get_logger()
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        logger.error(f"Cannot open file: {path}")
        return []

    with handle:
        course_db = _read_courses(_LineReader(iter(handle)))

    if not course_db:
        logger.error("No valid courses found in the input.")
        return []

    for course_id, course in list(course_db.items()):
        if not (course.lectures or course.tutorials or course.labs):
            del course_db[course_id]
            logger.error(
                f"Course: {course_id} has no sessions and therefore has been deleted"
            )
    if not course_db:
        logger.error("No valid courses found in the input.")
        return []
    logger.info(f"Successfully parsed {len(course_db)} courses.")

    requested: set[int] = set()
    for raw_id in read_selected_course_ids(user_input):
        if not validate_id(raw_id):
            logger.error(f"Invalid course ID in user input (not an int): {raw_id}")
            continue
        course_id = int(raw_id)
        if course_id not in course_db:
            logger.error(f"{course_id} this course does not exist")
            continue
        requested.add(course_id)

    if not requested:
        logger.error("No valid user course IDs found in user input.")
        return []

    selected = [course for course_id, course in course_db.items() if course_id in requested]

    if len(selected) > MAX_SELECTED_COURSES:
        logger.error(
            f"Error: User selected more than 7 valid courses ({len(selected)}). Limit is 7."
        )
        return []
    if not selected:
        logger.error("No matching courses from user input exist in course database.")
        return []

    logger.info(f"User selected {len(selected)} valid courses.")
    return selected