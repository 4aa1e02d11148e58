"""Command-line entry point: parse courses, build schedules, write the result."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .builder import ScheduleBuilder
from .logger import get_logger
from .postparser import export_schedules_to_text
from .preparser import parse_course_db

DEFAULT_COURSE_DB = "../data/V1.0CourseDB.txt"
DEFAULT_OUTPUT = "../data/V1.schedOutput.txt"
DEFAULT_USER_INPUT = "../data/userInput.txt"


def run(input_path: str | Path, output_path: str | Path, user_input: str | Path) -> int:
    """Load the course data, generate schedules and write them as text.

    Returns 0 on success and 1 when there was nothing to schedule.
    """
    logger = get_logger()
    logger.initialize()
    logger.info("Input parsing started")

    courses = parse_course_db(input_path, user_input)
    if not courses:
        logger.error("Error while parsing input data. aborting process")
        return 1

    logger.info("initiate schedules builder")
    schedules = ScheduleBuilder().build(courses)
    if not schedules:
        logger.error("received empty result from algorithm, aborting process")
        return 1

    logger.info("initiate output generation")
    if export_schedules_to_text(schedules, output_path, courses):
        logger.info(f"output finish, can be seen in {output_path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line options and run the scheduler."""
    parser = argparse.ArgumentParser(
        prog="schedulify", description="Build every conflict-free course schedule."
    )
    parser.add_argument("--course-db", default=DEFAULT_COURSE_DB, help="course database file")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="schedule output file")
    parser.add_argument(
        "--user-input", default=DEFAULT_USER_INPUT, help="file listing the chosen course IDs"
    )
    args = parser.parse_args(argv)
    return run(args.course_db, args.output, args.user_input)


if __name__ == "__main__":
    raise SystemExit(main())