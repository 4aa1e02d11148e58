"""Valid lecture/tutorial/lab combinations within a single course."""

from __future__ import annotations

from .logger import get_logger
from .models import Course, CourseSelection, Session
from .timeutils import is_overlap


def _options(sessions: list[Session]) -> list[Session | None]:
    """All sessions of a kind, or a single "none" option when there are none."""
    return list(sessions) if sessions else [None]


def generate_combinations(course: Course) -> list[CourseSelection]:
    """Every lecture/tutorial/lab choice for the course whose sessions do not overlap.

    A lecture is required; a tutorial or lab is only chosen when the course
    offers them, and is left as None otherwise.
    """
    logger = get_logger()
    tutorials = _options(course.tutorials)
    labs = _options(course.labs)
    combinations: list[CourseSelection] = []

    for lecture in course.lectures:
        for tutorial in tutorials:
            if tutorial is not None and is_overlap(lecture, tutorial):
                logger.info(
                    f"Skipped due to lecture-tutorial conflict for course ID {course.id}"
                )
                continue
            for lab in labs:
                if lab is not None and (
                    is_overlap(lecture, lab)
                    or (tutorial is not None and is_overlap(tutorial, lab))
                ):
                    logger.info(f"Skipped due to time conflict in course ID {course.id}")
                    continue
                combinations.append(CourseSelection(course.id, lecture, tutorial, lab))

    if combinations:
        logger.info(
            f"Generated {len(combinations)} valid combinations for course ID {course.id}"
        )
    else:
        logger.warning(f"No valid combinations generated for course ID {course.id}")
    return combinations