"""Construction of every conflict-free schedule for a set of courses."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .combinations import generate_combinations
from .logger import get_logger
from .models import Course, CourseSelection, Schedule
from .timeutils import is_overlap


def has_conflict(first: CourseSelection, second: CourseSelection) -> bool:
    """True when any session of one selection overlaps any session of the other."""
    return any(
        is_overlap(a, b) for a in first.sessions() for b in second.sessions()
    )


class ScheduleBuilder:
    """Builds all schedules that pick one non-conflicting option per course."""

    def build(self, courses: Sequence[Course]) -> list[Schedule]:
        """Return every valid schedule, in depth-first order of the course options."""
        logger = get_logger()
        logger.info(f"Starting schedule generation for {len(courses)} courses.")

        all_options: list[list[CourseSelection]] = []
        for course in courses:
            combinations = generate_combinations(course)
            logger.info(
                f"Generated {len(combinations)} combinations for course ID {course.id}"
            )
            all_options.append(combinations)

        results = [Schedule(list(chosen)) for chosen in self._search(all_options, [])]
        logger.info(
            f"Finished schedule generation. Total valid schedules: {len(results)}"
        )
        return results

    def _search(
        self,
        remaining: list[list[CourseSelection]],
        chosen: list[CourseSelection],
    ) -> Iterator[list[CourseSelection]]:
        if not remaining:
            yield chosen
            return
        options, rest = remaining[0], remaining[1:]
        for option in options:
            if any(has_conflict(option, selected) for selected in chosen):
                continue
            yield from self._search(rest, [*chosen, option])