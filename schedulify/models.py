"""Core data types: sessions, courses, per-course selections and schedules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Session:
    """One meeting: day (1 = Sunday .. 7 = Saturday), HH:MM times and location."""

    day_of_week: int
    start_time: str
    end_time: str
    building_number: str = ""
    room_number: str = ""


@dataclass
class Course:
    """A course with its lecture, tutorial and lab session options."""

    id: int
    raw_id: str = ""
    name: str = ""
    teacher: str = ""
    lectures: list[Session] = field(default_factory=list)
    tutorials: list[Session] = field(default_factory=list)
    labs: list[Session] = field(default_factory=list)


@dataclass(frozen=True)
class CourseSelection:
    """A chosen lecture with optional tutorial and lab for one course."""

    course_id: int
    lecture: Session | None
    tutorial: Session | None = None
    lab: Session | None = None

    def sessions(self) -> list[Session]:
        """The selected sessions in lecture, tutorial, lab order, skipping absent ones."""
        return [s for s in (self.lecture, self.tutorial, self.lab) if s is not None]


@dataclass
class Schedule:
    """A set of course selections that together form one timetable."""

    selections: list[CourseSelection] = field(default_factory=list)