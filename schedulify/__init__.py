"""Parse a course database and a course selection, and write every clash-free weekly timetable."""

__version__ = "1.0.0"