# schedulify

schedulify reads a course database and a short list of the courses you
want to take, then works out every weekly timetable in which none of the
chosen lectures, tutorials and labs overlap. The timetables are written
to a plain text file, one after another, grouped by day.

## Installing

```
pip install .
```

Python 3.10 or later is needed; there are no other dependencies.

## Running

```
schedulify --help
schedulify --course-db courses.txt --user-input selection.txt --output schedules.txt
```

Options:

- `--course-db`: the course database (default `../data/V1.0CourseDB.txt`)
- `--user-input`: the file listing the courses you picked
  (default `../data/userInput.txt`)
- `--output`: the file the timetables are written to
  (default `../data/V1.schedOutput.txt`)

The command exits with status 0 when timetables were produced and 1 when
the input gave nothing to schedule (no usable courses, no valid selection,
or no clash-free combination). Progress and any problems found in the
input are written to a log file named after the current time
(`ddmmyy_HH-MM-SS.log`) in `../data/logs`, relative to the working
directory; the directory is created if needed.

## The course database

Each course is a block of lines, and blocks are separated by a line
holding `$$$$`:

```
Linear Algebra
83112
Dr. Example
L S,1,09:00,11:00,504,101 S,3,09:00,11:00,504,101
T S,2,12:00,13:00,605,12
M S,4,14:00,16:00,216,3
$$$$
```

- line 1: the course name
- line 2: the course ID, a five-character number such as `83112`
- line 3: the teacher
- then session lines: `L` for lectures, `T` for tutorials, `M` for labs.
  A line may hold several sessions, each written as
  `S,day,start,end,building,room`, where `day` is 1 (Sunday) to 7
  (Saturday), times are `HH:MM` in 24-hour form with the start before the
  end, the building is 1 to 4 digits and the room 1 to 3 digits.

An empty line or `$$$$` ends a course's session lines. Malformed sessions
are skipped; a session line with an unknown prefix ends the course there,
keeping the sessions read so far. Courses with an invalid ID, a repeated
ID, or no sessions at all are dropped. Every such case is noted in the log.

## Choosing courses

The selection file holds five-digit course IDs separated by spaces or
new lines. Tokens that are not valid IDs are ignored, duplicates are
ignored with a warning, and IDs missing from the database are reported
in the log. At most seven courses may be chosen; a longer list is
rejected as a whole.

## Output

```
schedule 1:
       sunday:
              Linear Algebra (83112), lecture, 09:00-11:00 in building 504 room 101
       monday:
              Linear Algebra (83112), tutorial, 12:00-13:00 in building 605 room 12
```

A timetable uses one lecture of each chosen course, plus one tutorial and
one lab where the course has them, and no two of its sessions overlap on
the same day. Sessions that merely touch (one ends at 11:00, the next
starts at 11:00) are not a clash. A course with tutorials or labs but no
lecture cannot be placed, so no timetable is produced for a selection
that includes it.

Within a day, items are listed by start time. Days are written from
Sunday to Friday; sessions held on day 7 (Saturday) still count when
checking for clashes but are not written to the output.

## Using it from Python

```python
from schedulify.logger import get_logger
from schedulify.preparser import parse_course_db
from schedulify.builder import ScheduleBuilder
from schedulify.postparser import export_schedules_to_text

get_logger().initialize("logs")   # optional: without it nothing is logged
courses = parse_course_db("courses.txt", "selection.txt")
schedules = ScheduleBuilder().build(courses)
export_schedules_to_text(schedules, "schedules.txt", courses)
```

- `schedulify.app.run(input_path, output_path, user_input)` does the same
  steps in one call (logging to `../data/logs`) and returns the exit status.
- `schedulify.postparser.export_schedules_to_json` writes the timetables
  as a JSON-style array instead of text. The course name is written
  unquoted, so the result is not strict JSON.
- `schedulify.combinations.generate_combinations` lists the clash-free
  lecture/tutorial/lab choices for a single course, and
  `schedulify.builder.has_conflict` tells whether two such choices clash.
- `schedulify.timeutils.to_minutes` and `is_overlap` convert `HH:MM`
  times and compare sessions.

## Running the tests

```
pip install .[test]
pytest
```