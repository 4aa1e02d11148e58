import pytest

from schedulify.models import Session
from schedulify.preparser import (
    is_integer,
    is_valid_time,
    parse_course_db,
    parse_multiple_sessions,
    parse_single_session,
    read_selected_course_ids,
    validate_id,
    validate_location,
)

VALID_DB = """Calculus 1
83112
Dr. Cohen
L S,1,10:00,12:00,604,101 S,3,10:00,12:00,604,101
T S,2,14:00,15:00,605,11
$$$$
Intro to CS
83533
Dr. Levi
L S,4,09:00,11:00,1401,5
$$$$
Test Course
00001
Some Teacher
L S,5,08:00,09:00,1,1
M S,5,10:00,12:00,2,2
$$$$
"""

VALID_USER_INPUT = "83112 83533\n00001\n"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_valid_time():
    assert is_valid_time("13:45")
    assert not is_valid_time("1345")
    assert not is_valid_time("24:00")
    assert not is_valid_time("10:70")
    assert not is_valid_time("")
    assert not is_valid_time("13:45t")


def test_valid_time_bounds():
    assert is_valid_time("00:00")
    assert is_valid_time("23:59")
    assert not is_valid_time("ab:cd")


def test_valid_id():
    assert validate_id("12345")
    assert not validate_id("1345")
    assert not validate_id("123456")
    assert not validate_id("1234r")
    assert not validate_id("")


def test_is_integer():
    assert is_integer("42")
    assert is_integer("-12")
    assert is_integer(" 12")
    assert not is_integer("12 ")
    assert not is_integer("abc")
    assert not is_integer("")
    assert not is_integer("2147483648")


def test_validate_location():
    assert validate_location("9999", 4)
    assert not validate_location("10000", 4)
    assert validate_location("999", 3)
    assert not validate_location("1000", 3)
    assert not validate_location("", 3)
    assert not validate_location("1a", 3)


def test_valid_user_input(tmp_path):
    path = _write(tmp_path, "validUserInput.txt", VALID_USER_INPUT)
    assert read_selected_course_ids(path) == {"83112", "83533", "00001"}


def test_parses_valid_course_db(tmp_path):
    db = _write(tmp_path, "validDB.txt", VALID_DB)
    user = _write(tmp_path, "validUserInput.txt", VALID_USER_INPUT)
    courses = parse_course_db(db, user)
    assert len(courses) == 3
    assert courses[0].id == 83112
    assert courses[0].name == "Calculus 1"
    assert courses[0].teacher == "Dr. Cohen"
    assert len(courses[0].lectures) == 2
    assert courses[0].lectures[0].day_of_week == 1
    assert courses[0].tutorials == [Session(2, "14:00", "15:00", "605", "11")]
    assert courses[2].raw_id == "00001"
    assert courses[2].labs == [Session(5, "10:00", "12:00", "2", "2")]


def test_fails_on_invalid_course_id(tmp_path):
    db = _write(
        tmp_path,
        "invalidDB_id.txt",
        "Calculus 1\n8311\nDr. Cohen\nL S,1,10:00,12:00,604,101\n$$$$\n"
        "Intro to CS\n835333\nDr. Levi\nL S,4,09:00,11:00,1401,5\n$$$$\n",
    )
    user = _write(tmp_path, "validUserInput.txt", VALID_USER_INPUT)
    assert parse_course_db(db, user) == []


def test_fails_on_non_numeric_fields(tmp_path):
    db = _write(
        tmp_path,
        "invalidDB_string.txt",
        "Calculus 1\nABCDE\nDr. Cohen\nL S,1,10:00,12:00,604,101\n$$$$\n"
        "Intro to CS\n83a33\nDr. Levi\nL S,4,09:00,11:00,1401,5\n$$$$\n",
    )
    user = _write(tmp_path, "validUserInput.txt", VALID_USER_INPUT)
    assert parse_course_db(db, user) == []


def test_invalid_user_input_ids(tmp_path):
    path = _write(
        tmp_path,
        "invalidUserInput_id.txt",
        "83112 8311 831122\n83533 abcde 00001\n12345\n",
    )
    assert len(read_selected_course_ids(path)) == 4


def test_rejects_more_than_seven_total_courses(tmp_path):
    path = _write(
        tmp_path,
        "userInput_TooManyTotal.txt",
        "10001 10002 10003 10004\n10005 10006 10007 10008\n",
    )
    assert read_selected_course_ids(path) == set()


def test_exactly_seven_courses_accepted(tmp_path):
    path = _write(tmp_path, "seven.txt", "10001 10002 10003 10004 10005 10006 10007\n")
    assert len(read_selected_course_ids(path)) == 7


def test_invalid_user_input_empty_file(tmp_path):
    path = _write(tmp_path, "invalidUserInput_none.txt", "")
    assert read_selected_course_ids(path) == set()


def test_invalid_user_input_non_numeric_strings(tmp_path):
    path = _write(
        tmp_path, "invalidUserInput_string.txt", "hello world abcde 12a45\n83112\n"
    )
    ids = read_selected_course_ids(path)
    assert ids == {"83112"}
    assert all(i.isdigit() for i in ids)


def test_duplicate_user_input_ids(tmp_path):
    path = _write(
        tmp_path, "duplicateUserInput.txt", "83112 83533 83112\n00001 83533\n"
    )
    assert read_selected_course_ids(path) == {"83112", "83533", "00001"}


def test_missing_user_input_file(tmp_path):
    assert read_selected_course_ids(tmp_path / "missing.txt") == set()


def test_missing_course_db_file(tmp_path):
    user = _write(tmp_path, "user.txt", VALID_USER_INPUT)
    assert parse_course_db(tmp_path / "missing.txt", user) == []


def test_parse_single_session_valid():
    assert parse_single_session("S,3,08:30,10:00,1401,12") == Session(
        3, "08:30", "10:00", "1401", "12"
    )


@pytest.mark.parametrize(
    "line",
    [
        "S,0,10:00,11:00,1,1",
        "S,8,10:00,11:00,1,1",
        "S,x,10:00,11:00,1,1",
        "S,1,1000,11:00,1,1",
        "S,1,11:00,10:00,1,1",
        "S,1,10:00,10:00,1,1",
        "S,1,10:00,11:00,12345,1",
        "S,1,10:00,11:00,1,1234",
        "S,1,10:00,11:00,,1",
        "",
    ],
)
def test_parse_single_session_rejects(line):
    with pytest.raises(ValueError):
        parse_single_session(line)


def test_parse_single_session_missing_room_reuses_last_field():
    session = parse_single_session("S,1,10:00,11:00,5")
    assert session.building_number == "5"
    assert session.room_number == "5"


def test_parse_multiple_sessions():
    sessions = parse_multiple_sessions("S,1,10:00,12:00,604,101 S,3,13:00,14:00,7,8")
    assert sessions == [
        Session(1, "10:00", "12:00", "604", "101"),
        Session(3, "13:00", "14:00", "7", "8"),
    ]


def test_parse_multiple_sessions_skips_malformed_parts():
    sessions = parse_multiple_sessions(
        "S,9,10:00,12:00,1,1 S,2,09:00,10:00,3,4 S,2,11:00,10:00,3,4"
    )
    assert sessions == [Session(2, "09:00", "10:00", "3", "4")]


def test_course_without_sessions_is_removed(tmp_path):
    db = _write(
        tmp_path,
        "db.txt",
        "Empty\n83112\nNobody\n$$$$\n"
        "Intro to CS\n83533\nDr. Levi\nL S,4,09:00,11:00,1401,5\n$$$$\n",
    )
    user = _write(tmp_path, "user.txt", "83112 83533\n")
    courses = parse_course_db(db, user)
    assert [c.id for c in courses] == [83533]


def test_only_sessionless_courses_gives_nothing(tmp_path):
    db = _write(tmp_path, "db.txt", "Empty\n83112\nNobody\n$$$$\n")
    user = _write(tmp_path, "user.txt", "83112\n")
    assert parse_course_db(db, user) == []


def test_unknown_session_format_stops_course(tmp_path):
    db = _write(
        tmp_path,
        "db.txt",
        "Calculus 1\n83112\nDr. Cohen\nL S,1,10:00,12:00,604,101\n"
        "X something\nT S,2,14:00,15:00,605,11\n$$$$\n",
    )
    user = _write(tmp_path, "user.txt", "83112\n")
    courses = parse_course_db(db, user)
    assert len(courses) == 1
    assert len(courses[0].lectures) == 1
    assert courses[0].tutorials == []


def test_duplicate_course_id_keeps_first(tmp_path):
    db = _write(
        tmp_path,
        "db.txt",
        "Calculus 1\n83112\nDr. Cohen\nL S,1,10:00,12:00,604,101\n$$$$\n"
        "Calculus copy\n83112\nDr. Other\nL S,2,10:00,12:00,1,1\n$$$$\n",
    )
    user = _write(tmp_path, "user.txt", "83112\n")
    courses = parse_course_db(db, user)
    assert len(courses) == 1
    assert courses[0].name == "Calculus 1"
    assert courses[0].lectures == [Session(1, "10:00", "12:00", "604", "101")]


def test_user_selects_nonexistent_course(tmp_path):
    db = _write(tmp_path, "db.txt", VALID_DB)
    user = _write(tmp_path, "user.txt", "99999\n")
    assert parse_course_db(db, user) == []


def test_user_selection_filters_courses(tmp_path):
    db = _write(tmp_path, "db.txt", VALID_DB)
    user = _write(tmp_path, "user.txt", "83533 99999\n")
    courses = parse_course_db(db, user)
    assert [c.id for c in courses] == [83533]


def test_too_many_user_ids_gives_nothing(tmp_path):
    db = _write(tmp_path, "db.txt", VALID_DB)
    user = _write(
        tmp_path, "user.txt", "83112 83533 00001 10004 10005 10006 10007 10008\n"
    )
    assert parse_course_db(db, user) == []