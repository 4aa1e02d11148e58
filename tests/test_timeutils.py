import pytest

from schedulify.models import Session
from schedulify.timeutils import is_overlap, to_minutes


def make_session(day, start, end):
    return Session(day, start, end)


@pytest.mark.parametrize(
    "text, expected",
    [("00:00", 0), ("01:00", 60), ("12:30", 750), ("23:59", 1439)],
)
def test_to_minutes_valid_times(text, expected):
    assert to_minutes(text) == expected


def test_same_day_overlapping():
    s1 = make_session(1, "10:00", "12:00")
    s2 = make_session(1, "11:00", "13:00")
    assert is_overlap(s1, s2) is True


def test_same_day_touching_not_overlapping():
    s1 = make_session(1, "10:00", "11:00")
    s2 = make_session(1, "11:00", "12:00")
    assert is_overlap(s1, s2) is False


def test_different_days():
    s1 = make_session(1, "09:00", "10:00")
    s2 = make_session(2, "09:00", "10:00")
    assert is_overlap(s1, s2) is False


def test_fully_contained():
    s1 = make_session(3, "10:00", "14:00")
    s2 = make_session(3, "11:00", "13:00")
    assert is_overlap(s1, s2) is True


def test_reversed_time_range():
    s1 = make_session(1, "12:00", "10:00")
    s2 = make_session(1, "09:00", "11:00")
    assert is_overlap(s1, s2) is False


@pytest.mark.parametrize("text", ["invalid", "25:61", "10", ":30", "13:"])
def test_to_minutes_invalid_format(text):
    with pytest.raises(ValueError):
        to_minutes(text)


def test_overlap_with_none_is_false():
    s = make_session(1, "09:00", "10:00")
    assert is_overlap(None, s) is False
    assert is_overlap(s, None) is False


def test_overlap_with_bad_time_is_false():
    s1 = make_session(1, "bad", "10:00")
    s2 = make_session(1, "09:00", "10:00")
    assert is_overlap(s1, s2) is False


def test_overlap_is_symmetric():
    s1 = make_session(4, "08:00", "09:30")
    s2 = make_session(4, "09:00", "10:00")
    assert is_overlap(s1, s2) == is_overlap(s2, s1) is True