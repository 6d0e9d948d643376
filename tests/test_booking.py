import pytest

from puzzlekit.booking import DoubleBookingCalendar, SingleBookingCalendar


def test_single_calendar_example():
    calendar = SingleBookingCalendar()
    results = [calendar.book(s, e) for s, e in [(10, 20), (15, 25), (20, 30)]]
    assert results == [True, False, True]


def test_single_calendar_touching_is_allowed():
    calendar = SingleBookingCalendar()
    assert calendar.book(0, 5) is True
    assert calendar.book(5, 10) is True
    assert calendar.book(4, 6) is False


def test_single_calendar_rejected_booking_is_not_kept():
    calendar = SingleBookingCalendar()
    assert calendar.book(10, 20) is True
    assert calendar.book(0, 100) is False
    assert calendar.book(30, 40) is True


@pytest.mark.parametrize("start, end", [(10, 20), (12, 18), (5, 11), (19, 30)])
def test_single_calendar_rejects_any_overlap(start, end):
    calendar = SingleBookingCalendar()
    calendar.book(10, 20)
    assert calendar.book(start, end) is False


def test_double_calendar_example():
    calendar = DoubleBookingCalendar()
    events = [(10, 20), (50, 60), (10, 40), (5, 15), (5, 10), (25, 55)]
    results = [calendar.book(s, e) for s, e in events]
    assert results == [True, True, True, False, True, True]


def test_double_calendar_allows_double_not_triple():
    calendar = DoubleBookingCalendar()
    assert calendar.book(0, 10) is True
    assert calendar.book(0, 10) is True
    assert calendar.book(0, 10) is False
    assert calendar.book(10, 20) is True


def test_double_calendar_rejected_booking_adds_no_overlap():
    calendar = DoubleBookingCalendar()
    assert calendar.book(0, 10) is True
    assert calendar.book(5, 15) is True
    assert calendar.book(6, 8) is False
    assert calendar.book(12, 20) is True
    assert calendar.book(13, 14) is False