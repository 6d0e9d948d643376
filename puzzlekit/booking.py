"""Calendars that accept half-open bookings ``[start, end)``."""

from __future__ import annotations


def _overlap(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int] | None:
    start, end = max(a[0], b[0]), min(a[1], b[1])
    return (start, end) if start < end else None


class SingleBookingCalendar:
    """A calendar that refuses any booking overlapping an existing one."""

    def __init__(self) -> None:
        self._bookings: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        """Add ``[start, end)`` unless it overlaps a booking; return whether it was added."""
        event = (start, end)
        if any(_overlap(event, booked) for booked in self._bookings):
            return False
        self._bookings.append(event)
        return True


class DoubleBookingCalendar:
    """A calendar that refuses any booking that would cause a triple overlap."""

    def __init__(self) -> None:
        self._bookings: list[tuple[int, int]] = []
        self._overlaps: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        """Add ``[start, end)`` unless it creates a triple booking; return whether it was added."""
        event = (start, end)
        if any(_overlap(event, double) for double in self._overlaps):
            return False
        for booked in self._bookings:
            shared = _overlap(event, booked)
            if shared is not None:
                self._overlaps.append(shared)
        self._bookings.append(event)
        return True