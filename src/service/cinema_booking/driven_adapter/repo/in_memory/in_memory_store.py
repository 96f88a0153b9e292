"""
In-memory booking store

Arena-with-index storage used by local runs and tests: every record lives in
an id-keyed dict, secondary indexes point back at ids. Writes only reach the
store through `apply`, which runs without awaiting so a staged unit of work
becomes visible in one step.
"""

import itertools
from collections import defaultdict

import attrs

from src.platform.state.keyed_lock import KeyedLock
from src.service.cinema_booking.domain.entity.booking_entity import (
    Booking,
    BookingSeat,
    BookingStatus,
)
from src.service.cinema_booking.domain.entity.showtime_entity import Screen, Showtime


@attrs.define
class StagedChanges:
    bookings: list[Booking] = attrs.field(factory=list)
    seats: list[BookingSeat] = attrs.field(factory=list)
    status_updates: dict[int, BookingStatus] = attrs.field(factory=dict)

    def clear(self) -> None:
        self.bookings.clear()
        self.seats.clear()
        self.status_updates.clear()

    def __bool__(self) -> bool:
        return bool(self.bookings or self.seats or self.status_updates)


class InMemoryStore:
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.screens: dict[int, Screen] = {}
        self.showtimes: dict[int, Showtime] = {}
        self.bookings: dict[int, Booking] = {}
        self.booking_seats: dict[int, BookingSeat] = {}

        self.seat_ids_by_booking: dict[int, list[int]] = defaultdict(list)
        self.booking_ids_by_showtime: dict[int, list[int]] = defaultdict(list)
        self.booking_id_by_reference: dict[str, int] = {}

        self.showtime_locks = KeyedLock(name='showtime')
        self._booking_ids = itertools.count(1)
        self._seat_ids = itertools.count(1)

    # Catalog seeding (catalog CRUD lives outside this service)
    def add_screen(self, screen: Screen) -> Screen:
        self.screens[screen.id] = screen
        return screen

    def add_showtime(self, showtime: Showtime) -> Showtime:
        self.showtimes[showtime.id] = showtime
        return showtime

    def next_booking_id(self) -> int:
        return next(self._booking_ids)

    def next_seat_id(self) -> int:
        return next(self._seat_ids)

    def seats_of(self, booking_id: int) -> list[BookingSeat]:
        seat_ids = self.seat_ids_by_booking.get(booking_id, [])
        return [self.booking_seats[seat_id] for seat_id in seat_ids]

    def apply(self, changes: StagedChanges) -> None:
        for booking in changes.bookings:
            assert booking.id is not None
            stored = attrs.evolve(booking, seats=[])
            self.bookings[booking.id] = stored
            self.booking_ids_by_showtime[booking.showtime_id].append(booking.id)
            self.booking_id_by_reference[booking.booking_reference] = booking.id

        for seat in changes.seats:
            assert seat.id is not None and seat.booking_id is not None
            self.booking_seats[seat.id] = seat
            self.seat_ids_by_booking[seat.booking_id].append(seat.id)

        for booking_id, status in changes.status_updates.items():
            self.bookings[booking_id] = attrs.evolve(self.bookings[booking_id], status=status)
