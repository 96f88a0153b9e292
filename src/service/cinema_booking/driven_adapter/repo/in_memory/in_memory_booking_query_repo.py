from typing import List, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.cinema_booking.domain.entity.booking_entity import Booking
from src.service.cinema_booking.domain.value_object import SeatId
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_store import (
    InMemoryStore,
)


class InMemoryBookingQueryRepo(IBookingQueryRepo):
    """Reads committed state only"""

    def __init__(self, *, store: InMemoryStore) -> None:
        self.store = store

    def _with_seats(self, booking: Booking) -> Booking:
        assert booking.id is not None
        return attrs.evolve(booking, seats=self.store.seats_of(booking.id))

    def _filtered(self, bookings: List[Booking], status: str) -> List[Booking]:
        if status:
            bookings = [booking for booking in bookings if booking.status == status]
        bookings.sort(key=lambda booking: booking.id or 0, reverse=True)
        return [self._with_seats(booking) for booking in bookings]

    @Logger.io
    async def get_taken_seats(self, *, showtime_id: int) -> List[SeatId]:
        taken: set[SeatId] = set()
        for booking_id in self.store.booking_ids_by_showtime.get(showtime_id, []):
            if self.store.bookings[booking_id].is_active:
                taken.update(seat.seat_id for seat in self.store.seats_of(booking_id))
        return sorted(taken)

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        booking = self.store.bookings.get(booking_id)
        return self._with_seats(booking) if booking else None

    @Logger.io
    async def get_by_reference(self, *, booking_reference: str) -> Optional[Booking]:
        booking_id = self.store.booking_id_by_reference.get(booking_reference)
        if booking_id is None:
            return None
        return self._with_seats(self.store.bookings[booking_id])

    @Logger.io(truncate_content=True)  # type: ignore
    async def list_by_user(self, *, user_id: int, status: str = '') -> List[Booking]:
        bookings = [b for b in self.store.bookings.values() if b.user_id == user_id]
        return self._filtered(bookings, status)

    @Logger.io(truncate_content=True)  # type: ignore
    async def list_all(self, *, status: str = '') -> List[Booking]:
        return self._filtered(list(self.store.bookings.values()), status)
