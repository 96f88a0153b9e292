from typing import Optional

import attrs

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.cinema_booking.domain.entity.booking_entity import (
    Booking,
    BookingSeat,
    BookingStatus,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_store import (
    InMemoryStore,
    StagedChanges,
)


class InMemoryBookingCommandRepo(IBookingCommandRepo):
    """
    Stages writes on the owning unit of work.

    Lookups see the unit's own staged rows on top of the committed store.
    """

    def __init__(self, *, store: InMemoryStore, staged: StagedChanges) -> None:
        self.store = store
        self.staged = staged

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        created = attrs.evolve(booking, id=self.store.next_booking_id(), seats=[])
        self.staged.bookings.append(created)
        return created

    @Logger.io
    async def create_seat(self, *, booking_id: int, seat: BookingSeat) -> BookingSeat:
        created = attrs.evolve(seat, id=self.store.next_seat_id(), booking_id=booking_id)
        self.staged.seats.append(created)
        return created

    @Logger.io
    async def update_status(self, *, booking_id: int, status: BookingStatus) -> Booking:
        booking = await self.get_by_id(booking_id=booking_id)
        if booking is None:
            raise NotFoundError('Booking not found')
        self.staged.status_updates[booking_id] = status
        return attrs.evolve(booking, status=status)

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        booking = self.store.bookings.get(booking_id)
        if booking is None:
            booking = next((b for b in self.staged.bookings if b.id == booking_id), None)
        if booking is None:
            return None

        seats = self.store.seats_of(booking_id) + [
            seat for seat in self.staged.seats if seat.booking_id == booking_id
        ]
        status = self.staged.status_updates.get(booking_id, booking.status)
        return attrs.evolve(booking, seats=seats, status=status)

    @Logger.io
    async def reference_exists(self, *, booking_reference: str) -> bool:
        if booking_reference in self.store.booking_id_by_reference:
            return True
        return any(b.booking_reference == booking_reference for b in self.staged.bookings)
