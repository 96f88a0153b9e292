from collections import Counter
from datetime import datetime, timezone
from enum import StrEnum
from typing import List, Optional, Sequence

import attrs

from src.platform.exception.exceptions import (
    DuplicateSeatError,
    EmptySelectionError,
    InvalidTransitionError,
)
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.domain.value_object import SeatAssignment, SeatId


class BookingStatus(StrEnum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'


# cancelled is terminal
ALLOWED_STATUS_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
}


def ensure_unique_seats(seat_ids: Sequence[SeatId]) -> None:
    duplicates = sorted(seat_id for seat_id, count in Counter(seat_ids).items() if count > 1)
    if duplicates:
        raise DuplicateSeatError([str(seat_id) for seat_id in duplicates])


@attrs.define
class BookingSeat:
    seat_id: SeatId
    ticket_type: str
    price: int
    booking_id: Optional[int] = None
    id: Optional[int] = None


@attrs.define
class Booking:
    user_id: int
    showtime_id: int
    total_amount: int
    booking_reference: str
    status: BookingStatus = BookingStatus.CONFIRMED
    seats: List[BookingSeat] = attrs.field(factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        showtime_id: int,
        seat_selection: Sequence[SeatAssignment],
        booking_reference: str,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> 'Booking':
        """
        Build a new booking from a seat selection.

        The total is always recomputed from the selected seats' prices.

        Raises:
            EmptySelectionError: no seats selected
            DuplicateSeatError: a seat appears more than once
        """
        if not seat_selection:
            raise EmptySelectionError()
        ensure_unique_seats([assignment.seat_id for assignment in seat_selection])

        seats = [
            BookingSeat(
                seat_id=assignment.seat_id,
                ticket_type=assignment.ticket_type,
                price=assignment.price,
            )
            for assignment in seat_selection
        ]
        return cls(
            user_id=user_id,
            showtime_id=showtime_id,
            total_amount=sum(seat.price for seat in seats),
            booking_reference=booking_reference,
            status=status,
            seats=seats,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_active(self) -> bool:
        """Active bookings hold their seats."""
        return self.status != BookingStatus.CANCELLED

    @property
    def seat_ids(self) -> list[SeatId]:
        return [seat.seat_id for seat in self.seats]

    def can_transition_to(self, new_status: BookingStatus) -> bool:
        return new_status in ALLOWED_STATUS_TRANSITIONS[self.status]

    @Logger.io
    def transition_to(self, new_status: BookingStatus) -> 'Booking':
        """
        Raises:
            InvalidTransitionError: transition not allowed from the current status
        """
        if not self.can_transition_to(new_status):
            raise InvalidTransitionError(self.status.value, BookingStatus(new_status).value)
        return attrs.evolve(self, status=new_status)

    def cancel(self) -> 'Booking':
        return self.transition_to(BookingStatus.CANCELLED)
