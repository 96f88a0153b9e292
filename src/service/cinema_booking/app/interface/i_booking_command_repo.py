from abc import ABC, abstractmethod
from typing import Optional

from src.service.cinema_booking.domain.entity.booking_entity import (
    Booking,
    BookingSeat,
    BookingStatus,
)


class IBookingCommandRepo(ABC):
    """
    Booking writes. Always used through a unit of work: nothing written here
    is visible to other readers before the unit commits.
    """

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """Persist the booking row and return it with `id` assigned (seats not included)"""
        pass

    @abstractmethod
    async def create_seat(self, *, booking_id: int, seat: BookingSeat) -> BookingSeat:
        pass

    @abstractmethod
    async def update_status(self, *, booking_id: int, status: BookingStatus) -> Booking:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def reference_exists(self, *, booking_reference: str) -> bool:
        pass
