from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema_booking.domain.entity.booking_entity import Booking
from src.service.cinema_booking.domain.value_object import SeatId


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_taken_seats(self, *, showtime_id: int) -> List[SeatId]:
        """Seats of every non-cancelled booking of the showtime, sorted"""
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def get_by_reference(self, *, booking_reference: str) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: int, status: str = '') -> List[Booking]:
        """Newest first; empty status means no filter"""
        pass

    @abstractmethod
    async def list_all(self, *, status: str = '') -> List[Booking]:
        pass
