from datetime import datetime
from typing import Optional

import attrs

from src.service.cinema_booking.domain.value_object import SeatLayout


@attrs.define
class Screen:
    id: int
    cinema_id: int
    name: str
    seat_layout: SeatLayout

    @property
    def total_seats(self) -> int:
        return self.seat_layout.rows * self.seat_layout.seats_per_row


@attrs.define
class Showtime:
    id: int
    movie_id: int
    screen_id: int
    start_time: datetime
    end_time: datetime
    price: int  # per seat, minor currency units
    screen: Optional[Screen] = None
