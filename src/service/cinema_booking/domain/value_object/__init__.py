from src.service.cinema_booking.domain.value_object.seat_id import SeatId
from src.service.cinema_booking.domain.value_object.seat_layout import SeatLayout
from src.service.cinema_booking.domain.value_object.ticket_line import (
    DEFAULT_TICKET_LINES,
    SeatAssignment,
    TicketLine,
)


__all__ = [
    'DEFAULT_TICKET_LINES',
    'SeatAssignment',
    'SeatId',
    'SeatLayout',
    'TicketLine',
]
