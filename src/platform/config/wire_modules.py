"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.cinema_booking.app.command import (
    submit_booking_use_case,
    update_booking_status_use_case,
)
from src.service.cinema_booking.app.query import (
    get_booking_use_case,
    get_taken_seats_use_case,
    list_bookings_use_case,
    list_showtimes_use_case,
    preview_seat_selection_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    submit_booking_use_case,
    update_booking_status_use_case,
    get_booking_use_case,
    get_taken_seats_use_case,
    list_bookings_use_case,
    list_showtimes_use_case,
    preview_seat_selection_use_case,
]
