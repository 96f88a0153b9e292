"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.cinema_booking.driven_adapter.model.booking_model import BookingModel
from src.service.cinema_booking.driven_adapter.model.booking_seat_model import BookingSeatModel
from src.service.cinema_booking.driven_adapter.model.screen_model import ScreenModel
from src.service.cinema_booking.driven_adapter.model.showtime_model import ShowtimeModel

__all__ = [
    'BookingModel',
    'BookingSeatModel',
    'ScreenModel',
    'ShowtimeModel',
]
