"""
Booking Command Repository Implementation

All writes run on the unit of work session and only flush; the unit of work
decides whether they commit.
"""

from typing import Optional

from sqlalchemy import exists, select

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.cinema_booking.domain.entity.booking_entity import (
    Booking,
    BookingSeat,
    BookingStatus,
)
from src.service.cinema_booking.driven_adapter.model import BookingModel, BookingSeatModel
from src.service.cinema_booking.driven_adapter.repo.sqlalchemy_repo_base import (
    SqlAlchemyRepoBase,
    booking_to_entity,
    seat_to_entity,
)


class BookingCommandRepoImpl(SqlAlchemyRepoBase, IBookingCommandRepo):
    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            db_booking = BookingModel(
                user_id=booking.user_id,
                showtime_id=booking.showtime_id,
                total_amount=booking.total_amount,
                booking_reference=booking.booking_reference,
                status=booking.status.value,
                created_at=booking.created_at,
            )
            session.add(db_booking)
            await session.flush()
            return booking_to_entity(db_booking, with_seats=False)

    @Logger.io
    async def create_seat(self, *, booking_id: int, seat: BookingSeat) -> BookingSeat:
        async with self._get_session() as session:
            db_seat = BookingSeatModel(
                booking_id=booking_id,
                seat_number=str(seat.seat_id),
                ticket_type=seat.ticket_type,
                price=seat.price,
            )
            session.add(db_seat)
            await session.flush()
            return seat_to_entity(db_seat)

    @Logger.io
    async def update_status(self, *, booking_id: int, status: BookingStatus) -> Booking:
        async with self._get_session() as session:
            db_booking = await session.get(BookingModel, booking_id)
            if db_booking is None:
                raise NotFoundError('Booking not found')
            db_booking.status = status.value
            await session.flush()
            return booking_to_entity(db_booking)

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == booking_id)
            )
            db_booking = result.scalar_one_or_none()
            return booking_to_entity(db_booking) if db_booking else None

    @Logger.io
    async def reference_exists(self, *, booking_reference: str) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(exists().where(BookingModel.booking_reference == booking_reference))
            )
            return bool(result.scalar())
