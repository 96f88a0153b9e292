from typing import List, Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.cinema_booking.domain.entity.booking_entity import Booking, BookingStatus
from src.service.cinema_booking.domain.value_object import SeatId
from src.service.cinema_booking.driven_adapter.model import BookingModel, BookingSeatModel
from src.service.cinema_booking.driven_adapter.repo.sqlalchemy_repo_base import (
    SqlAlchemyRepoBase,
    booking_to_entity,
)


class BookingQueryRepoImpl(SqlAlchemyRepoBase, IBookingQueryRepo):
    @Logger.io
    async def get_taken_seats(self, *, showtime_id: int) -> List[SeatId]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingSeatModel.seat_number)
                .join(BookingModel, BookingSeatModel.booking_id == BookingModel.id)
                .where(
                    BookingModel.showtime_id == showtime_id,
                    BookingModel.status != BookingStatus.CANCELLED.value,
                )
                .distinct()
            )
            return sorted(SeatId.parse(seat_number) for seat_number in result.scalars())

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == booking_id)
            )
            db_booking = result.scalar_one_or_none()
            return booking_to_entity(db_booking) if db_booking else None

    @Logger.io
    async def get_by_reference(self, *, booking_reference: str) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.booking_reference == booking_reference)
            )
            db_booking = result.scalar_one_or_none()
            return booking_to_entity(db_booking) if db_booking else None

    @Logger.io(truncate_content=True)  # type: ignore
    async def list_by_user(self, *, user_id: int, status: str = '') -> List[Booking]:
        async with self._get_session() as session:
            query = select(BookingModel).where(BookingModel.user_id == user_id)
            if status:
                query = query.where(BookingModel.status == status)

            result = await session.execute(
                query.order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )
            return [booking_to_entity(db_booking) for db_booking in result.scalars().all()]

    @Logger.io(truncate_content=True)  # type: ignore
    async def list_all(self, *, status: str = '') -> List[Booking]:
        async with self._get_session() as session:
            query = select(BookingModel)
            if status:
                query = query.where(BookingModel.status == status)

            result = await session.execute(
                query.order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )
            return [booking_to_entity(db_booking) for db_booking in result.scalars().all()]
