from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageFailureError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.domain.entity.booking_entity import (
    Booking,
    BookingSeat,
    BookingStatus,
)
from src.service.cinema_booking.domain.entity.showtime_entity import Screen, Showtime
from src.service.cinema_booking.domain.value_object import SeatId, SeatLayout
from src.service.cinema_booking.driven_adapter.model import (
    BookingModel,
    BookingSeatModel,
    ScreenModel,
    ShowtimeModel,
)


class SqlAlchemyRepoBase:
    def __init__(
        self,
        *,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Get session for query execution.

        If session is injected (from UoW), yield it directly without context management.
        Otherwise, use session_factory context manager.
        Driver errors surface as StorageFailureError.
        """
        try:
            if self.session is not None:
                yield self.session
            elif self.session_factory is not None:
                async with self.session_factory() as session:
                    yield session
            else:
                raise RuntimeError('No session or session_factory available')
        except SQLAlchemyError as e:
            Logger.base.error(f'❌ [DB] {type(e).__name__}: {e}')
            raise StorageFailureError() from e


def seat_to_entity(db_seat: BookingSeatModel) -> BookingSeat:
    return BookingSeat(
        seat_id=SeatId.parse(db_seat.seat_number),
        ticket_type=db_seat.ticket_type,
        price=db_seat.price,
        booking_id=db_seat.booking_id,
        id=db_seat.id,
    )


def booking_to_entity(db_booking: BookingModel, *, with_seats: bool = True) -> Booking:
    return Booking(
        id=db_booking.id,
        user_id=db_booking.user_id,
        showtime_id=db_booking.showtime_id,
        total_amount=db_booking.total_amount,
        booking_reference=db_booking.booking_reference,
        status=BookingStatus(db_booking.status),
        seats=[seat_to_entity(seat) for seat in db_booking.seats] if with_seats else [],
        created_at=db_booking.created_at,
    )


def screen_to_entity(db_screen: ScreenModel) -> Screen:
    return Screen(
        id=db_screen.id,
        cinema_id=db_screen.cinema_id,
        name=db_screen.name,
        seat_layout=SeatLayout.from_dict(db_screen.seat_layout),
    )


def showtime_to_entity(db_showtime: ShowtimeModel) -> Showtime:
    return Showtime(
        id=db_showtime.id,
        movie_id=db_showtime.movie_id,
        screen_id=db_showtime.screen_id,
        start_time=db_showtime.start_time,
        end_time=db_showtime.end_time,
        price=db_showtime.price,
        screen=screen_to_entity(db_showtime.screen) if db_showtime.screen else None,
    )
