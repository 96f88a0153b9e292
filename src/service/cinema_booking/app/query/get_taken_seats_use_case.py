from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.cinema_booking.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.cinema_booking.domain.value_object import SeatId


class GetTakenSeatsUseCase:
    """Lock-free read of the seats held by pending or confirmed bookings; may be stale."""

    def __init__(
        self, *, booking_query_repo: IBookingQueryRepo, showtime_query_repo: IShowtimeQueryRepo
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.showtime_query_repo = showtime_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        showtime_query_repo: IShowtimeQueryRepo = Depends(Provide[Container.showtime_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo, showtime_query_repo=showtime_query_repo)

    @Logger.io
    async def get_taken_seats(self, *, showtime_id: int) -> List[SeatId]:
        showtime = await self.showtime_query_repo.get_by_id(showtime_id=showtime_id)
        if not showtime:
            raise NotFoundError('Showtime not found')
        return await self.booking_query_repo.get_taken_seats(showtime_id=showtime_id)
