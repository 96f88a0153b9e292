from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.cinema_booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_booking(
        self, *, booking_id: int, requester_id: int, is_admin: bool = False
    ) -> Booking:
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError('Booking not found')
        if not is_admin and booking.user_id != requester_id:
            raise ForbiddenError('You can only view your own bookings')
        return booking

    @Logger.io
    async def get_booking_by_reference(self, *, booking_reference: str) -> Booking:
        """Lookup by the code printed on the ticket; the code itself is the credential."""
        booking = await self.booking_query_repo.get_by_reference(
            booking_reference=booking_reference.strip().upper()
        )
        if not booking:
            raise NotFoundError('Booking not found')
        return booking
