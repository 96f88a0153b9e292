from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import booking_metrics
from src.service.cinema_booking.domain.entity.booking_entity import Booking, BookingStatus


class UpdateBookingStatusUseCase:
    """
    Move a booking along pending -> confirmed -> cancelled.

    Seat availability is derived from booking status, so writing `cancelled`
    is what releases the seats. The write runs inside the showtime's critical
    section so it never interleaves with a submission's check-and-commit.
    """

    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
    ) -> Self:
        return cls(uow_factory=uow_factory)

    @Logger.io
    async def update_status(
        self,
        *,
        booking_id: int,
        new_status: BookingStatus,
        requester_id: Optional[int] = None,
    ) -> Booking:
        """
        Args:
            requester_id: when set, only the booking owner may change it

        Raises:
            NotFoundError: unknown booking
            ForbiddenError: requester does not own the booking
            InvalidTransitionError: transition not allowed, nothing changed
        """
        new_status = BookingStatus(new_status)
        with self.tracer.start_as_current_span(
            'use_case.update_booking_status',
            attributes={'booking.id': booking_id, 'booking.new_status': new_status.value},
        ):
            async with self.uow_factory() as uow:
                booking = await uow.booking_command_repo.get_by_id(booking_id=booking_id)
                if not booking:
                    raise NotFoundError('Booking not found')
                if requester_id is not None and booking.user_id != requester_id:
                    raise ForbiddenError('Only the owner can change this booking')

                async with uow.lock_showtime(showtime_id=booking.showtime_id):
                    # re-read: status may have changed while waiting for the lock
                    current = await uow.booking_command_repo.get_by_id(booking_id=booking_id)
                    assert current is not None
                    updated = current.transition_to(new_status)
                    await uow.booking_command_repo.update_status(
                        booking_id=booking_id, status=updated.status
                    )
                    await uow.commit()

            booking_metrics.record_status_transition(
                from_status=current.status.value, to_status=updated.status.value
            )
            Logger.base.info(
                f'🔄 [STATUS] Booking {booking_id}: {current.status.value} -> {updated.status.value}'
            )
            return updated

    async def cancel(self, *, booking_id: int, requester_id: Optional[int] = None) -> Booking:
        return await self.update_status(
            booking_id=booking_id, new_status=BookingStatus.CANCELLED, requester_id=requester_id
        )
