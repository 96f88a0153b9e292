import time
from collections import Counter
from typing import Callable, Optional, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    EmptySelectionError,
    InvalidSeatError,
    NotFoundError,
    SeatConflictError,
    StorageFailureError,
    TicketCountMismatchError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import booking_metrics
from src.service.cinema_booking.domain.booking_reference import generate_booking_reference
from src.service.cinema_booking.domain.entity.booking_entity import (
    Booking,
    BookingSeat,
    ensure_unique_seats,
)
from src.service.cinema_booking.domain.entity.showtime_entity import Showtime
from src.service.cinema_booking.domain.value_object import SeatAssignment, TicketLine


class SubmitBookingUseCase:
    """
    Commit a seat selection as a confirmed booking.

    Flow:
    1. Validate the request (showtime, non-empty, unique seats, layout, ticket counts)
    2. Enter the per-showtime critical section
    3. Re-read taken seats and reject every contested seat at once
    4. Write booking + booking seats and commit as one unit

    Any failure before commit leaves no trace: the unit of work rolls back.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        reference_prefix: str = 'CT',
        reference_length: int = 8,
        max_reference_attempts: int = 5,
    ) -> None:
        self.uow_factory = uow_factory
        self.reference_prefix = reference_prefix
        self.reference_length = reference_length
        self.max_reference_attempts = max_reference_attempts
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        reference_prefix: str = Depends(
            Provide[Container.config_service.provided.BOOKING_REFERENCE_PREFIX]
        ),
        reference_length: int = Depends(
            Provide[Container.config_service.provided.BOOKING_REFERENCE_LENGTH]
        ),
        max_reference_attempts: int = Depends(
            Provide[Container.config_service.provided.BOOKING_REFERENCE_MAX_ATTEMPTS]
        ),
    ) -> Self:
        return cls(
            uow_factory=uow_factory,
            reference_prefix=reference_prefix,
            reference_length=reference_length,
            max_reference_attempts=max_reference_attempts,
        )

    @Logger.io
    async def submit_booking(
        self,
        *,
        user_id: int,
        showtime_id: int,
        seat_selection: Sequence[SeatAssignment],
        expected_total: Optional[int] = None,
        ticket_lines: Optional[Sequence[TicketLine]] = None,
    ) -> Booking:
        """
        Raises:
            NotFoundError: unknown showtime
            EmptySelectionError / DuplicateSeatError / InvalidSeatError /
            TicketCountMismatchError: rejected selection
            SeatConflictError: some seats were taken by another booking
            StorageFailureError: persistence failed, nothing was written
        """
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.submit_booking',
            attributes={
                'user.id': user_id,
                'showtime.id': showtime_id,
                'booking.seat_count': len(seat_selection),
            },
        ) as span:
            try:
                booking = await self._submit(
                    user_id=user_id,
                    showtime_id=showtime_id,
                    seat_selection=seat_selection,
                    expected_total=expected_total,
                    ticket_lines=ticket_lines,
                )
            except SeatConflictError as e:
                booking_metrics.record_submission(result='conflict')
                booking_metrics.record_seat_conflict(
                    showtime_id=showtime_id, seat_count=len(e.seats)
                )
                raise
            except StorageFailureError:
                booking_metrics.record_submission(result='storage_failure')
                raise
            except Exception:
                booking_metrics.record_submission(result='rejected')
                raise
            finally:
                booking_metrics.booking_submit_duration.observe(time.perf_counter() - started)

            span.set_attribute('booking.id', booking.id or 0)
            span.set_attribute('booking.reference', booking.booking_reference)
            booking_metrics.record_submission(result='confirmed')
            return booking

    async def _submit(
        self,
        *,
        user_id: int,
        showtime_id: int,
        seat_selection: Sequence[SeatAssignment],
        expected_total: Optional[int],
        ticket_lines: Optional[Sequence[TicketLine]],
    ) -> Booking:
        async with self.uow_factory() as uow:
            showtime = await uow.showtime_query_repo.get_by_id(showtime_id=showtime_id)
            if not showtime:
                raise NotFoundError('Showtime not found')

            if not seat_selection:
                raise EmptySelectionError()
            ensure_unique_seats([assignment.seat_id for assignment in seat_selection])
            self._check_layout(showtime=showtime, seat_selection=seat_selection)
            if ticket_lines is not None:
                self._check_ticket_lines(seat_selection=seat_selection, ticket_lines=ticket_lines)

            total_amount = sum(assignment.price for assignment in seat_selection)
            if expected_total is not None and expected_total != total_amount:
                Logger.base.warning(
                    f'⚠️ [SUBMIT] Client total {expected_total} ignored, '
                    f'computed {total_amount} for showtime {showtime_id}'
                )

            async with uow.lock_showtime(showtime_id=showtime_id):
                taken = set(await uow.booking_query_repo.get_taken_seats(showtime_id=showtime_id))
                contested = sorted(a.seat_id for a in seat_selection if a.seat_id in taken)
                if contested:
                    Logger.base.info(
                        f'🚫 [SUBMIT] Showtime {showtime_id}: seats already taken {contested}'
                    )
                    raise SeatConflictError([str(seat_id) for seat_id in contested])

                booking = Booking.create(
                    user_id=user_id,
                    showtime_id=showtime_id,
                    seat_selection=seat_selection,
                    booking_reference=await self._new_reference(uow),
                )
                created = await uow.booking_command_repo.create(booking=booking)
                assert created.id is not None

                seats: list[BookingSeat] = []
                for seat in booking.seats:
                    seats.append(
                        await uow.booking_command_repo.create_seat(booking_id=created.id, seat=seat)
                    )

                await uow.commit()

        Logger.base.info(
            f'✅ [SUBMIT] Booking {created.booking_reference} confirmed: '
            f'{len(seats)} seats, total {created.total_amount}'
        )
        created.seats = seats
        return created

    async def _new_reference(self, uow: AbstractUnitOfWork) -> str:
        for _ in range(self.max_reference_attempts):
            reference = generate_booking_reference(
                prefix=self.reference_prefix, length=self.reference_length
            )
            if not await uow.booking_command_repo.reference_exists(booking_reference=reference):
                return reference
        Logger.base.error(
            f'❌ [SUBMIT] No free booking reference after {self.max_reference_attempts} attempts'
        )
        raise StorageFailureError('Could not allocate a booking reference, please retry')

    @staticmethod
    def _check_layout(*, showtime: Showtime, seat_selection: Sequence[SeatAssignment]) -> None:
        if showtime.screen is None:
            return
        layout = showtime.screen.seat_layout
        outside = [str(a.seat_id) for a in seat_selection if not layout.contains(a.seat_id)]
        if outside:
            raise InvalidSeatError(f'Seats not on this screen: {", ".join(outside)}')

    @staticmethod
    def _check_ticket_lines(
        *, seat_selection: Sequence[SeatAssignment], ticket_lines: Sequence[TicketLine]
    ) -> None:
        prices = {line.ticket_type: line.unit_price for line in ticket_lines}
        for assignment in seat_selection:
            if assignment.ticket_type not in prices:
                raise TicketCountMismatchError(f'Unknown ticket type: {assignment.ticket_type}')
            if assignment.price != prices[assignment.ticket_type]:
                raise TicketCountMismatchError(
                    f'Price of {assignment.seat_id} does not match {assignment.ticket_type} tickets'
                )

        selected = Counter(assignment.ticket_type for assignment in seat_selection)
        for line in ticket_lines:
            if selected[line.ticket_type] != line.count:
                raise TicketCountMismatchError(
                    f'{line.ticket_type}: {line.count} tickets but '
                    f'{selected[line.ticket_type]} seats selected'
                )
