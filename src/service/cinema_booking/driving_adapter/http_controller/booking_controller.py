from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.command.submit_booking_use_case import SubmitBookingUseCase
from src.service.cinema_booking.app.command.update_booking_status_use_case import (
    UpdateBookingStatusUseCase,
)
from src.service.cinema_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.cinema_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.cinema_booking.domain.value_object import SeatAssignment, SeatId, TicketLine
from src.service.cinema_booking.driving_adapter.http_controller.auth.role_auth import (
    CurrentUser,
    get_current_user,
)
from src.service.cinema_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    CancelBookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('/my_booking', response_model=List[BookingResponse])
@Logger.io
async def list_my_bookings(
    booking_status: str = '',
    current_user: CurrentUser = Depends(get_current_user),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_user_bookings(user_id=current_user.id, status=booking_status)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    use_case: SubmitBookingUseCase = Depends(SubmitBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('showtime_id', request.showtime_id)
        span.set_attribute('user_id', current_user.id)

        seat_selection = [
            SeatAssignment(
                seat_id=SeatId.parse(item.seat_id), ticket_type=item.ticket_type, price=item.price
            )
            for item in request.seat_selection
        ]
        ticket_lines = None
        if request.ticket_lines is not None:
            ticket_lines = [TicketLine(**line.model_dump()) for line in request.ticket_lines]

        booking = await use_case.submit_booking(
            user_id=current_user.id,
            showtime_id=request.showtime_id,
            seat_selection=seat_selection,
            expected_total=request.total_amount,
            ticket_lines=ticket_lines,
        )
        return BookingResponse.from_entity(booking)


@router.get('/reference/{booking_reference}')
@Logger.io
async def get_booking_by_reference(
    booking_reference: str,
    current_user: CurrentUser = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking_by_reference(booking_reference=booking_reference)
    return BookingResponse.from_entity(booking)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(
        booking_id=booking_id, requester_id=current_user.id, is_admin=current_user.is_admin
    )
    return BookingResponse.from_entity(booking)


@router.patch('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_booking(
    booking_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    use_case: UpdateBookingStatusUseCase = Depends(UpdateBookingStatusUseCase.depends),
) -> CancelBookingResponse:
    booking = await use_case.cancel(booking_id=booking_id, requester_id=current_user.id)
    return CancelBookingResponse(
        id=booking_id,
        status=booking.status.value,
        released_seats=[str(seat_id) for seat_id in booking.seat_ids],
    )
