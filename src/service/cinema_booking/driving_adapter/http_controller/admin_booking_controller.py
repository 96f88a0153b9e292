from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.command.update_booking_status_use_case import (
    UpdateBookingStatusUseCase,
)
from src.service.cinema_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.cinema_booking.domain.entity.booking_entity import BookingStatus
from src.service.cinema_booking.driving_adapter.http_controller.auth.role_auth import (
    CurrentUser,
    require_admin,
)
from src.service.cinema_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingResponse,
    BookingStatusUpdateRequest,
)


router = APIRouter()


@router.get('', response_model=List[BookingResponse])
@Logger.io
async def list_all_bookings(
    booking_status: str = '',
    current_user: CurrentUser = Depends(require_admin),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_all_bookings(status=booking_status)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.put('/{booking_id}/status')
@Logger.io
async def update_booking_status(
    booking_id: int,
    request: BookingStatusUpdateRequest,
    current_user: CurrentUser = Depends(require_admin),
    use_case: UpdateBookingStatusUseCase = Depends(UpdateBookingStatusUseCase.depends),
) -> BookingResponse:
    booking = await use_case.update_status(
        booking_id=booking_id, new_status=BookingStatus(request.status)
    )
    return BookingResponse.from_entity(booking)
