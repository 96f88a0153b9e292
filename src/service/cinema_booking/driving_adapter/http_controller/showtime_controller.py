from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.query.get_taken_seats_use_case import GetTakenSeatsUseCase
from src.service.cinema_booking.app.query.list_showtimes_use_case import ListShowtimesUseCase
from src.service.cinema_booking.app.query.preview_seat_selection_use_case import (
    PreviewSeatSelectionUseCase,
)
from src.service.cinema_booking.domain.value_object import SeatId, TicketLine
from src.service.cinema_booking.driving_adapter.http_controller.schema.showtime_schema import (
    SeatAssignmentSchema,
    SeatSelectionPreviewRequest,
    SeatSelectionPreviewResponse,
    ShowtimeResponse,
    TakenSeatsResponse,
)


router = APIRouter()


@router.get('', response_model=List[ShowtimeResponse])
@Logger.io
async def list_showtimes(
    movie_id: int,
    show_date: Optional[date] = Query(default=None, alias='date'),
    use_case: ListShowtimesUseCase = Depends(ListShowtimesUseCase.depends),
) -> List[ShowtimeResponse]:
    showtimes = await use_case.list_showtimes(movie_id=movie_id, show_date=show_date)
    return [ShowtimeResponse.from_entity(showtime) for showtime in showtimes]


@router.get('/{showtime_id}')
@Logger.io
async def get_showtime(
    showtime_id: int,
    use_case: ListShowtimesUseCase = Depends(ListShowtimesUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.get_showtime(showtime_id=showtime_id)
    return ShowtimeResponse.from_entity(showtime)


@router.get('/{showtime_id}/taken_seats')
@Logger.io
async def get_taken_seats(
    showtime_id: int,
    use_case: GetTakenSeatsUseCase = Depends(GetTakenSeatsUseCase.depends),
) -> TakenSeatsResponse:
    taken = await use_case.get_taken_seats(showtime_id=showtime_id)
    return TakenSeatsResponse(showtime_id=showtime_id, taken_seats=[str(s) for s in taken])


@router.post('/{showtime_id}/seat_selection/preview')
@Logger.io
async def preview_seat_selection(
    showtime_id: int,
    request: SeatSelectionPreviewRequest,
    use_case: PreviewSeatSelectionUseCase = Depends(PreviewSeatSelectionUseCase.depends),
) -> SeatSelectionPreviewResponse:
    ticket_lines = None
    if request.ticket_lines is not None:
        ticket_lines = [TicketLine(**line.model_dump()) for line in request.ticket_lines]

    selection = await use_case.preview(
        showtime_id=showtime_id,
        ticket_lines=ticket_lines,
        seat_ids=[SeatId.parse(seat_id) for seat_id in request.seat_ids],
    )
    return SeatSelectionPreviewResponse(
        assignments=[
            SeatAssignmentSchema(
                seat_id=str(assignment.seat_id),
                ticket_type=assignment.ticket_type,
                price=assignment.price,
            )
            for assignment in selection.assignments
        ],
        required_seat_count=selection.required_seat_count,
        total_price=selection.total_price,
        is_complete=selection.is_complete,
    )
