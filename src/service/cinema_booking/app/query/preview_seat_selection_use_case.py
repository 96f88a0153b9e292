from typing import Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidSeatError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.cinema_booking.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.cinema_booking.domain.seat_allocation import SeatSelection
from src.service.cinema_booking.domain.value_object import DEFAULT_TICKET_LINES, SeatId, TicketLine


class PreviewSeatSelectionUseCase:
    """
    Replay seat clicks against the current taken set.

    Gives clients the same ticket-to-seat assignment the booking page computes,
    without reserving anything.
    """

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
    async def preview(
        self,
        *,
        showtime_id: int,
        ticket_lines: Sequence[TicketLine] | None,
        seat_ids: Sequence[SeatId],
    ) -> SeatSelection:
        showtime = await self.showtime_query_repo.get_by_id(showtime_id=showtime_id)
        if not showtime:
            raise NotFoundError('Showtime not found')

        if showtime.screen is not None:
            outside = [str(s) for s in seat_ids if not showtime.screen.seat_layout.contains(s)]
            if outside:
                raise InvalidSeatError(f'Seats not on this screen: {", ".join(outside)}')

        taken = set(await self.booking_query_repo.get_taken_seats(showtime_id=showtime_id))
        selection = SeatSelection(ticket_lines=ticket_lines or DEFAULT_TICKET_LINES)
        selection.toggle_all(seat_ids, taken_seats=taken)
        return selection
