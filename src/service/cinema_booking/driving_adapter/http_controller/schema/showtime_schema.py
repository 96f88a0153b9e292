from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.service.cinema_booking.domain.entity.showtime_entity import Showtime


class SeatLayoutResponse(BaseModel):
    rows: int
    seats_per_row: int
    row_labels: List[str]


class ScreenResponse(BaseModel):
    id: int
    cinema_id: int
    name: str
    total_seats: int
    seat_layout: SeatLayoutResponse


class ShowtimeResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'movie_id': 7,
                'screen_id': 2,
                'start_time': '2025-06-01T19:30:00Z',
                'end_time': '2025-06-01T21:45:00Z',
                'price': 1499,
                'screen': None,
            }
        },
    }

    id: int
    movie_id: int
    screen_id: int
    start_time: datetime
    end_time: datetime
    price: int
    screen: Optional[ScreenResponse] = None

    @classmethod
    def from_entity(cls, showtime: Showtime) -> 'ShowtimeResponse':
        screen = None
        if showtime.screen is not None:
            screen = ScreenResponse(
                id=showtime.screen.id,
                cinema_id=showtime.screen.cinema_id,
                name=showtime.screen.name,
                total_seats=showtime.screen.total_seats,
                seat_layout=SeatLayoutResponse(**showtime.screen.seat_layout.to_dict()),
            )
        return cls(
            id=showtime.id,
            movie_id=showtime.movie_id,
            screen_id=showtime.screen_id,
            start_time=showtime.start_time,
            end_time=showtime.end_time,
            price=showtime.price,
            screen=screen,
        )


class TakenSeatsResponse(BaseModel):
    showtime_id: int
    taken_seats: List[str]

    class Config:
        json_schema_extra = {'example': {'showtime_id': 1, 'taken_seats': ['A1', 'A2', 'C7']}}


class TicketLineSchema(BaseModel):
    ticket_type: str = Field(min_length=1, max_length=50)
    unit_price: int = Field(ge=0)
    count: int = Field(default=0, ge=0)


class SeatSelectionPreviewRequest(BaseModel):
    ticket_lines: Optional[List[TicketLineSchema]] = None  # default catalog when omitted
    seat_ids: List[str]  # click order matters

    class Config:
        json_schema_extra = {
            'example': {
                'ticket_lines': [
                    {'ticket_type': 'Adult', 'unit_price': 1499, 'count': 2},
                    {'ticket_type': 'Child', 'unit_price': 999, 'count': 1},
                ],
                'seat_ids': ['A1', 'A2', 'A3'],
            }
        }


class SeatAssignmentSchema(BaseModel):
    seat_id: str
    ticket_type: str
    price: int


class SeatSelectionPreviewResponse(BaseModel):
    assignments: List[SeatAssignmentSchema]
    required_seat_count: int
    total_price: int
    is_complete: bool
