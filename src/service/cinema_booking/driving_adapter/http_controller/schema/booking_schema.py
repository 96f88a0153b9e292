from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from src.service.cinema_booking.domain.entity.booking_entity import Booking
from src.service.cinema_booking.driving_adapter.http_controller.schema.showtime_schema import (
    SeatAssignmentSchema,
    TicketLineSchema,
)


class BookingCreateRequest(BaseModel):
    showtime_id: int
    seat_selection: List[SeatAssignmentSchema]
    total_amount: Optional[int] = None  # informational, recomputed server-side
    ticket_lines: Optional[List[TicketLineSchema]] = None

    class Config:
        json_schema_extra = {
            'example': {
                'showtime_id': 1,
                'seat_selection': [
                    {'seat_id': 'A1', 'ticket_type': 'Adult', 'price': 1499},
                    {'seat_id': 'A2', 'ticket_type': 'Adult', 'price': 1499},
                    {'seat_id': 'A3', 'ticket_type': 'Child', 'price': 999},
                ],
                'total_amount': 3997,
            }
        }


class BookingSeatResponse(BaseModel):
    id: Optional[int] = None
    seat_id: str
    ticket_type: str
    price: int


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 42,
                'user_id': 2,
                'showtime_id': 1,
                'total_amount': 3997,
                'booking_reference': 'CT7K2M9QXA',
                'status': 'confirmed',
                'created_at': '2025-01-10T10:30:00Z',
                'seats': [{'id': 1, 'seat_id': 'A1', 'ticket_type': 'Adult', 'price': 1499}],
            }
        },
    }

    id: int
    user_id: int
    showtime_id: int
    total_amount: int
    booking_reference: str
    status: str
    created_at: Optional[datetime] = None
    seats: List[BookingSeatResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        if booking.id is None:
            raise ValueError('Booking ID should not be None after creation.')
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            showtime_id=booking.showtime_id,
            total_amount=booking.total_amount,
            booking_reference=booking.booking_reference,
            status=booking.status.value,
            created_at=booking.created_at,
            seats=[
                BookingSeatResponse(
                    id=seat.id,
                    seat_id=str(seat.seat_id),
                    ticket_type=seat.ticket_type,
                    price=seat.price,
                )
                for seat in booking.seats
            ],
        )


class BookingStatusUpdateRequest(BaseModel):
    status: Literal['pending', 'confirmed', 'cancelled']

    class Config:
        json_schema_extra = {'example': {'status': 'cancelled'}}


class CancelBookingResponse(BaseModel):
    id: int
    status: str
    released_seats: List[str]

    class Config:
        json_schema_extra = {'example': {'id': 42, 'status': 'cancelled', 'released_seats': ['A1']}}
